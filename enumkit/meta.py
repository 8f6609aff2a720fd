"""Attribute meta items: parsing and lookup of ``strum(...)`` style settings."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

Literal = Union[str, int, float, bool]

_INT_SUFFIXES = frozenset(
    "u8 u16 u32 u64 u128 usize i8 i16 i32 i64 i128 isize".split()
)
_FLOAT_SUFFIXES = frozenset({"f32", "f64"})


class MetaSyntaxError(ValueError):
    """Raised when attribute text is not a valid meta item."""


@dataclass(frozen=True)
class Path:
    """A path such as ``strum`` or ``a::b``."""

    segments: tuple[str, ...]
    leading_colon: bool = False

    def __post_init__(self) -> None:
        segments = self.segments
        if isinstance(segments, str):
            segments = segments.split("::")
        segments = tuple(segments)
        if not segments or not all(segments):
            raise MetaSyntaxError(f"invalid path {self.segments!r}")
        object.__setattr__(self, "segments", segments)

    @property
    def path(self) -> Path:
        return self

    @property
    def last(self) -> str:
        return self.segments[-1]

    def is_ident(self, name: str) -> bool:
        """True when the path is the single identifier ``name``."""
        return not self.leading_colon and self.segments == (name,)

    def __str__(self) -> str:
        return ("::" if self.leading_colon else "") + "::".join(self.segments)


@dataclass(frozen=True)
class NameValue:
    """A ``name = literal`` item."""

    path: Path
    value: Literal

    def __str__(self) -> str:
        return f"{self.path} = {_render_literal(self.value)}"


@dataclass(frozen=True)
class MetaList:
    """A ``name(item, item, ...)`` item whose entries are metas or literals."""

    path: Path
    nested: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "nested", tuple(self.nested))

    def expand_inner(self) -> list[Meta]:
        """The nested meta items, without bare literals."""
        return [item for item in self.nested if isinstance(item, _META_TYPES)]

    def __str__(self) -> str:
        inner = ", ".join(
            str(item) if isinstance(item, _META_TYPES) else _render_literal(item)
            for item in self.nested
        )
        return f"{self.path}({inner})"


Meta = Union[Path, NameValue, MetaList]
_META_TYPES = (Path, NameValue, MetaList)


def _render_literal(value: Literal) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


_LEX_PATTERN = re.compile(
    r"""
      (?P<space>\s+)
    | (?P<string>"(?:[^"\\]|\\.)*")
    | (?P<number>[0-9][0-9_]*(?:\.[0-9][0-9_]*)?(?:[A-Za-z][A-Za-z0-9_]*)?)
    | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<punct>::|[=(),])
    """,
    re.VERBOSE | re.DOTALL,
)

_NUMBER = re.compile(r"([0-9][0-9_]*)(\.[0-9][0-9_]*)?([A-Za-z][A-Za-z0-9_]*)?")

_ESCAPE = re.compile(
    r"\\(?:x([0-9a-fA-F]{2})|u\{([0-9a-fA-F_]{1,6})\}|\n\s*|(.))", re.DOTALL
)
_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


def _replace_escape(match: re.Match) -> str:
    hex_byte, unicode, simple = match.groups()
    if hex_byte:
        return chr(int(hex_byte, 16))
    if unicode:
        return chr(int(unicode.replace("_", ""), 16))
    if simple is None:
        return ""
    try:
        return _SIMPLE_ESCAPES[simple]
    except KeyError:
        raise MetaSyntaxError(f"unknown escape sequence \\{simple}") from None


def _unescape(body: str) -> str:
    return _ESCAPE.sub(_replace_escape, body)


def _parse_number(text: str) -> int | float:
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise MetaSyntaxError(f"invalid number {text!r}")
    whole, fraction, suffix = match.groups()
    digits = whole.replace("_", "") + (fraction or "").replace("_", "")
    if suffix is not None and suffix not in _INT_SUFFIXES | _FLOAT_SUFFIXES:
        raise MetaSyntaxError(f"invalid suffix {suffix!r} on number {text!r}")
    if fraction is not None and suffix in _INT_SUFFIXES:
        raise MetaSyntaxError(f"integer suffix on float {text!r}")
    if fraction is not None or suffix in _FLOAT_SUFFIXES:
        return float(digits)
    return int(digits)


def _lex(text: str) -> list[tuple[str, str]]:
    lexemes = []
    pos = 0
    while pos < len(text):
        match = _LEX_PATTERN.match(text, pos)
        if match is None:
            raise MetaSyntaxError(f"unexpected character {text[pos]!r} at offset {pos}")
        if match.lastgroup != "space":
            lexemes.append((match.lastgroup, match.group()))
        pos = match.end()
    return lexemes


def _is_bool(lexeme: tuple[str, str]) -> bool:
    return lexeme[0] == "ident" and lexeme[1] in ("true", "false")


class _Parser:
    def __init__(self, lexemes: list[tuple[str, str]]) -> None:
        self._lexemes = lexemes
        self._pos = 0

    def _peek(self) -> tuple[str, str] | None:
        return self._lexemes[self._pos] if self._pos < len(self._lexemes) else None

    def _take(self) -> tuple[str, str]:
        lexeme = self._peek()
        if lexeme is None:
            raise MetaSyntaxError("unexpected end of input")
        self._pos += 1
        return lexeme

    def _accept(self, kind: str, text: str) -> bool:
        if self._peek() == (kind, text):
            self._pos += 1
            return True
        return False

    def _expect(self, kind: str, text: str) -> None:
        lexeme = self._take()
        if lexeme != (kind, text):
            raise MetaSyntaxError(f"expected {text!r}, found {lexeme[1]!r}")

    def finish(self) -> None:
        lexeme = self._peek()
        if lexeme is not None:
            raise MetaSyntaxError(f"unexpected trailing input {lexeme[1]!r}")

    def meta(self) -> Meta:
        path = self._path()
        if self._accept("punct", "="):
            return NameValue(path, self._literal())
        if self._accept("punct", "("):
            nested = []
            if not self._accept("punct", ")"):
                while True:
                    nested.append(self._nested())
                    if self._accept("punct", ")"):
                        break
                    self._expect("punct", ",")
                    if self._accept("punct", ")"):
                        break
            return MetaList(path, tuple(nested))
        return path

    def _nested(self) -> Meta | Literal:
        lexeme = self._peek()
        if lexeme is None:
            raise MetaSyntaxError("unexpected end of input")
        if lexeme[0] in ("string", "number") or _is_bool(lexeme):
            return self._literal()
        return self.meta()

    def _path(self) -> Path:
        leading = self._accept("punct", "::")
        segments = [self._ident()]
        while self._accept("punct", "::"):
            segments.append(self._ident())
        return Path(tuple(segments), leading)

    def _ident(self) -> str:
        lexeme = self._take()
        if lexeme[0] != "ident" or _is_bool(lexeme):
            raise MetaSyntaxError(f"expected identifier, found {lexeme[1]!r}")
        return lexeme[1]

    def _literal(self) -> Literal:
        kind, text = self._take()
        if kind == "string":
            return _unescape(text[1:-1])
        if kind == "number":
            return _parse_number(text)
        if _is_bool((kind, text)):
            return text == "true"
        raise MetaSyntaxError(f"expected literal, found {text!r}")


def parse_meta(text: str) -> Meta:
    """Parse one attribute, with or without its ``#[...]`` wrapper."""
    source = text.strip()
    if source.startswith("#[") and source.endswith("]"):
        source = source[2:-1]
    parser = _Parser(_lex(source))
    meta = parser.meta()
    parser.finish()
    return meta


def extract_meta(attrs: Iterable[str | Meta]) -> list[Meta]:
    """Parse attributes, skipping those that are not valid meta items."""
    metas = []
    for attr in attrs:
        if isinstance(attr, _META_TYPES):
            metas.append(attr)
            continue
        try:
            metas.append(parse_meta(attr))
        except MetaSyntaxError:
            continue
    return metas


def find_attribute(metas: Iterable[Meta], attr: str) -> list[Meta]:
    """The items nested inside every ``attr(...)`` list, in order."""
    return [
        inner
        for meta in metas
        if isinstance(meta, MetaList) and meta.path.is_ident(attr)
        for inner in meta.expand_inner()
    ]


def find_properties(metas: Iterable[Meta], attr: str, prop: str) -> list[str]:
    """Every string value of ``prop = "..."`` inside ``attr(...)`` lists."""
    return [
        meta.value
        for meta in find_attribute(metas, attr)
        if isinstance(meta, NameValue)
        and isinstance(meta.value, str)
        and meta.path.is_ident(prop)
    ]


def find_unique_property(metas: Iterable[Meta], attr: str, prop: str) -> str | None:
    """The single value of ``prop``, or None; more than one is an error."""
    values = find_properties(metas, attr, prop)
    if len(values) > 1:
        raise ValueError(f"More than one property: {prop} found on variant")
    return values[0] if values else None


def is_disabled(metas: Iterable[Meta]) -> bool:
    """True when ``strum(disabled = "true")`` is present."""
    values = find_properties(metas, "strum", "disabled")
    if len(values) > 1:
        raise ValueError("Can't have multiple values for 'disabled'")
    return bool(values) and values[0] == "true"