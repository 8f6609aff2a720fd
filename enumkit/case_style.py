"""Case styles for turning variant identifiers into serialized names."""

from __future__ import annotations

import re
from enum import Enum
from itertools import pairwise

_SEPARATORS = re.compile(r"[\W_]+")

_LOWER = "lower"
_UPPER = "upper"


class CaseStyle(Enum):
    """A naming convention that can be applied to an identifier."""

    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "PascalCase"
    KEBAB_CASE = "kebab-case"
    SNAKE_CASE = "snake_case"
    SHOUTY_SNAKE_CASE = "SCREAMING_SNAKE_CASE"
    SCREAMING_KEBAB_CASE = "SCREAMING-KEBAB-CASE"
    LOWER_CASE = "lowercase"
    UPPER_CASE = "UPPERCASE"
    TITLE_CASE = "title_case"
    MIXED_CASE = "mixed_case"

    @classmethod
    def parse(cls, text: str) -> CaseStyle:
        """Return the style named by a ``serialize_all`` value."""
        try:
            return _ALIASES[text]
        except KeyError:
            valid = ", ".join(f'"{style.value}"' for style in cls)
            raise ValueError(
                f"Unexpected case style for serialize_all: `{text}`. "
                f"Valid values are: `[{valid}]`"
            ) from None


_ALIASES = {
    "camel_case": CaseStyle.PASCAL_CASE,
    "PascalCase": CaseStyle.PASCAL_CASE,
    "camelCase": CaseStyle.CAMEL_CASE,
    "snake_case": CaseStyle.SNAKE_CASE,
    "snek_case": CaseStyle.SNAKE_CASE,
    "kebab_case": CaseStyle.KEBAB_CASE,
    "kebab-case": CaseStyle.KEBAB_CASE,
    "SCREAMING-KEBAB-CASE": CaseStyle.SCREAMING_KEBAB_CASE,
    "shouty_snake_case": CaseStyle.SHOUTY_SNAKE_CASE,
    "shouty_snek_case": CaseStyle.SHOUTY_SNAKE_CASE,
    "SCREAMING_SNAKE_CASE": CaseStyle.SHOUTY_SNAKE_CASE,
    "title_case": CaseStyle.TITLE_CASE,
    "mixed_case": CaseStyle.MIXED_CASE,
    "lowercase": CaseStyle.LOWER_CASE,
    "UPPERCASE": CaseStyle.UPPER_CASE,
}


def _char_mode(char: str, mode: str | None) -> str | None:
    if char.islower():
        return _LOWER
    if char.isupper():
        return _UPPER
    return mode


def split_words(text: str) -> list[str]:
    """Split an identifier into words at separators and case changes.

    A lower-case letter followed by an upper-case one ends a word, and a run
    of capitals followed by a lower-case letter gives its last capital to the
    next word (``XMLHttp`` becomes ``XML`` and ``Http``).
    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(text):
        if not chunk:
            continue
        start = 0
        mode: str | None = None
        for index, (char, following) in enumerate(pairwise(chunk)):
            next_mode = _char_mode(char, mode)
            if next_mode == _LOWER and following.isupper():
                words.append(chunk[start : index + 1])
                start = index + 1
                mode = None
            elif mode == _UPPER and char.isupper() and following.islower():
                words.append(chunk[start:index])
                start = index
                mode = None
            else:
                mode = next_mode
        words.append(chunk[start:])
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_snake_case(text: str) -> str:
    """``DarkBlack`` -> ``dark_black``."""
    return "_".join(word.lower() for word in split_words(text))


def to_kebab_case(text: str) -> str:
    """``DarkBlack`` -> ``dark-black``."""
    return "-".join(word.lower() for word in split_words(text))


def to_shouty_snake_case(text: str) -> str:
    """``DarkBlack`` -> ``DARK_BLACK``."""
    return "_".join(word.upper() for word in split_words(text))


def to_camel_case(text: str) -> str:
    """Upper camel case: ``dark_black`` -> ``DarkBlack``."""
    return "".join(_capitalize(word) for word in split_words(text))


def to_mixed_case(text: str) -> str:
    """Lower camel case: ``dark_black`` -> ``darkBlack``."""
    words = split_words(text)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(_capitalize(word) for word in rest)


def to_title_case(text: str) -> str:
    """``DarkBlack`` -> ``Dark Black``."""
    return " ".join(_capitalize(word) for word in split_words(text))


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


_CONVERTERS = {
    CaseStyle.PASCAL_CASE: to_camel_case,
    CaseStyle.KEBAB_CASE: to_kebab_case,
    CaseStyle.MIXED_CASE: to_mixed_case,
    CaseStyle.SHOUTY_SNAKE_CASE: to_shouty_snake_case,
    CaseStyle.SNAKE_CASE: to_snake_case,
    CaseStyle.TITLE_CASE: to_title_case,
    CaseStyle.UPPER_CASE: str.upper,
    CaseStyle.LOWER_CASE: str.lower,
    CaseStyle.SCREAMING_KEBAB_CASE: lambda text: to_kebab_case(text).upper(),
    CaseStyle.CAMEL_CASE: lambda text: _lower_first(to_camel_case(text)),
}


def convert_case(ident: str, case_style: CaseStyle | None) -> str:
    """Apply ``case_style`` to ``ident``; with no style it is returned as is."""
    if case_style is None:
        return ident
    return _CONVERTERS[case_style](ident)