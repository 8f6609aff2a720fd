"""Derived behaviour for enums: counting, iteration, messages, properties,
discriminant enums and variant names."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .case_style import convert_case
from .meta import (
    Meta,
    MetaList,
    MetaSyntaxError,
    NameValue,
    extract_meta,
    find_attribute,
    find_properties,
    find_unique_property,
    is_disabled,
    parse_meta,
)
from .model import EnumDef, Value, Variant
from .strings import case_style_of

_BASE_DERIVES = ("Clone", "Copy", "Debug", "PartialEq", "Eq")


def _check_value(enum_def: EnumDef, value: Value) -> None:
    if value.enum != enum_def.name:
        raise TypeError(f"{value!r} is not a value of {enum_def.name}")
    enum_def.variant(value.variant)


def enum_count(enum_def: EnumDef) -> int:
    """The number of variants, disabled ones included."""
    return len(enum_def.variants)


def count_constant_name(enum_def: EnumDef) -> str:
    """The name of the constant holding the variant count, e.g. ``WEEK_COUNT``."""
    return f"{enum_def.name.upper()}_COUNT"


class EnumIter:
    """An iterator over the enabled variants, each with default field values.

    It knows how many values remain and can be copied at its current position.
    """

    def __init__(self, enum_def: EnumDef, variants: tuple[str, ...], index: int = 0):
        self._enum_def = enum_def
        self._variants = variants
        self._index = index

    def __iter__(self) -> EnumIter:
        return self

    def __next__(self) -> Value:
        if self._index >= len(self._variants):
            raise StopIteration
        name = self._variants[self._index]
        self._index += 1
        return self._enum_def.default_value(name)

    def __len__(self) -> int:
        return max(len(self._variants) - self._index, 0)

    def copy(self) -> EnumIter:
        """An independent iterator at the same position."""
        return EnumIter(self._enum_def, self._variants, self._index)


def enum_iter(enum_def: EnumDef) -> EnumIter:
    """Iterate over the enabled variants of ``enum_def`` in declaration order."""
    if enum_def.lifetimes:
        raise ValueError(
            "Enum Iterator isn't supported on Enums with lifetimes. The resulting "
            "enums would be unbounded."
        )
    enabled = [v for v in enum_def.variants if not is_disabled(v.meta())]
    for variant in enabled:
        for position, field in enumerate(variant.fields):
            if field.default is None:
                label = field.name if field.name is not None else position
                raise TypeError(
                    f"field {label} of variant {enum_def.name}.{variant.name} "
                    "has no default value"
                )
    return EnumIter(enum_def, tuple(v.name for v in enabled))


@dataclass(frozen=True)
class MessageTable:
    """Messages and serializations attached to each variant."""

    enum_def: EnumDef
    messages: dict[str, str]
    detailed_messages: dict[str, str]
    serializations: dict[str, tuple[str, ...]]

    def get_message(self, value: Value) -> str | None:
        """The variant's ``message``, if any."""
        _check_value(self.enum_def, value)
        return self.messages.get(value.variant)

    def get_detailed_message(self, value: Value) -> str | None:
        """The variant's ``detailed_message``, falling back to its ``message``."""
        _check_value(self.enum_def, value)
        return self.detailed_messages.get(value.variant)

    def get_serializations(self, value: Value) -> tuple[str, ...]:
        """The variant's ``serialize`` names, or its identifier alone."""
        _check_value(self.enum_def, value)
        return self.serializations[value.variant]


def enum_messages(enum_def: EnumDef) -> MessageTable:
    """Collect the ``message`` and ``detailed_message`` settings of each variant."""
    messages: dict[str, str] = {}
    detailed: dict[str, str] = {}
    serializations: dict[str, tuple[str, ...]] = {}

    for variant in enum_def.variants:
        metas = variant.meta()
        message = find_unique_property(metas, "strum", "message")
        detailed_message = find_unique_property(metas, "strum", "detailed_message")

        names = find_properties(metas, "strum", "serialize") or [variant.name]
        serializations[variant.name] = tuple(names)

        if is_disabled(metas):
            continue
        if message is not None:
            messages[variant.name] = message
        if detailed_message is not None:
            detailed[variant.name] = detailed_message
        elif message is not None:
            detailed[variant.name] = message

    return MessageTable(enum_def, messages, detailed, serializations)


@dataclass(frozen=True)
class PropertyTable:
    """String properties attached to each variant."""

    enum_def: EnumDef
    strings: dict[str, dict[str, str]]

    def get_str(self, value: Value, prop: str) -> str | None:
        """The string property ``prop`` of the value's variant, if set."""
        _check_value(self.enum_def, value)
        return self.strings.get(value.variant, {}).get(prop)

    def get_int(self, value: Value, prop: str) -> int | None:
        """Integer properties are not exposed; always None."""
        _check_value(self.enum_def, value)
        return None

    def get_bool(self, value: Value, prop: str) -> bool | None:
        """Boolean properties are not exposed; always None."""
        _check_value(self.enum_def, value)
        return None


def _properties(metas: list[Meta]) -> list[NameValue]:
    return [
        prop
        for inner in find_attribute(metas, "strum")
        if isinstance(inner, MetaList) and inner.path.is_ident("props")
        for prop in inner.expand_inner()
        if isinstance(prop, NameValue)
    ]


def enum_properties(enum_def: EnumDef) -> PropertyTable:
    """Collect the ``props(key = "value", ...)`` settings of each enabled variant."""
    strings: dict[str, dict[str, str]] = {}
    for variant in enum_def.variants:
        metas = variant.meta()
        if is_disabled(metas):
            continue
        table: dict[str, str] = {}
        for prop in _properties(metas):
            if isinstance(prop.value, str):
                table.setdefault(prop.path.last, prop.value)
        strings[variant.name] = table
    return PropertyTable(enum_def, strings)


@dataclass(frozen=True)
class Discriminants:
    """A field-less enum mirroring the variants of another enum."""

    source: str
    enum_def: EnumDef
    derives: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.enum_def.name

    def from_value(self, value: Value) -> Value:
        """The discriminant of a value of the source enum."""
        if value.enum != self.source:
            raise TypeError(f"{value!r} is not a value of {self.source}")
        return self.enum_def.make(value.variant)


def _keeps_attr(attr: str | Meta) -> bool:
    meta = attr
    if isinstance(attr, str):
        try:
            meta = parse_meta(attr)
        except MetaSyntaxError:
            return True
    return not meta.path.is_ident("strum")


def enum_discriminants(enum_def: EnumDef) -> Discriminants:
    """Build the discriminant enum of ``enum_def``.

    Its name is ``<Name>Discriminants`` unless ``strum_discriminants(name(...))``
    gives another. ``derive(...)`` items add to the derives, and every other
    item inside ``strum_discriminants`` becomes an attribute of the new enum.
    Variant attributes are copied over, except ``strum`` ones.
    """
    attrs = find_attribute(enum_def.meta(), "strum_discriminants")

    derives = _BASE_DERIVES + tuple(
        str(meta.path) for meta in find_attribute(attrs, "derive")
    )

    name_lists = [
        meta for meta in attrs if isinstance(meta, MetaList) and meta.path.is_ident("name")
    ]
    if len(name_lists) > 1:
        raise ValueError("Expecting a single attribute 'name' in EnumDiscriminants.")
    name = f"{enum_def.name}Discriminants"
    if name_lists:
        inner = name_lists[0].expand_inner()
        if inner:
            name = str(inner[0].path)

    passed = tuple(
        meta
        for meta in attrs
        if not meta.path.is_ident("derive") and not meta.path.is_ident("name")
    )

    variants = tuple(
        Variant(variant.name, attrs=tuple(filter(_keeps_attr, variant.attrs)))
        for variant in enum_def.variants
    )
    generated = EnumDef(name, variants, attrs=passed)
    return Discriminants(enum_def.name, generated, derives)


def enum_variant_names(enum_def: EnumDef) -> tuple[str, ...]:
    """Every variant identifier, in the enum's ``serialize_all`` case style."""
    style = case_style_of(enum_def)
    return tuple(convert_case(variant.name, style) for variant in enum_def.variants)


def _iterate(enum_def: EnumDef) -> Iterator[Any]:
    yield from enum_iter(enum_def)