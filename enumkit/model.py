"""Enum definitions, their values, and the error raised when parsing fails."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .meta import Meta, extract_meta


class ParseError(ValueError):
    """Raised when no variant of an enum matches a string."""

    description = (
        "Unable to find a variant of the given enum matching the string given. "
        "Matching can be extended with the Serialize attribute and is case sensitive."
    )

    def __init__(self, text: str | None = None) -> None:
        super().__init__("Matching variant not found")
        self.text = text


class FieldKind(Enum):
    """How a variant holds its data."""

    UNIT = "unit"
    UNNAMED = "unnamed"
    NAMED = "named"


@dataclass(frozen=True)
class Field:
    """A variant field; ``default`` builds its default value, if it has one."""

    name: str | None = None
    default: Callable[[], Any] | None = None


@dataclass(frozen=True)
class Variant:
    """One variant of an enum, with its fields and attributes."""

    name: str
    fields: tuple[Field, ...] = ()
    attrs: tuple[str | Meta, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "attrs", tuple(self.attrs))
        named = [field.name for field in self.fields if field.name is not None]
        if named and len(named) != len(self.fields):
            raise ValueError(f"variant {self.name} mixes named and unnamed fields")
        if len(set(named)) != len(named):
            raise ValueError(f"variant {self.name} has duplicate field names")

    @property
    def kind(self) -> FieldKind:
        if not self.fields:
            return FieldKind.UNIT
        if self.fields[0].name is None:
            return FieldKind.UNNAMED
        return FieldKind.NAMED

    def meta(self) -> list[Meta]:
        """The parsed attributes of this variant."""
        return extract_meta(self.attrs)

    def default_fields(self) -> tuple[Any, ...]:
        """Default values for every field, in declaration order."""
        values = []
        for position, field in enumerate(self.fields):
            if field.default is None:
                label = field.name if field.name is not None else position
                raise TypeError(
                    f"field {label} of variant {self.name} has no default value"
                )
            values.append(field.default())
        return tuple(values)


@dataclass(frozen=True, repr=False)
class Value:
    """A value of an enum: the variant chosen and the data it carries."""

    enum: str
    variant: str
    args: tuple[Any, ...] = ()
    kwargs: tuple[tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        kwargs = self.kwargs
        if isinstance(kwargs, Mapping):
            kwargs = kwargs.items()
        object.__setattr__(self, "kwargs", tuple(kwargs))

    def __getitem__(self, key: int | str) -> Any:
        if isinstance(key, str):
            for name, value in self.kwargs:
                if name == key:
                    return value
            raise KeyError(key)
        return self.args[key]

    def __repr__(self) -> str:
        head = f"{self.enum}.{self.variant}"
        if self.kwargs:
            inner = ", ".join(f"{name}={value!r}" for name, value in self.kwargs)
            return f"{head}({inner})"
        if self.args:
            return f"{head}({', '.join(map(repr, self.args))})"
        return head


@dataclass(frozen=True)
class EnumDef:
    """An enum definition: its name, variants, attributes and generics."""

    name: str
    variants: tuple[Variant, ...] = ()
    attrs: tuple[str | Meta, ...] = ()
    lifetimes: tuple[str, ...] = ()
    type_params: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        variants = tuple(
            Variant(item) if isinstance(item, str) else item for item in self.variants
        )
        names = [variant.name for variant in variants]
        if len(set(names)) != len(names):
            raise ValueError(f"enum {self.name} has duplicate variant names")
        object.__setattr__(self, "variants", variants)
        object.__setattr__(self, "attrs", tuple(self.attrs))
        object.__setattr__(self, "lifetimes", tuple(self.lifetimes))
        object.__setattr__(self, "type_params", tuple(self.type_params))

    def meta(self) -> list[Meta]:
        """The parsed attributes of the enum itself."""
        return extract_meta(self.attrs)

    def variant(self, name: str) -> Variant:
        """The variant called ``name``."""
        found = next((v for v in self.variants if v.name == name), None)
        if found is None:
            raise KeyError(f"{self.name} has no variant {name!r}")
        return found

    def make(self, name: str, *args: Any, **kwargs: Any) -> Value:
        """Build a value of variant ``name`` from its field values."""
        variant = self.variant(name)
        kind = variant.kind
        if kind is FieldKind.UNIT:
            if args or kwargs:
                raise TypeError(f"{self.name}.{name} takes no fields")
            return Value(self.name, name)
        if kind is FieldKind.UNNAMED:
            if kwargs or len(args) != len(variant.fields):
                raise TypeError(
                    f"{self.name}.{name} takes {len(variant.fields)} positional fields"
                )
            return Value(self.name, name, args)
        names = [field.name for field in variant.fields]
        if args or set(kwargs) != set(names):
            raise TypeError(f"{self.name}.{name} takes the fields {', '.join(names)}")
        return Value(self.name, name, kwargs=tuple((key, kwargs[key]) for key in names))

    def default_value(self, name: str) -> Value:
        """A value of variant ``name`` with every field at its default."""
        variant = self.variant(name)
        defaults = variant.default_fields()
        if variant.kind is FieldKind.NAMED:
            names = [field.name for field in variant.fields]
            return self.make(name, **dict(zip(names, defaults)))
        return self.make(name, *defaults)