"""String conversions for enum values: parsing, display and static names."""

from __future__ import annotations

from collections.abc import Callable

from .case_style import CaseStyle, convert_case
from .meta import find_properties, find_unique_property, is_disabled
from .model import EnumDef, FieldKind, ParseError, Value, Variant

_AS_REF_DISABLED = "as_ref() or as_static() called on disabled variant."


class DisabledVariantError(RuntimeError):
    """Raised when a disabled variant is asked for its string form."""


def case_style_of(enum_def: EnumDef) -> CaseStyle | None:
    """The style named by the enum's ``serialize_all`` setting, if any."""
    style = find_unique_property(enum_def.meta(), "strum", "serialize_all")
    return None if style is None else CaseStyle.parse(style)


def _resolve(enum_def: EnumDef, variant: Variant | str) -> Variant:
    return enum_def.variant(variant) if isinstance(variant, str) else variant


def _output_name(variant: Variant, case_style: CaseStyle | None) -> str:
    metas = variant.meta()
    explicit = find_unique_property(metas, "strum", "to_string")
    if explicit is not None:
        return explicit
    serializations = sorted(find_properties(metas, "strum", "serialize"), key=len)
    if serializations:
        # The longest wins; among equally long ones, the last declared.
        return serializations[-1]
    return convert_case(variant.name, case_style)


def serialized_name(enum_def: EnumDef, variant: Variant | str) -> str:
    """The name a variant is written as: ``to_string``, else the longest
    ``serialize``, else its identifier in the enum's case style."""
    return _output_name(_resolve(enum_def, variant), case_style_of(enum_def))


def _require_defaults(enum_def: EnumDef, variant: Variant) -> None:
    for position, field in enumerate(variant.fields):
        if field.default is None:
            label = field.name if field.name is not None else position
            raise TypeError(
                f"field {label} of variant {enum_def.name}.{variant.name} "
                "has no default value"
            )


def from_string(enum_def: EnumDef) -> Callable[[str], Value]:
    """Build a parser from strings to values of ``enum_def``.

    A string matches a variant's ``serialize`` and ``to_string`` names, or
    its identifier in the enum's case style when it has neither. Fields are
    filled with their defaults. A variant marked ``default = "true"`` takes
    every unmatched string as its single field; without one, an unmatched
    string raises :class:`ParseError`.
    """
    case_style = case_style_of(enum_def)
    lookup: dict[str, str] = {}
    default_variant: str | None = None

    for variant in enum_def.variants:
        metas = variant.meta()
        names = find_properties(metas, "strum", "serialize")
        names += find_properties(metas, "strum", "to_string")

        if is_disabled(metas):
            continue

        if find_unique_property(metas, "strum", "default") == "true":
            if default_variant is not None:
                raise ValueError("Can't have multiple default variants")
            if variant.kind is not FieldKind.UNNAMED or len(variant.fields) != 1:
                raise ValueError(
                    "Default only works on unit structs with a single String parameter"
                )
            default_variant = variant.name
            continue

        _require_defaults(enum_def, variant)
        if not names:
            names = [convert_case(variant.name, case_style)]
        for name in names:
            lookup.setdefault(name, variant.name)

    def parse(text: str) -> Value:
        name = lookup.get(text)
        if name is not None:
            return enum_def.default_value(name)
        if default_variant is not None:
            return enum_def.make(default_variant, text)
        raise ParseError(text)

    return parse


def _renderer(enum_def: EnumDef, disabled_message: str) -> Callable[[Value], str]:
    case_style = case_style_of(enum_def)
    table: dict[str, str | None] = {
        variant.name: None
        if is_disabled(variant.meta())
        else _output_name(variant, case_style)
        for variant in enum_def.variants
    }

    def render(value: Value) -> str:
        if value.enum != enum_def.name:
            raise TypeError(f"{value!r} is not a value of {enum_def.name}")
        try:
            output = table[value.variant]
        except KeyError:
            raise TypeError(
                f"{enum_def.name} has no variant {value.variant!r}"
            ) from None
        if output is None:
            raise DisabledVariantError(disabled_message)
        return output

    return render


def to_string(enum_def: EnumDef) -> Callable[[Value], str]:
    """Build a function giving each value's serialized name."""
    return _renderer(enum_def, "to_string() called on disabled variant.")


def display(enum_def: EnumDef) -> Callable[[Value], str]:
    """Build a function formatting each value as its serialized name."""
    return _renderer(enum_def, "fmt() called on disabled variant.")


def as_ref_str(enum_def: EnumDef) -> Callable[[Value], str]:
    """Build a function giving each value's name as a borrowed string."""
    return _renderer(enum_def, _AS_REF_DISABLED)


def as_static_str(enum_def: EnumDef) -> Callable[[Value], str]:
    """Build a function giving each value's name as a static string."""
    return _renderer(enum_def, _AS_REF_DISABLED)


def into_static_str(enum_def: EnumDef) -> Callable[[Value], str]:
    """Build a function converting each value into its static name."""
    return _renderer(enum_def, _AS_REF_DISABLED)