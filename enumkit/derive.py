"""Apply several derives to one enum definition by name."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Any

from .derives import (
    Discriminants,
    EnumIter,
    MessageTable,
    PropertyTable,
    count_constant_name,
    enum_count,
    enum_discriminants,
    enum_iter,
    enum_messages,
    enum_properties,
    enum_variant_names,
)
from .model import EnumDef, Value
from .strings import (
    as_ref_str,
    as_static_str,
    display,
    from_string,
    into_static_str,
    to_string,
)

DEBUG_VARIABLE = "ENUMKIT_DEBUG"

_NAMES = (
    "EnumString",
    "AsRefStr",
    "EnumVariantNames",
    "AsStaticStr",
    "IntoStaticStr",
    "ToString",
    "Display",
    "EnumIter",
    "EnumMessage",
    "EnumProperty",
    "EnumDiscriminants",
    "EnumCount",
)

# Every derive answers to its plain name and to a ``Strum``-prefixed one.
_CANONICAL = {alias: name for name in _NAMES for alias in (name, f"Strum{name}")}


@dataclass(frozen=True)
class Derived:
    """What the requested derives produced for one enum.

    Fields for derives that were not requested stay None.
    """

    enum_def: EnumDef
    derives: tuple[str, ...] = ()
    from_str: Callable[[str], Value] | None = None
    to_string: Callable[[Value], str] | None = None
    display: Callable[[Value], str] | None = None
    as_ref: Callable[[Value], str] | None = None
    as_static: Callable[[Value], str] | None = None
    into_static: Callable[[Value], str] | None = None
    iter: Callable[[], EnumIter] | None = None
    messages: MessageTable | None = None
    properties: PropertyTable | None = None
    discriminants: Discriminants | None = None
    discriminant_derived: Derived | None = None
    count: int | None = None
    count_name: str | None = None
    variant_names: tuple[str, ...] | None = field(default=None)

    def __str__(self) -> str:
        lines = [f"{self.enum_def.name} derives {', '.join(self.derives) or 'nothing'}"]
        if self.count is not None:
            lines.append(f"  const {self.count_name}: usize = {self.count}")
        if self.variant_names is not None:
            lines.append(f"  variants: {', '.join(self.variant_names)}")
        if self.discriminants is not None:
            members = ", ".join(v.name for v in self.discriminants.enum_def.variants)
            lines.append(f"  enum {self.discriminants.name} {{ {members} }}")
        return "\n".join(lines)


def _build(enum_def: EnumDef, name: str) -> dict[str, Any]:
    if name == "EnumString":
        return {"from_str": from_string(enum_def)}
    if name == "AsRefStr":
        return {"as_ref": as_ref_str(enum_def)}
    if name == "EnumVariantNames":
        return {"variant_names": enum_variant_names(enum_def)}
    if name == "AsStaticStr":
        return {"as_static": as_static_str(enum_def)}
    if name == "IntoStaticStr":
        return {"into_static": into_static_str(enum_def)}
    if name == "ToString":
        return {"to_string": to_string(enum_def)}
    if name == "Display":
        return {"display": display(enum_def)}
    if name == "EnumIter":
        enum_iter(enum_def)
        return {"iter": partial(enum_iter, enum_def)}
    if name == "EnumMessage":
        return {"messages": enum_messages(enum_def)}
    if name == "EnumProperty":
        return {"properties": enum_properties(enum_def)}
    if name == "EnumDiscriminants":
        discriminants = enum_discriminants(enum_def)
        inner = [d for d in discriminants.derives if d in _CANONICAL]
        return {
            "discriminants": discriminants,
            "discriminant_derived": derive(discriminants.enum_def, *inner),
        }
    return {"count": enum_count(enum_def), "count_name": count_constant_name(enum_def)}


def derive(enum_def: EnumDef, *args: str) -> Derived:
    """Apply the named derives to ``enum_def``.

    Each name may be given plainly (``EnumString``) or with the ``Strum``
    prefix (``StrumEnumString``). Unknown or repeated derives, and
    ``ToString`` together with ``Display``, are errors.
    """
    canonical: list[str] = []
    for arg in args:
        try:
            name = _CANONICAL[arg]
        except KeyError:
            raise ValueError(f"unknown derive {arg!r}") from None
        if name in canonical:
            raise ValueError(f"{name} derived more than once for {enum_def.name}")
        canonical.append(name)

    if "ToString" in canonical and "Display" in canonical:
        raise ValueError(
            f"{enum_def.name} cannot derive both ToString and Display"
        )

    built: dict[str, Any] = {}
    for name in canonical:
        built.update(_build(enum_def, name))

    derived = Derived(enum_def, tuple(canonical), **built)
    debug_print_generated(enum_def, derived)
    return derived


def debug_print_generated(enum_def: EnumDef, derived: Derived) -> str | None:
    """Print a summary of ``derived`` when the debug variable asks for it.

    The variable set to ``1`` prints for every enum; set to an enum's name it
    prints for that enum only. Returns the text printed, or None.
    """
    setting = os.environ.get(DEBUG_VARIABLE)
    if setting is None:
        return None
    text = str(derived)
    printed = None
    if setting == "1":
        print(text)
        printed = text
    if setting == enum_def.name:
        print(text)
        printed = text
    return printed