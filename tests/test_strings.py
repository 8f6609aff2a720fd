import pytest

from enumkit.model import EnumDef, Field, ParseError, Variant
from enumkit.strings import (
    DisabledVariantError,
    as_ref_str,
    as_static_str,
    case_style_of,
    display,
    from_string,
    into_static_str,
    serialized_name,
    to_string,
)
from enumkit.case_style import CaseStyle


def _color():
    return EnumDef(
        "Color",
        (
            Variant("Red", attrs=('#[strum(to_string = "RedRed")]',)),
            Variant(
                "Blue",
                (Field("hue", int),),
                ('#[strum(serialize = "b", to_string = "blue")]',),
            ),
            Variant("Yellow", attrs=('#[strum(serialize = "y", serialize = "yellow")]',)),
            Variant("Green", (Field(default=str),), ('#[strum(default = "true")]',)),
        ),
    )


def _brightness(style="snake_case", bright="Bright"):
    return EnumDef(
        "Brightness",
        (
            Variant("DarkBlack"),
            Variant("Dim", (Field("glow", int),)),
            Variant("BrightWhite", attrs=(f'#[strum(serialize = "{bright}")]',)),
        ),
        attrs=(f'#[strum(serialize_all = "{style}")]',),
    )


WEEK = EnumDef(
    "Week",
    ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
)


# as_ref_no_strum / as_ref_str


@pytest.mark.parametrize("convert", [as_ref_str, as_static_str, into_static_str])
def test_color_as_ref(convert):
    color = _color()
    render = convert(color)
    assert render(color.make("Red")) == "RedRed"
    assert render(color.make("Blue", hue=0)) == "blue"
    assert render(color.make("Yellow")) == "yellow"
    assert render(color.make("Green", "")) == "Green"


def test_as_red_str_round_trip():
    color = _color()
    red = color.make("Red")
    assert from_string(color)(as_ref_str(color)(red)) == red


def test_into_static_str_generic_like_enums():
    foo = EnumDef("Foo", (Variant("A"), Variant("C", (Field(),))), lifetimes=("a",))
    convert = into_static_str(foo)
    assert convert(foo.make("A")) == "A"
    assert convert(foo.make("C", 17)) == "C"

    boo = EnumDef(
        "Boo",
        (Variant("A", (Field(),)), Variant("B"), Variant("C", (Field(),))),
        lifetimes=("a",),
        type_params=("T",),
    )
    convert = into_static_str(boo)
    assert convert(boo.make("A", 17)) == "A"
    assert convert(boo.make("B")) == "B"
    assert convert(boo.make("C", 17)) == "C"


@pytest.mark.parametrize("convert", [as_ref_str, as_static_str, into_static_str])
def test_brightness_serialize_all_as_ref(convert):
    brightness = _brightness()
    render = convert(brightness)
    assert render(brightness.make("DarkBlack")) == "dark_black"
    assert render(brightness.make("Dim", glow=0)) == "dim"
    assert render(brightness.make("BrightWhite")) == "Bright"


# display / to_string


@pytest.mark.parametrize("convert", [display, to_string])
def test_color_strings(convert):
    color = _color()
    render = convert(color)
    assert render(color.make("Blue", hue=0)) == "blue"
    assert render(color.make("Yellow")) == "yellow"
    assert render(color.make("Red")) == "RedRed"


def test_to_red_string_round_trip():
    color = _color()
    red = color.make("Red")
    assert from_string(color)(to_string(color)(red)) == red


@pytest.mark.parametrize("convert", [display, to_string])
def test_brightness_to_string(convert):
    brightness = _brightness(bright="bright")
    render = convert(brightness)
    assert render(brightness.make("DarkBlack")) == "dark_black"
    assert render(brightness.make("Dim", glow=0)) == "dim"
    assert render(brightness.make("BrightWhite")) == "bright"


# from_str


def _from_str_color():
    return EnumDef(
        "Color",
        (
            Variant("Red"),
            Variant("Blue", (Field("hue", int),)),
            Variant("Yellow", attrs=('#[strum(serialize = "y", serialize = "yellow")]',)),
            Variant("Green", (Field(default=str),), ('#[strum(default = "true")]',)),
            Variant("Purple", attrs=('#[strum(to_string = "purp")]',)),
        ),
    )


def test_color_simple():
    color = _from_str_color()
    assert from_string(color)("Red") == color.make("Red")


def test_color_value():
    color = _from_str_color()
    assert from_string(color)("Blue") == color.make("Blue", hue=0)


def test_color_serialize():
    color = _from_str_color()
    parse = from_string(color)
    assert parse("y") == color.make("Yellow")
    assert parse("yellow") == color.make("Yellow")


def test_color_to_string():
    color = _from_str_color()
    assert from_string(color)("purp") == color.make("Purple")


def test_color_default():
    color = _from_str_color()
    assert from_string(color)("not found") == color.make("Green", "not found")


def test_brightness_from_str():
    brightness = _brightness()
    parse = from_string(brightness)
    assert parse("dark_black") == brightness.make("DarkBlack")
    assert parse("dim") == brightness.make("Dim", glow=0)
    assert parse("Bright") == brightness.make("BrightWhite")


def test_week_not_found():
    with pytest.raises(ParseError) as info:
        from_string(WEEK)("Humpday")
    assert str(info.value) == "Matching variant not found"


@pytest.mark.parametrize(
    "name", ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
)
def test_week_found(name):
    assert from_string(WEEK)(name) == WEEK.make(name)


def test_lifetime_and_generic():
    lifetime = EnumDef(
        "Lifetime", (Variant("Life", (Field(default=str),)), Variant("None"))
    )
    assert from_string(lifetime)("Life") == lifetime.make("Life", "")
    generic = EnumDef(
        "Generic",
        (Variant("Gen", (Field(default=str),)), Variant("None")),
        type_params=("T",),
    )
    assert from_string(generic)("Gen") == generic.make("Gen", "")


# serialize_all


def _foo(style):
    return EnumDef(
        "Foo",
        (Variant("DarkBlack"), Variant("Dim", (Field("glow", int),)), Variant("BrightWhite")),
        attrs=(f'#[strum(serialize_all = "{style}")]',),
    )


def test_serialize_all_title_case():
    foo = _foo("title_case")
    dark = foo.make("DarkBlack")
    assert to_string(foo)(dark) == "Dark Black"
    assert from_string(foo)("Dark Black") == dark
    assert into_static_str(foo)(dark) == "Dark Black"


def test_serialize_all_upper_case():
    foo = _foo("UPPERCASE")
    dark = foo.make("DarkBlack")
    assert to_string(foo)(dark) == "DARKBLACK"
    assert from_string(foo)("DARKBLACK") == dark
    assert into_static_str(foo)(dark) == "DARKBLACK"


# helpers and error cases


def test_case_style_of():
    assert case_style_of(_brightness()) is CaseStyle.SNAKE_CASE
    assert case_style_of(WEEK) is None


def test_invalid_serialize_all():
    with pytest.raises(ValueError):
        to_string(_foo("shouting"))


def test_serialized_name_prefers_longest_then_last():
    enum_def = EnumDef(
        "E",
        (
            Variant("A", attrs=('#[strum(serialize = "ab", serialize = "cd")]',)),
            Variant("B", attrs=('#[strum(serialize = "y", serialize = "yellow")]',)),
        ),
    )
    assert serialized_name(enum_def, "A") == "cd"
    assert serialized_name(enum_def, enum_def.variant("B")) == "yellow"


def test_duplicate_to_string_is_an_error():
    enum_def = EnumDef(
        "E", (Variant("A", attrs=('#[strum(to_string = "a", to_string = "b")]',)),)
    )
    with pytest.raises(ValueError):
        to_string(enum_def)


def _with_disabled():
    return EnumDef(
        "E",
        (Variant("A"), Variant("B", attrs=('#[strum(disabled = "true")]',))),
    )


@pytest.mark.parametrize(
    "convert, message",
    [
        (to_string, "to_string() called on disabled variant."),
        (display, "fmt() called on disabled variant."),
        (as_ref_str, "as_ref() or as_static() called on disabled variant."),
        (into_static_str, "as_ref() or as_static() called on disabled variant."),
    ],
)
def test_disabled_variant_cannot_render(convert, message):
    enum_def = _with_disabled()
    render = convert(enum_def)
    assert render(enum_def.make("A")) == "A"
    with pytest.raises(DisabledVariantError) as info:
        render(enum_def.make("B"))
    assert str(info.value) == message


def test_disabled_variant_cannot_parse():
    enum_def = _with_disabled()
    parse = from_string(enum_def)
    assert parse("A") == enum_def.make("A")
    with pytest.raises(ParseError):
        parse("B")


def test_multiple_defaults_rejected():
    enum_def = EnumDef(
        "E",
        (
            Variant("A", (Field(default=str),), ('#[strum(default = "true")]',)),
            Variant("B", (Field(default=str),), ('#[strum(default = "true")]',)),
        ),
    )
    with pytest.raises(ValueError, match="multiple default"):
        from_string(enum_def)


@pytest.mark.parametrize(
    "fields",
    [(), (Field(default=str), Field(default=str)), (Field("name", str),)],
)
def test_default_needs_single_unnamed_field(fields):
    enum_def = EnumDef("E", (Variant("A", fields, ('#[strum(default = "true")]',)),))
    with pytest.raises(ValueError, match="Default only works"):
        from_string(enum_def)


def test_field_without_default_rejected():
    enum_def = EnumDef("E", (Variant("A", (Field("x"),)),))
    with pytest.raises(TypeError):
        from_string(enum_def)


def test_value_of_other_enum_rejected():
    with pytest.raises(TypeError):
        to_string(_color())(WEEK.make("Sunday"))


def test_first_matching_variant_wins():
    enum_def = EnumDef(
        "E",
        (
            Variant("A", attrs=('#[strum(serialize = "x")]',)),
            Variant("B", attrs=('#[strum(serialize = "x")]',)),
        ),
    )
    assert from_string(enum_def)("x") == enum_def.make("A")