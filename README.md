# enumkit

enumkit works with enums written down as data. An enum has a name, attributes
and an ordered list of variants; each variant may carry attributes and fields
(none, positional or named). From such a description enumkit derives the
helpers one usually wants around an enum:

- the string form of a value, and parsing a string back into a value;
- iteration over the enabled variants, with a known remaining length;
- the number of variants;
- the variant names, optionally in another case style;
- short and detailed messages attached to variants;
- string properties attached to variants;
- a companion "discriminants" enum holding only the variant names.

It uses only the standard library and supports Python 3.10 and later.

## Installing

```
pip install enumkit
```

To run the tests:

```
pip install "enumkit[test]"
pytest
```

## Describing an enum

`enumkit.model` holds the description types:

- `EnumDef(name, variants, attrs, lifetimes, type_params)` – the enum.
  Variants may be given as `Variant` objects or as plain names.
  `variant(name)` looks one up (`KeyError` if missing), `make(name, *args,
  **kwargs)` builds a `Value` from field values (`TypeError` if they do not
  fit the variant), and `default_value(name)` builds one whose fields hold
  their defaults. `meta()` returns the parsed enum attributes.
- `Variant(name, fields, attrs)` – one variant. `kind` is a `FieldKind`
  (`UNIT`, `UNNAMED`, `NAMED`); `meta()` parses its attributes and
  `default_fields()` builds every field's default, raising `TypeError` for a
  field without one.
- `Field(name, default)` – a field; `name` is None for a positional field and
  `default` is a zero-argument callable.
- `Value` – a concrete value: `enum`, `variant`, `args`, `kwargs`. Index it
  with a position or a field name; its repr looks like `Color.Blue(hue=0)`.
- `ParseError` – a `ValueError` raised when a string matches no variant; its
  message is `Matching variant not found` and `text` holds the string.

```python
from enumkit.model import EnumDef, Field, Variant

color = EnumDef(
    "Color",
    [
        Variant("Red", attrs=['strum(to_string = "RedRed")']),
        Variant("Blue", fields=[Field("hue", int)],
                attrs=['strum(serialize = "b", to_string = "blue")']),
        Variant("Yellow", attrs=['strum(serialize = "y", serialize = "yellow")']),
        Variant("Green", fields=[Field(None, str)], attrs=['strum(default = "true")']),
    ],
)
```

## Attributes

Attributes are written as text such as `strum(serialize = "y")`,
`strum(to_string = "RedRed")`, `strum(disabled = "true")`,
`strum(default = "true")`, `strum(message = "...")`,
`strum(detailed_message = "...")`, `strum(props(key = "value"))`, and on the
enum `strum(serialize_all = "snake_case")` or
`strum_discriminants(name(Other), derive(...))`. A `#[...]` wrapper is
allowed.

`enumkit.meta` parses them:

- `parse_meta(text)` returns a `Path`, `NameValue` or `MetaList`, and raises
  `MetaSyntaxError` (a `ValueError`) on malformed text.
- `extract_meta(attrs)` parses many, keeping already parsed items and
  silently skipping text that does not parse.
- `MetaList.expand_inner()` gives the nested items without bare literals.
- `find_attribute(metas, attr)` – items nested in every `attr(...)` list.
- `find_properties(metas, attr, prop)` – every string value of
  `prop = "..."` inside those lists.
- `find_unique_property(metas, attr, prop)` – the single value or None;
  more than one raises `ValueError`.
- `is_disabled(metas)` – whether `strum(disabled = "true")` is set; more
  than one `disabled` raises `ValueError`.

## String conversions

`enumkit.strings` builds conversions for an `EnumDef`:

- `from_string(enum_def)` returns a parser. A string matches every
  `serialize` and `to_string` spelling of a variant, or, when it has
  neither, its name in the enum's `serialize_all` style. Fields get their
  defaults. A variant marked `default = "true"` (exactly one positional
  field) receives every unmatched string; otherwise an unmatched string
  raises `ParseError`. Disabled variants are never matched. Two default
  variants, or a default variant of the wrong shape, raise `ValueError`.
- `to_string`, `display`, `as_ref_str`, `as_static_str` and
  `into_static_str` each return a function from `Value` to its string: the
  `to_string` value if set, else the longest `serialize` value (the last
  declared among equals), else the name in the enum's case style. A
  disabled variant raises `DisabledVariantError`; a value of another enum
  raises `TypeError`.
- `serialized_name(enum_def, variant)` and `case_style_of(enum_def)` expose
  those rules directly.

```python
from enumkit.strings import from_string, to_string

parse = from_string(color)
parse("y")            # Color.Yellow
parse("other")        # Color.Green('other')
to_string(color)(color.make("Red"))   # "RedRed"
```

## Case styles

`enumkit.case_style`:

```python
from enumkit.case_style import CaseStyle, convert_case, to_snake_case, to_title_case

to_snake_case("DarkBlack")        # "dark_black"
to_title_case("DarkBlack")        # "Dark Black"
convert_case("test_me", CaseStyle.CAMEL_CASE)   # "testMe"
```

`CaseStyle.parse(text)` accepts the `serialize_all` spellings (`camelCase`,
`PascalCase`/`camel_case`, `snake_case`/`snek_case`, `kebab_case`/`kebab-case`,
`SCREAMING-KEBAB-CASE`, `SCREAMING_SNAKE_CASE`/`shouty_snake_case`/
`shouty_snek_case`, `title_case`, `mixed_case`, `lowercase`, `UPPERCASE`) and
raises `ValueError` otherwise. `split_words`, `to_kebab_case`,
`to_shouty_snake_case`, `to_camel_case` and `to_mixed_case` are available
too. `convert_case` returns the identifier unchanged when the style is None.

## Other derivations

`enumkit.derives`:

- `enum_count(enum_def)` – the number of variants, disabled ones included;
  `count_constant_name(enum_def)` – e.g. `WEEK_COUNT` for `Week`.
- `enum_iter(enum_def)` – an `EnumIter` over the enabled variants, each with
  default field values. It supports `len()`, and `copy()` returns an
  independent iterator at the same position. An enum with lifetimes raises
  `ValueError`; a field without a default raises `TypeError`.
- `enum_messages(enum_def)` – a `MessageTable` with `get_message`,
  `get_detailed_message` (falling back to the message) and
  `get_serializations` (the `serialize` names, or the variant name).
  Disabled variants have no messages.
- `enum_properties(enum_def)` – a `PropertyTable`. `get_str(value, prop)`
  returns a string property of an enabled variant; `get_int` and
  `get_bool` always return None.
- `enum_discriminants(enum_def)` – a `Discriminants` holding a field-less
  `EnumDef` named `<Name>Discriminants` unless `name(...)` gives another,
  its `derives` (`Clone`, `Copy`, `Debug`, `PartialEq`, `Eq` plus any from
  `derive(...)`), and the other `strum_discriminants` items as its
  attributes. `from_value(value)` maps a source value to its discriminant.
- `enum_variant_names(enum_def)` – the variant names in the enum's case style.

## Deriving several at once

`enumkit.derive.derive(enum_def, *names)` runs the named derivations
(`EnumString`, `AsRefStr`, `EnumVariantNames`, `AsStaticStr`,
`IntoStaticStr`, `ToString`, `Display`, `EnumIter`, `EnumMessage`,
`EnumProperty`, `EnumDiscriminants`, `EnumCount`, each also accepted with a
`Strum` prefix) and returns a `Derived` whose fields (`from_str`,
`to_string`, `display`, `as_ref`, `as_static`, `into_static`, `iter`,
`messages`, `properties`, `discriminants`, `discriminant_derived`, `count`,
`count_name`, `variant_names`) hold the results; unrequested ones stay None.
For discriminants, the derives listed in `derive(...)` that enumkit knows are
applied to the generated enum as well. Unknown or repeated names, and
`ToString` together with `Display`, raise `ValueError`.

If the `ENUMKIT_DEBUG` environment variable is `1`, or equals the enum's
name, `debug_print_generated` prints a summary of what was derived and
returns it.

## What it does not do

enumkit does not create Python classes or `enum.Enum` types, and does not
read attributes from existing code: enums and their attributes are supplied
as `EnumDef` data, and values are `Value` objects. There is no command-line
tool.