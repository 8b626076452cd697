# giallo

Building blocks for code highlighting with TextMate-style themes. The package
handles scopes, theme selectors, colours, font styles and compiled themes the
way VSCode does. It can also generate CSS stylesheets from a theme.

## Installation

```
pip install giallo
```

The package has no dependencies outside the standard library.

## Scopes (`giallo.scope`)

`parse_scopes` packs a scope string such as `source.rust.meta.function` into
a `Scope`. A `Scope` is a single comparable value that holds up to eight
atoms. A longer scope is cut down to its first eight atoms. Empty atoms are
kept, so `a..b` stays `a..b`. The input is split on whitespace, so one string
can produce several scopes.

```python
from giallo.scope import parse_scopes

prefix, = parse_scopes("source.rust")
full, = parse_scopes("source.rust.meta.function")
assert prefix.is_prefix_of(full)
assert len(full) == 4
assert full.build_string() == "source.rust.meta.function"
assert prefix < full
```

Atom strings are interned in a process-wide `ScopeRepository`.
`global_scope_repo()` is a context manager that holds the repository's lock
and yields the repository. `replace_global_scope_repo` swaps in a different
repository.

## Theme selectors (`giallo.selector`)

`parse_selector` reads a selector made of scopes separated by whitespace.
The `>` combinator means the next scope must be the direct parent. The
function returns `None` for an empty selector or for one that ends in `>`.

```python
from giallo.selector import parse_selector
from giallo.scope import parse_scopes

selector = parse_selector("source.js meta.function > string")
stack = [parse_scopes(s)[0] for s in ("source.js", "meta.function", "string.quoted")]
assert selector.matches(stack)
```

## Colours and font styles

`giallo.color.Color.from_hex` accepts `#RGB`, `#RGBA`, `#RRGGBB`,
`#RRGGBBAA`, `white` and `black`. The leading `#` is optional. An invalid
value raises `InvalidHexColorError`, which is a subclass of both `GialloError`
and `ValueError`. A `Color` can produce the following:

- hex text with `as_hex`
- CSS declarations with `as_css_color_property` and `as_css_bg_color_property`
- truecolor ANSI parameters with `as_ansi_fg` and `as_ansi_bg`

`css_light_dark_color_property` and `css_light_dark_bg_color_property` build
`light-dark(...)` declarations from two colours.

`giallo.font_style.FontStyle` is an `IntFlag` with the members `BOLD`,
`UNDERLINE`, `ITALIC` and `STRIKETHROUGH`. It offers three methods:

- `from_theme_str` builds a style from a theme `fontStyle` string.
- `css_attributes` returns the matching CSS declarations.
- `ansi_escapes` returns the matching SGR parameters.

## Themes

`giallo.raw_theme.RawTheme` reads a VSCode theme, either from a JSON file
with `load_from_file` or from a decoded document with `from_dict`. A
malformed document raises `ThemeParseError`. Calling `compile()` returns a
`giallo.compiled_theme.CompiledTheme`. The compiled theme carries:

- the default `Style`
- the optional line-highlight background and line-number colours
- a `ThemeType` (light or dark)
- the theme's rules, sorted from least to most specific

`giallo.css.generate_css` turns a compiled theme into a stylesheet. Every
class name in it starts with the prefix you give.

```python
from giallo.raw_theme import RawTheme
from giallo.css import generate_css

theme = RawTheme.load_from_file("my-theme.json").compile()
print(theme.default_style.foreground.as_hex())
print(generate_css(theme, "g-"))
```

`scope_to_css_selector` turns one scope into prefixed class names, either as
a selector (`.g-keyword.g-operator`) or as a class attribute value
(`g-keyword g-operator`). `escape_css_identifier` escapes characters that a
CSS class name cannot contain.

`giallo.variant` provides `Single` and `Dual` to hold one value or a
light/dark pair. `has_decoration` reports whether either style in a pair
underlines or strikes through text.

## Tokenizer helpers

`giallo.anchors` works out which of the `\A` and `\G` regex anchors are
active at a scan position (`anchor_active`). `AnchorActive.replace_anchors`
disables the anchors that are not active in a pattern. `giallo.stack`
provides `StateStack`, `StackFrame` and `RuleRef`, which track nested rule
contexts.

## What the package does not do

The package does not load TextMate grammars, tokenize source text or match
themes against tokens. It has no registry of grammars and themes, and it has
no HTML or terminal renderer. The anchor and stack helpers are provided, but
no tokenizer uses them. To highlight code, you need a tokenizer that produces
scope stacks. You can then use `ThemeSelector.matches` and
`StyleModifier.apply_to` to compute styles from those stacks.

## Running the tests

```
pip install -e .[test]
pytest
```