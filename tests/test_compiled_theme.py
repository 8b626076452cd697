import pytest

from giallo.color import BLACK, WHITE, Color, InvalidHexColorError
from giallo.compiled_theme import (
    CompiledTheme,
    Style,
    StyleModifier,
    ThemeType,
)
from giallo.font_style import FontStyle
from giallo.raw_theme import RawTheme, TokenColorSettings
from giallo.scope import parse_scopes


def _theme(token_colors, colors=None, **extra):
    data = {
        "name": "test",
        "colors": colors or {"editor.foreground": "#BBBBBB", "editor.background": "#1E1E1E"},
        "tokenColors": token_colors,
    }
    data.update(extra)
    return RawTheme.from_dict(data)


def test_can_load_default_from_token_colors():
    raw = _theme(
        [
            {"settings": {"background": "#23262E", "foreground": "#D5CED9"}},
            {"scope": ["comment"], "settings": {"foreground": "#A0A1A7cc"}},
        ]
    )
    compiled = CompiledTheme.from_raw_theme(raw)
    assert compiled.default_style.background.as_hex() == "#23262E"
    assert compiled.default_style.foreground.as_hex() == "#D5CED9"
    assert len(compiled.rules) == 1


def test_default_style_from_editor_colors():
    compiled = _theme([]).compile()
    assert compiled.default_style == Style(
        Color.from_hex("#BBBBBB"), Color.from_hex("#1E1E1E"), FontStyle(0)
    )
    assert compiled.theme_type is ThemeType.DARK
    assert compiled.highlight_background_color is None
    assert compiled.line_number_foreground is None


def test_editor_extra_colors_and_type():
    compiled = _theme(
        [],
        colors={
            "foreground": "#BBBBBB",
            "background": "#1E1E1E",
            "editor.lineHighlightBackground": "#333333",
            "editorLineNumber.foreground": "#808080",
        },
        type="light",
    ).compile()
    assert compiled.theme_type is ThemeType.LIGHT
    assert compiled.highlight_background_color == Color.from_hex("#333333")
    assert compiled.line_number_foreground == Color.from_hex("#808080")


def test_rules_sorted_from_least_to_most_specific():
    compiled = _theme(
        [
            {"scope": "a.b.c", "settings": {"foreground": "#111111"}},
            {"scope": "p q", "settings": {"foreground": "#222222"}},
            {"scope": "x", "settings": {"foreground": "#333333"}},
        ]
    ).compile()
    targets = [rule.selector.target_scope.build_string() for rule in compiled.rules]
    assert targets == ["x", "q", "a.b.c"]


def test_each_selector_of_a_rule_shares_the_modifier():
    compiled = _theme(
        [{"scope": "comment, string", "settings": {"fontStyle": "bold"}}]
    ).compile()
    assert len(compiled.rules) == 2
    assert all(r.style_modifier.font_style == FontStyle.BOLD for r in compiled.rules)


def test_unparseable_selectors_are_dropped():
    compiled = _theme([{"scope": ["", "a >"], "settings": {"foreground": "#111"}}]).compile()
    assert compiled.rules == []


def test_invalid_color_is_an_error():
    with pytest.raises(InvalidHexColorError):
        _theme([{"scope": "comment", "settings": {"foreground": "#GGGGGG"}}]).compile()


def test_style_modifier_from_settings():
    modifier = StyleModifier.from_settings(
        TokenColorSettings(foreground="#F00", background="inherit", font_style="italic bold")
    )
    assert modifier.foreground == Color(255, 0, 0, 255)
    assert modifier.background is None
    assert modifier.font_style == FontStyle.ITALIC | FontStyle.BOLD
    assert modifier.has_properties() is True


def test_empty_modifier_has_no_properties():
    assert StyleModifier().has_properties() is False
    assert StyleModifier.from_settings(TokenColorSettings()).has_properties() is False


def test_apply_to_keeps_unset_parts():
    base = Style(Color.from_hex("#123456"), Color.from_hex("#ABCDEF"), FontStyle.BOLD)
    modifier = StyleModifier(foreground=Color.from_hex("#F00"))
    result = modifier.apply_to(base)
    assert result.foreground == Color.from_hex("#F00")
    assert result.background == base.background
    assert result.font_style == FontStyle.BOLD
    assert StyleModifier().apply_to(base) == base


def test_default_style():
    style = Style()
    assert (style.foreground, style.background) == (BLACK, WHITE)
    assert style.font_style.is_empty()


def test_style_decorations():
    assert Style(font_style=FontStyle.UNDERLINE).has_decorations() is True
    assert Style(font_style=FontStyle.STRIKETHROUGH).has_decorations() is True
    assert Style(font_style=FontStyle.BOLD | FontStyle.ITALIC).has_decorations() is False


@pytest.mark.parametrize(
    "text, expected",
    [("light", ThemeType.LIGHT), ("LIGHT", ThemeType.LIGHT), ("dark", ThemeType.DARK), ("hc", ThemeType.DARK)],
)
def test_theme_type_from_str(text, expected):
    assert ThemeType.from_theme_str(text) is expected


def test_compiled_rule_matches_scope_stack():
    compiled = _theme(
        [{"scope": "meta.function > string", "settings": {"foreground": "#FFF"}}]
    ).compile()
    stack = [parse_scopes(s)[0] for s in ("source.js", "meta.function", "string.quoted")]
    assert compiled.rules[0].selector.matches(stack) is True