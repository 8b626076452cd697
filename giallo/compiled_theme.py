"""Themes compiled into selectors and style modifiers ready for matching."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from giallo.color import BLACK, WHITE, Color
from giallo.font_style import FontStyle
from giallo.selector import ThemeSelector, parse_selector

if TYPE_CHECKING:
    from giallo.raw_theme import RawTheme, TokenColorSettings


def _specificity(selector: ThemeSelector) -> tuple[int, int]:
    # Less specific rules come first so later ones override inherited styling.
    target = selector.target_scope.build_string()
    scope_depth = 0 if not target else target.count(".") + 1
    return scope_depth, len(selector.parent_scopes)


@dataclass(frozen=True)
class Style:
    """A concrete style: foreground, background and font style."""

    foreground: Color = BLACK
    background: Color = WHITE
    font_style: FontStyle = FontStyle(0)

    def has_decorations(self) -> bool:
        """Whether the style underlines or strikes through text."""
        return (
            FontStyle.UNDERLINE in self.font_style
            or FontStyle.STRIKETHROUGH in self.font_style
        )


@dataclass(frozen=True)
class StyleModifier:
    """A partial style; unset parts are inherited from a base style."""

    foreground: Color | None = None
    background: Color | None = None
    font_style: FontStyle | None = None

    @classmethod
    def from_settings(cls, settings: TokenColorSettings) -> StyleModifier:
        """Build from a theme rule's settings, parsing its colours."""
        fg = settings.effective_foreground()
        bg = settings.effective_background()
        return cls(
            foreground=Color.from_hex(fg) if fg is not None else None,
            background=Color.from_hex(bg) if bg is not None else None,
            font_style=(
                FontStyle.from_theme_str(settings.font_style)
                if settings.font_style is not None
                else None
            ),
        )

    def apply_to(self, base: Style) -> Style:
        """A new style with this modifier's set parts laid over ``base``."""
        return Style(
            foreground=self.foreground if self.foreground is not None else base.foreground,
            background=self.background if self.background is not None else base.background,
            font_style=self.font_style if self.font_style is not None else base.font_style,
        )

    def has_properties(self) -> bool:
        return (
            self.foreground is not None
            or self.background is not None
            or self.font_style is not None
        )


class ThemeType(enum.Enum):
    """Whether a theme is meant for light or dark backgrounds."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_theme_str(cls, text: str) -> ThemeType:
        """``light`` in any case gives LIGHT; anything else gives DARK."""
        return cls.LIGHT if text.lower() == "light" else cls.DARK


@dataclass(frozen=True)
class CompiledThemeRule:
    """A selector and the style modifier it applies."""

    selector: ThemeSelector
    style_modifier: StyleModifier


@dataclass
class CompiledTheme:
    """A theme ready for matching, rules sorted from least to most specific."""

    name: str
    theme_type: ThemeType = ThemeType.DARK
    default_style: Style = field(default_factory=Style)
    # Value of `editor.lineHighlightBackground`
    highlight_background_color: Color | None = None
    # Value of `editorLineNumber.foreground`
    line_number_foreground: Color | None = None
    rules: list[CompiledThemeRule] = field(default_factory=list)

    @classmethod
    def from_raw_theme(cls, raw_theme: RawTheme) -> CompiledTheme:
        """Compile a theme read from JSON."""
        theme_type = (
            ThemeType.from_theme_str(raw_theme.kind)
            if raw_theme.kind is not None
            else ThemeType.DARK
        )
        colors = raw_theme.colors
        foreground = Color.from_hex(colors.foreground)
        background = Color.from_hex(colors.background)
        highlight_background = (
            Color.from_hex(colors.highlight_background)
            if colors.highlight_background is not None
            else None
        )
        line_number_foreground = (
            Color.from_hex(colors.line_number_foreground)
            if colors.line_number_foreground is not None
            else None
        )

        rules: list[tuple[CompiledThemeRule, tuple[int, int]]] = []
        for token_rule in raw_theme.token_colors:
            # Some themes put their defaults in a token colour without a scope
            if not token_rule.scope:
                fg = token_rule.settings.effective_foreground()
                bg = token_rule.settings.effective_background()
                if fg is not None:
                    foreground = Color.from_hex(fg)
                if bg is not None:
                    background = Color.from_hex(bg)
                continue

            selectors = [
                selector
                for selector in map(parse_selector, token_rule.scope)
                if selector is not None
            ]
            if not selectors:
                continue
            modifier = StyleModifier.from_settings(token_rule.settings)
            rules.extend(
                (CompiledThemeRule(selector, modifier), _specificity(selector))
                for selector in selectors
            )

        rules.sort(key=lambda item: item[1])
        return cls(
            name=raw_theme.name,
            theme_type=theme_type,
            default_style=Style(foreground, background, FontStyle(0)),
            highlight_background_color=highlight_background,
            line_number_foreground=line_number_foreground,
            rules=[rule for rule, _ in rules],
        )