"""Font style flags used by textmate themes."""

from __future__ import annotations

import enum


class FontStyle(enum.IntFlag):
    """Bold, underline, italic and strikethrough as bit flags."""

    BOLD = 1
    UNDERLINE = 2
    ITALIC = 4
    STRIKETHROUGH = 8

    @classmethod
    def from_theme_str(cls, text: str) -> FontStyle:
        """Build the flags named anywhere in a theme ``fontStyle`` string."""
        style = cls(0)
        for word, flag in (
            ("bold", cls.BOLD),
            ("italic", cls.ITALIC),
            ("underline", cls.UNDERLINE),
            ("strikethrough", cls.STRIKETHROUGH),
        ):
            if word in text:
                style |= flag
        return style

    def is_empty(self) -> bool:
        return self.value == 0

    def ansi_escapes(self) -> str:
        """ANSI SGR parameters for these flags, each led by ``;``."""
        codes = [
            (FontStyle.BOLD, ";1"),
            (FontStyle.ITALIC, ";3"),
            (FontStyle.UNDERLINE, ";4"),
            (FontStyle.STRIKETHROUGH, ";9"),
        ]
        return "".join(code for flag, code in codes if flag in self)

    def css_attributes(self) -> list[str]:
        """CSS declarations for these flags."""
        out: list[str] = []
        if FontStyle.BOLD in self:
            out.append("font-weight: bold;")
        if FontStyle.ITALIC in self:
            out.append("font-style: italic;")
        underline = FontStyle.UNDERLINE in self
        strike = FontStyle.STRIKETHROUGH in self
        if underline and strike:
            out.append("text-decoration: underline line-through;")
        elif underline:
            out.append("text-decoration: underline;")
        elif strike:
            out.append("text-decoration: line-through;")
        return out