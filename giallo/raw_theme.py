"""Themes as read from VSCode/textmate JSON theme files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any

from giallo.color import GialloError
from giallo.compiled_theme import CompiledTheme

_INHERIT = "inherit"


class ThemeParseError(GialloError, ValueError):
    """A theme document does not have the expected shape."""


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ThemeParseError(f"field `{key}` must be a string")
    return value


def _require_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ThemeParseError(f"field `{key}` must be a string")
    return value


@dataclass
class TokenColorSettings:
    """The ``settings`` object of a ``tokenColors`` entry."""

    foreground: str | None = None
    background: str | None = None
    font_style: str | None = None

    @classmethod
    def _from_mapping(cls, data: Any) -> TokenColorSettings:
        if not isinstance(data, dict):
            raise ThemeParseError("`settings` must be an object")
        return cls(
            foreground=_optional_str(data, "foreground"),
            background=_optional_str(data, "background"),
            font_style=_optional_str(data, "fontStyle"),
        )

    def effective_foreground(self) -> str | None:
        """The foreground, or None when unset or ``inherit``."""
        return None if self.foreground == _INHERIT else self.foreground

    def effective_background(self) -> str | None:
        """The background, or None when unset or ``inherit``."""
        return None if self.background == _INHERIT else self.background


@dataclass
class Colors:
    """The editor colours a theme defines."""

    foreground: str
    background: str
    highlight_background: str | None = None
    line_number_foreground: str | None = None

    @classmethod
    def _from_mapping(cls, data: Any) -> Colors:
        # Themes use either `foreground` or `editor.foreground`; the first one wins.
        if not isinstance(data, dict):
            raise ThemeParseError("`colors` must be an object")
        foreground: str | None = None
        background: str | None = None
        highlight_background: str | None = None
        line_number_foreground: str | None = None
        for key, value in data.items():
            if key in ("foreground", "editor.foreground"):
                if foreground is None:
                    foreground = _require_str(value, key)
            elif key in ("background", "editor.background"):
                if background is None:
                    background = _require_str(value, key)
            elif key == "editor.lineHighlightBackground":
                highlight_background = _require_str(value, key)
            elif key == "editorLineNumber.foreground":
                line_number_foreground = _require_str(value, key)
        if foreground is None:
            raise ThemeParseError("missing field `foreground or editor.foreground`")
        if background is None:
            raise ThemeParseError("missing field `background or editor.background`")
        return cls(foreground, background, highlight_background, line_number_foreground)


def _parse_scope(value: Any) -> list[str]:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",")]
    if isinstance(value, list):
        if not all(isinstance(item, str) for item in value):
            raise ThemeParseError("`scope` entries must be strings")
        return list(value)
    raise ThemeParseError("`scope` must be a string or an array of strings")


@dataclass
class TokenColorRule:
    """One ``tokenColors`` entry: selectors and the style they apply."""

    scope: list[str] = field(default_factory=list)
    settings: TokenColorSettings = field(default_factory=TokenColorSettings)

    @classmethod
    def _from_mapping(cls, data: Any) -> TokenColorRule:
        if not isinstance(data, dict):
            raise ThemeParseError("`tokenColors` entries must be objects")
        scope = _parse_scope(data["scope"]) if "scope" in data else []
        settings = (
            TokenColorSettings._from_mapping(data["settings"])
            if "settings" in data
            else TokenColorSettings()
        )
        return cls(scope, settings)


@dataclass
class RawTheme:
    """A theme as written in its JSON file."""

    name: str
    kind: str | None
    colors: Colors
    token_colors: list[TokenColorRule]

    @classmethod
    def from_dict(cls, data: Any) -> RawTheme:
        """Build a theme from a decoded JSON document."""
        if not isinstance(data, dict):
            raise ThemeParseError("a theme must be an object")
        for required in ("name", "colors", "tokenColors"):
            if required not in data:
                raise ThemeParseError(f"missing field `{required}`")
        name = _require_str(data["name"], "name")
        kind = _optional_str(data, "type")
        colors = Colors._from_mapping(data["colors"])
        token_colors = data["tokenColors"]
        if not isinstance(token_colors, list):
            raise ThemeParseError("`tokenColors` must be an array")
        rules = [TokenColorRule._from_mapping(entry) for entry in token_colors]
        return cls(name, kind, colors, rules)

    @classmethod
    def load_from_file(cls, path: str | os.PathLike[str]) -> RawTheme:
        """Read and parse a JSON theme file."""
        with open(path, encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ThemeParseError(f"invalid JSON in {os.fspath(path)}: {exc}") from exc
        return cls.from_dict(data)

    def compile(self) -> CompiledTheme:
        """Compile into a theme ready for scope matching."""
        return CompiledTheme.from_raw_theme(self)