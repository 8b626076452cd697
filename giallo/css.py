"""CSS stylesheets and class names generated from compiled themes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from giallo.scope import EMPTY_ATOM_NUMBER, MAX_ATOMS_IN_SCOPE, Scope, global_scope_repo

if TYPE_CHECKING:
    from giallo.compiled_theme import CompiledTheme, CompiledThemeRule


def generate_css(theme: CompiledTheme, prefix: str) -> str:
    """Build a stylesheet for ``theme`` with every class name prefixed by ``prefix``.

    Useful with class-based HTML output, e.g. to switch between light and dark
    themes, which inline styles cannot do.
    """
    lines = [
        "/*",
        f' * theme "{theme.name}" generated by giallo',
        " */",
        "",
        f".{prefix}code {{",
        f"  {theme.default_style.foreground.as_css_color_property()}",
        f"  {theme.default_style.background.as_css_bg_color_property()}",
        "}",
        "",
    ]

    if theme.highlight_background_color is not None:
        lines += [
            f".{prefix}hl {{",
            f"  {theme.highlight_background_color.as_css_bg_color_property()}",
            "}",
            "",
        ]

    lines += [
        _rule_css(rule, prefix)
        for rule in theme.rules
        if rule.style_modifier.has_properties()
    ]

    return "".join(line + "\n" for line in lines)


def _rule_css(rule: CompiledThemeRule, prefix: str) -> str:
    selector = scope_to_css_selector(rule.selector.target_scope, prefix, False)
    modifier = rule.style_modifier
    parts = [f"{selector} {{"]
    if modifier.foreground is not None:
        parts.append(f" {modifier.foreground.as_css_color_property()}")
    if modifier.background is not None:
        parts.append(f" {modifier.background.as_css_bg_color_property()}")
    if modifier.font_style is not None:
        parts.append(f" {''.join(modifier.font_style.css_attributes())}")
    parts.append(" }")
    return "".join(parts)


def scope_to_css_selector(scope: Scope, prefix: str, as_class: bool) -> str:
    """Turn a scope into prefixed class names.

    ``keyword.operator`` gives ``.g-keyword.g-operator`` as a selector and
    ``g-keyword g-operator`` as a class attribute value. Empty atoms are skipped.
    """
    names: list[str] = []
    with global_scope_repo() as repo:
        for i in range(MAX_ATOMS_IN_SCOPE):
            atom_number = scope.atom_at(i)
            if atom_number == 0:
                break
            if atom_number == EMPTY_ATOM_NUMBER:
                continue
            atom = repo.atom_number_to_str(atom_number)
            names.append(prefix + escape_css_identifier(atom))

    if as_class:
        return " ".join(names)
    return "".join("." + name for name in names)


def escape_css_identifier(identifier: str) -> str:
    """Escape characters not allowed in a CSS class name as hex escapes."""
    output = ""
    for ch in identifier:
        if (
            (ch.isascii() and ch.isalpha())
            or ch in "-_"
            or (output and ch.isascii() and ch.isdigit())
        ):
            output += ch
        else:
            output += f"\\{ord(ch):x} "
    return output