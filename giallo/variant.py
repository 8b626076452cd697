"""Values that come either alone or as a light/dark pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Single(Generic[T]):
    """A single theme (or a value taken from a single theme)."""

    value: T


@dataclass(frozen=True)
class Dual(Generic[T]):
    """A light and a dark theme (or values taken from each)."""

    light: T
    dark: T


ThemeVariant = Union[Single[T], Dual[T]]


def has_decoration(variant: ThemeVariant) -> bool:
    """Whether any style in a variant of styles has underline or strikethrough."""
    if isinstance(variant, Single):
        return variant.value.has_decorations()
    if isinstance(variant, Dual):
        return variant.light.has_decorations() or variant.dark.has_decorations()
    raise TypeError(f"expected Single or Dual, got {type(variant).__name__}")