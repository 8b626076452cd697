"""Theme selectors such as ``source.js meta.function > string``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from giallo.scope import Scope, parse_scopes


@dataclass(frozen=True)
class Parent:
    """A parent scope that a selector requires above its target.

    When ``direct`` is true the parent must be the immediate parent (the
    ``>`` combinator); otherwise it may appear anywhere further up the stack.
    """

    scope: Scope
    direct: bool = False


@dataclass(frozen=True)
class ThemeSelector:
    """A parsed selector matched against scope stacks.

    ``parent_scopes`` is ordered from the deepest parent to the shallowest,
    i.e. right to left in the selector string.
    """

    target_scope: Scope
    parent_scopes: tuple[Parent, ...] = ()

    def matches(self, scope_stack: Sequence[Scope]) -> bool:
        """Whether this selector applies to ``scope_stack`` (outermost first).

        The target must prefix the innermost scope; each parent must then be
        found walking up the stack, directly above for ``>`` parents and
        anywhere above for the others.
        """
        if not scope_stack:
            return False
        if not self.target_scope.is_prefix_of(scope_stack[-1]):
            return False
        if not self.parent_scopes:
            return True

        # Scopes still available as parents are scope_stack[:end]
        end = len(scope_stack) - 1
        last_index = len(self.parent_scopes) - 1
        for parent_index, parent in enumerate(self.parent_scopes):
            if parent.direct:
                if end == 0 or not parent.scope.is_prefix_of(scope_stack[end - 1]):
                    return False
                end -= 1
            else:
                found = next(
                    (
                        pos
                        for pos in range(end - 1, -1, -1)
                        if parent.scope.is_prefix_of(scope_stack[pos])
                    ),
                    None,
                )
                if found is None:
                    return False
                end = found

            if end == 0 and parent_index != last_index:
                return False

        return True


def parse_selector(text: str) -> ThemeSelector | None:
    """Parse a whitespace-separated selector, with ``>`` as child combinator.

    Returns None for an empty selector or one ending in ``>``.
    """
    parts = text.split()
    if not parts:
        return None
    *rest, last = parts
    if last == ">":
        return None

    target_scope = parse_scopes(last)[0]
    parents: list[Parent] = []
    is_direct = False
    for part in reversed(rest):
        if part == ">":
            is_direct = True
            continue
        parents.append(Parent(parse_scopes(part)[0], direct=is_direct))
        is_direct = False

    return ThemeSelector(target_scope, tuple(parents))