"""Which of the ``\\A`` and ``\\G`` regex anchors may match at a position."""

from __future__ import annotations

import enum

# Replacement that is very unlikely to match anything
_NEVER_MATCHES = "\uffff"


class AnchorActive(enum.Enum):
    """Combination of active anchors for a scan."""

    A = "A"
    G = "G"
    AG = "AG"
    NONE = "NONE"

    @property
    def allows_a(self) -> bool:
        return self in (AnchorActive.A, AnchorActive.AG)

    @property
    def allows_g(self) -> bool:
        return self in (AnchorActive.G, AnchorActive.AG)

    def replace_anchors(self, pattern: str) -> str:
        """Disable the anchors that are not active in ``pattern``."""
        if not self.allows_a:
            pattern = pattern.replace("\\A", _NEVER_MATCHES)
        if not self.allows_g:
            pattern = pattern.replace("\\G", _NEVER_MATCHES)
        return pattern

    def __str__(self) -> str:
        return (
            f"allow_A={str(self.allows_a).lower()}, "
            f"allow_G={str(self.allows_g).lower()}"
        )


def anchor_active(
    is_first_line: bool, anchor_position: int | None, current_pos: int
) -> AnchorActive:
    """Work out the active anchors for a scan starting at ``current_pos``."""
    g_active = anchor_position is not None and anchor_position == current_pos
    if is_first_line:
        return AnchorActive.AG if g_active else AnchorActive.A
    return AnchorActive.G if g_active else AnchorActive.NONE