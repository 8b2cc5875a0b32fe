"""Centralized role normalization utility.

The local client reports a (role, lane) pair per participant, e.g.
("DUO_CARRY", "BOTTOM"). The canonical format used throughout the
application is lowercase: top, jungle, mid, adc, support.
"""

from typing import Optional

# Canonical roles - the standard format used throughout the application
CANONICAL_ROLES = frozenset({"top", "jungle", "mid", "adc", "support"})

# Role ordering for consistent display/sorting
ROLE_ORDER = ["top", "jungle", "mid", "adc", "support"]

# Lanes that map directly to a single role
LANE_ROLES: dict[str, str] = {
    "TOP": "top",
    "JUNGLE": "jungle",
    "MIDDLE": "mid",
    "MID": "mid",
}

# Bottom lane is shared by two roles and needs the role signal
BOTTOM_LANES = frozenset({"BOTTOM", "BOT"})
CARRY_ROLES = frozenset({"CARRY", "DUO_CARRY"})


def normalize_role(role: str, lane: str) -> str:
    """Normalize a client-reported (role, lane) pair to a canonical role.

    Args:
        role: Client role signal (e.g., "DUO_CARRY", "SUPPORT", "SOLO", "")
        lane: Client lane signal (e.g., "BOTTOM", "MIDDLE", "JUNGLE", "NONE")

    Returns:
        One of top/jungle/mid/adc/support, or the lowercased lane when the
        lane is not a known one.

    Examples:
        >>> normalize_role("CARRY", "BOTTOM")
        'adc'
        >>> normalize_role("SUPPORT", "BOTTOM")
        'support'
        >>> normalize_role("", "JUNGLE")
        'jungle'
        >>> normalize_role("NONE", "NONE")
        'none'
    """
    lane_upper = lane.upper()

    if lane_upper in LANE_ROLES:
        return LANE_ROLES[lane_upper]

    if lane_upper in BOTTOM_LANES:
        return "adc" if role.upper() in CARRY_ROLES else "support"

    return lane.lower()


def is_valid_role(role: Optional[str]) -> bool:
    """Check if a user-supplied role label is one of the canonical roles."""
    if role is None:
        return False
    return role.strip().lower() in CANONICAL_ROLES

