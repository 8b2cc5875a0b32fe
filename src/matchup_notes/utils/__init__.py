"""Utility modules for matchup_notes."""

from matchup_notes.utils.champion_catalog import (
    CHAMPION_NAMES,
    all_champion_names,
    canonical_champion_name,
    champion_id,
    champion_name,
)
from matchup_notes.utils.role_normalizer import (
    CANONICAL_ROLES,
    ROLE_ORDER,
    normalize_role,
    is_valid_role,
)

__all__ = [
    "CHAMPION_NAMES",
    "all_champion_names",
    "canonical_champion_name",
    "champion_id",
    "champion_name",
    "CANONICAL_ROLES",
    "ROLE_ORDER",
    "normalize_role",
    "is_valid_role",
]
