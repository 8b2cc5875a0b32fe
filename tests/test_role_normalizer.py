"""Tests for role normalization."""
import pytest

from matchup_notes.utils.role_normalizer import is_valid_role, normalize_role


@pytest.mark.parametrize(
    "role,lane,expected",
    [
        ("CARRY", "BOTTOM", "adc"),
        ("DUO_CARRY", "BOTTOM", "adc"),
        ("SUPPORT", "BOTTOM", "support"),
        ("DUO_SUPPORT", "BOT", "support"),
        ("", "JUNGLE", "jungle"),
        ("SOLO", "TOP", "top"),
        ("SOLO", "MIDDLE", "mid"),
        ("SOLO", "MID", "mid"),
    ],
)
def test_normalize_known_lanes(role, lane, expected):
    assert normalize_role(role, lane) == expected


def test_normalize_is_case_insensitive():
    assert normalize_role("duo_carry", "bottom") == "adc"
    assert normalize_role("Solo", "Top") == "top"


def test_bottom_without_carry_role_is_support():
    """Bottom lane with no recognizable role signal falls to support."""
    assert normalize_role("NONE", "BOTTOM") == "support"
    assert normalize_role("", "BOT") == "support"


def test_unknown_lane_passes_through_lowercased():
    assert normalize_role("NONE", "NONE") == "none"
    assert normalize_role("SOLO", "ARAM_LANE") == "aram_lane"


def test_is_valid_role():
    assert is_valid_role("top")
    assert is_valid_role(" ADC ")
    assert not is_valid_role("bot")
    assert not is_valid_role(None)
