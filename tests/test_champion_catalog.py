"""Tests for champion id lookup."""
from matchup_notes.utils.champion_catalog import (
    CHAMPION_NAMES,
    all_champion_names,
    canonical_champion_name,
    champion_id,
    champion_name,
)


def test_known_champion():
    assert champion_name(266) == "Aatrox"
    assert champion_name(1) == "Annie"
    assert champion_name(4) == "TwistedFate"


def test_unknown_champion_gets_placeholder():
    assert champion_name(999999) == "Champion999999"
    assert champion_name(0) == "Champion0"


def test_reverse_lookup_is_case_insensitive():
    assert champion_id("aatrox") == 266
    assert champion_id(" Darius ") == 122
    assert champion_id("NotAChampion") is None


def test_all_champion_names_sorted_and_complete():
    names = all_champion_names()
    assert names == sorted(names)
    assert len(names) == len(CHAMPION_NAMES)


def test_canonical_name_uses_table_spelling():
    assert canonical_champion_name("twistedfate") == "TwistedFate"
    assert canonical_champion_name(" ksante ") == "KSante"


def test_canonical_name_keeps_unknown_names():
    assert canonical_champion_name(" Newchamp ") == "Newchamp"
