"""Tests for the versioned matchup model."""
import dataclasses

import pytest

from matchup_notes.models.matchup import (
    Matchup,
    MatchupFilter,
    MatchupUpdate,
    MatchupVersion,
)


@pytest.fixture
def darius_garen():
    return Matchup.new("Darius", "Garen", "top")


def test_create_matchup(darius_garen):
    assert darius_garen.my_champion == "Darius"
    assert darius_garen.enemy_champion == "Garen"
    assert darius_garen.role == "top"
    assert len(darius_garen.versions) == 1
    assert darius_garen.versions[0].version == 1
    assert darius_garen.versions[0].notes == ""
    assert darius_garen.current_version == 1


def test_new_matchups_get_distinct_ids():
    a = Matchup.new("Darius", "Garen", "top")
    b = Matchup.new("Darius", "Garen", "top")
    assert a.id != b.id


def test_add_version_appends(darius_garen):
    darius_garen.add_version(MatchupUpdate(notes="Test notes", tags=["easy"]))

    assert len(darius_garen.versions) == 2
    assert darius_garen.current_version == 2
    assert darius_garen.current().notes == "Test notes"
    assert darius_garen.current().tags == ("easy",)


def test_add_version_leaves_history_untouched(darius_garen):
    darius_garen.add_version(MatchupUpdate(notes="first", tags=["a"], items=["Sundered Sky"]))
    snapshot = [v.to_dict() for v in darius_garen.versions]

    darius_garen.add_version(MatchupUpdate(notes="second"))
    darius_garen.add_version(MatchupUpdate(notes="third"))

    assert [v.to_dict() for v in darius_garen.versions[:2]] == snapshot
    assert [v.version for v in darius_garen.versions] == [1, 2, 3, 4]
    assert darius_garen.current_version == len(darius_garen.versions)


def test_versions_are_immutable(darius_garen):
    with pytest.raises(dataclasses.FrozenInstanceError):
        darius_garen.versions[0].notes = "rewritten"


def test_get_version(darius_garen):
    darius_garen.add_version(MatchupUpdate(notes="v2"))
    assert darius_garen.get_version(1).notes == ""
    assert darius_garen.get_version(2).notes == "v2"
    assert darius_garen.get_version(0) is None
    assert darius_garen.get_version(3) is None


class TestMatchesFilter:
    def test_my_champion(self, darius_garen):
        assert darius_garen.matches_filter(MatchupFilter(my_champion="Darius"))
        assert darius_garen.matches_filter(MatchupFilter(my_champion="darius"))
        assert not darius_garen.matches_filter(MatchupFilter(my_champion="Garen"))

    def test_enemy_and_role(self, darius_garen):
        assert darius_garen.matches_filter(MatchupFilter(enemy_champion="GAREN", role="TOP"))
        assert not darius_garen.matches_filter(MatchupFilter(enemy_champion="Garen", role="mid"))

    def test_empty_filter_matches(self, darius_garen):
        assert darius_garen.matches_filter(MatchupFilter())

    def test_tags_require_all(self, darius_garen):
        darius_garen.add_version(MatchupUpdate(notes="", tags=["Easy", "early"]))
        assert darius_garen.matches_filter(MatchupFilter(tags=["easy"]))
        assert darius_garen.matches_filter(MatchupFilter(tags=["EASY", "Early"]))
        assert not darius_garen.matches_filter(MatchupFilter(tags=["easy", "scaling"]))

    def test_tags_check_current_version_only(self, darius_garen):
        darius_garen.add_version(MatchupUpdate(notes="", tags=["easy"]))
        darius_garen.add_version(MatchupUpdate(notes="", tags=["hard"]))
        assert not darius_garen.matches_filter(MatchupFilter(tags=["easy"]))

    def test_tags_fail_without_versions(self):
        empty = Matchup(id="x", my_champion="Ahri", enemy_champion="Zed", role="mid")
        assert not empty.matches_filter(MatchupFilter(tags=["easy"]))
        assert empty.matches_filter(MatchupFilter(tags=None))

    def test_search_champions_and_notes(self, darius_garen):
        darius_garen.add_version(MatchupUpdate(notes="Respect his level 6 all-in"))
        assert darius_garen.matches_filter(MatchupFilter(search="dar"))
        assert darius_garen.matches_filter(MatchupFilter(search="GAR"))
        assert darius_garen.matches_filter(MatchupFilter(search="level 6"))
        assert not darius_garen.matches_filter(MatchupFilter(search="ignite"))

    def test_search_ignores_old_notes(self, darius_garen):
        darius_garen.add_version(MatchupUpdate(notes="take ignite"))
        darius_garen.add_version(MatchupUpdate(notes="take teleport"))
        assert not darius_garen.matches_filter(MatchupFilter(search="ignite"))

    def test_clauses_are_conjoined(self, darius_garen):
        assert not darius_garen.matches_filter(MatchupFilter(my_champion="Darius", search="zed"))


def test_dict_round_trip(darius_garen):
    darius_garen.add_version(
        MatchupUpdate(
            notes="n",
            tags=["easy"],
            runes=["Conqueror"],
            summoner_spells=["Flash", "Ghost"],
            items=["Trinity Force"],
        )
    )
    restored = Matchup.from_dict(darius_garen.to_dict())
    assert restored == darius_garen


def test_version_from_dict_defaults_missing_lists():
    version = MatchupVersion.from_dict(
        {"version": 1, "date": "2024-05-01T12:00:00Z", "notes": "old file"}
    )
    assert version.tags == ()
    assert version.runes == ()
    assert version.summoner_spells == ()
    assert version.items == ()
    assert version.date.tzinfo is not None
