"""REST endpoints for versioned matchup notes."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from matchup_notes.api.dependencies import get_store, http_error
from matchup_notes.errors import MatchupNotesError
from matchup_notes.models.matchup import MatchupFilter, MatchupUpdate
from matchup_notes.services.matchup_store import MatchupStore
from matchup_notes.utils.champion_catalog import canonical_champion_name
from matchup_notes.utils.role_normalizer import ROLE_ORDER, is_valid_role

router = APIRouter(prefix="/api/matchups", tags=["matchups"])

StoreDep = Annotated[MatchupStore, Depends(get_store)]


class NewMatchupRequest(BaseModel):
    """Request body for creating a matchup."""

    my_champion: str = Field(min_length=1)
    enemy_champion: str = Field(min_length=1)
    role: str


class MatchupUpdateRequest(BaseModel):
    """Request body for a new matchup version."""

    notes: str
    tags: list[str] = []
    runes: list[str] = []
    summoner_spells: list[str] = []
    items: list[str] = []


@router.get("")
def list_matchups(
    store: StoreDep,
    my_champion: Optional[str] = None,
    enemy_champion: Optional[str] = None,
    role: Optional[str] = None,
    tags: Annotated[Optional[list[str]], Query()] = None,
    search: Optional[str] = None,
):
    """List matchups, optionally filtered. Repeat ``tags`` to require several."""
    matchup_filter = MatchupFilter(
        my_champion=my_champion,
        enemy_champion=enemy_champion,
        role=role,
        tags=tags,
        search=search,
    )
    try:
        matchups = store.list_matchups(matchup_filter)
    except MatchupNotesError as e:
        raise http_error(e)
    return {"matchups": [m.to_dict() for m in matchups]}


@router.get("/search")
def search_matchups(store: StoreDep, query: str):
    """Search champions and current notes."""
    try:
        matchups = store.search(query)
    except MatchupNotesError as e:
        raise http_error(e)
    return {"matchups": [m.to_dict() for m in matchups]}


@router.get("/{matchup_id}")
def get_matchup(store: StoreDep, matchup_id: str):
    try:
        return store.get(matchup_id).to_dict()
    except MatchupNotesError as e:
        raise http_error(e)


@router.get("/{matchup_id}/versions/{number}")
def get_matchup_version(store: StoreDep, matchup_id: str, number: int):
    """Get one historical version of a matchup."""
    try:
        return store.get_version(matchup_id, number).to_dict()
    except MatchupNotesError as e:
        raise http_error(e)


@router.post("", status_code=201)
def create_matchup(store: StoreDep, body: NewMatchupRequest):
    """Create a matchup with an empty first version."""
    if not is_valid_role(body.role):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid role '{body.role}'. Expected one of: {', '.join(ROLE_ORDER)}",
        )
    try:
        matchup = store.create(
            canonical_champion_name(body.my_champion),
            canonical_champion_name(body.enemy_champion),
            body.role.strip().lower(),
        )
    except MatchupNotesError as e:
        raise http_error(e)
    return matchup.to_dict()


@router.put("/{matchup_id}")
def update_matchup(store: StoreDep, matchup_id: str, body: MatchupUpdateRequest):
    """Save new notes as the next version."""
    update = MatchupUpdate(
        notes=body.notes,
        tags=body.tags,
        runes=body.runes,
        summoner_spells=body.summoner_spells,
        items=body.items,
    )
    try:
        return store.add_version(matchup_id, update).to_dict()
    except MatchupNotesError as e:
        raise http_error(e)


@router.delete("/{matchup_id}", status_code=204)
def delete_matchup(store: StoreDep, matchup_id: str):
    try:
        store.delete(matchup_id)
    except MatchupNotesError as e:
        raise http_error(e)
