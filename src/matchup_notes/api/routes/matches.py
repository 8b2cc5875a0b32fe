"""REST endpoints for imported match history."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from matchup_notes.api.dependencies import get_store, http_error
from matchup_notes.errors import MatchupNotesError
from matchup_notes.models.match import MatchUpdate
from matchup_notes.services.matchup_store import MatchupStore

router = APIRouter(prefix="/api/matches", tags=["matches"])

StoreDep = Annotated[MatchupStore, Depends(get_store)]


class MatchUpdateRequest(BaseModel):
    """Partial update. Omitted fields are left unchanged."""

    notes: Optional[str] = None
    linked_matchup: Optional[str] = None  # "" clears the link


@router.get("")
def list_matches(store: StoreDep):
    """All matches, newest first."""
    try:
        matches = store.list_matches()
    except MatchupNotesError as e:
        raise http_error(e)
    return {"matches": [m.to_dict() for m in matches]}


@router.patch("/{match_id}")
def update_match(store: StoreDep, match_id: str, body: MatchUpdateRequest):
    update = MatchUpdate(notes=body.notes, linked_matchup=body.linked_matchup)
    try:
        return store.update_match(match_id, update).to_dict()
    except MatchupNotesError as e:
        raise http_error(e)
