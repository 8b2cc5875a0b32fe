"""REST endpoints for the local game client integration."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from matchup_notes.api.dependencies import get_connector, get_store, http_error
from matchup_notes.config import settings
from matchup_notes.errors import MatchupNotesError
from matchup_notes.models.client import Connected
from matchup_notes.services.client_connector import ClientApiConnector
from matchup_notes.services.matchup_store import MatchupStore

router = APIRouter(prefix="/api/client", tags=["client"])

ConnectorDep = Annotated[ClientApiConnector, Depends(get_connector)]
StoreDep = Annotated[MatchupStore, Depends(get_store)]


@router.post("/connect")
def connect_client(connector: ConnectorDep):
    """Discover the running client and verify its credentials."""
    with connector.lock:
        try:
            status = connector.connect()
        except MatchupNotesError as e:
            raise http_error(e)
    return {"connected": status.connected, "summoner_name": status.summoner_name}


@router.get("/status")
def client_status(connector: ConnectorDep):
    state = connector.state
    summoner_name: Optional[str] = None
    if isinstance(state, Connected):
        summoner_name = state.summoner_name
    return {"connected": connector.is_connected(), "summoner_name": summoner_name}


@router.post("/import")
def import_matches(
    connector: ConnectorDep,
    store: StoreDep,
    count: Annotated[Optional[int], Query(ge=1, le=200)] = None,
):
    """Import recent games from the client, skipping ones already stored."""
    with connector.lock:
        if not connector.is_connected():
            raise HTTPException(status_code=409, detail="Not connected to League client")
        try:
            parsed = connector.fetch_match_history(count or settings.default_import_count)
        except MatchupNotesError as e:
            raise http_error(e)

    try:
        imported = store.import_matches(parsed)
    except MatchupNotesError as e:
        raise http_error(e)
    return {"imported": [m.to_dict() for m in imported]}


@router.get("/debug")
def debug_endpoint(connector: ConnectorDep, endpoint: str):
    """Raw response of a client endpoint. Only available in debug mode."""
    if not settings.debug:
        raise HTTPException(status_code=404, detail="Not found")
    if not endpoint.startswith("/"):
        raise HTTPException(status_code=400, detail="Endpoint must start with '/'")
    with connector.lock:
        try:
            return {"body": connector.debug_endpoint(endpoint)}
        except MatchupNotesError as e:
            raise http_error(e)
