"""Shared helpers for route handlers."""

from fastapi import HTTPException, Request

from matchup_notes.errors import (
    ClientError,
    ClientNotRunningError,
    MatchupNotesError,
    NotFoundError,
    StorageError,
)
from matchup_notes.services.client_connector import ClientApiConnector
from matchup_notes.services.matchup_store import MatchupStore


def get_store(request: Request) -> MatchupStore:
    """Store created by the app lifespan."""
    return request.app.state.store


def get_connector(request: Request) -> ClientApiConnector:
    """Connector created by the app lifespan."""
    return request.app.state.connector


def http_error(error: MatchupNotesError) -> HTTPException:
    """Convert an application error into a plain-text HTTP error."""
    if isinstance(error, NotFoundError):
        status_code = 404
    elif isinstance(error, ClientNotRunningError):
        status_code = 503
    elif isinstance(error, ClientError):
        status_code = 502
    elif isinstance(error, StorageError):
        status_code = 500
    else:
        status_code = 400
    return HTTPException(status_code=status_code, detail=str(error))
