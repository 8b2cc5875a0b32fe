"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from matchup_notes.config import settings
from matchup_notes.api.routes.client import router as client_router
from matchup_notes.api.routes.matches import router as matches_router
from matchup_notes.api.routes.matchups import router as matchups_router
from matchup_notes.repositories.blob_store import JsonBlobStore
from matchup_notes.services.client_connector import ClientApiConnector
from matchup_notes.services.credential_source import get_credential_source
from matchup_notes.services.matchup_store import MatchupStore
from matchup_notes.utils.champion_catalog import all_champion_names

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: tests may pre-populate app.state with their own instances
    if not hasattr(app.state, "store"):
        data_dir = Path(settings.data_dir).expanduser() if settings.data_dir else None
        app.state.store = MatchupStore(JsonBlobStore(data_dir))
    if not hasattr(app.state, "connector"):
        source = get_credential_source(
            settings.resolved_lockfile_path,
            process_name=settings.client_process_name,
        )
        app.state.connector = ClientApiConnector(
            source,
            username=settings.client_username,
            timeout=settings.request_timeout,
        )
    yield
    # Shutdown: release the HTTP client
    app.state.connector.close()


app = FastAPI(
    title="Matchup Notes",
    description="Versioned champion matchup notes with local match history import",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "matchup-notes"}


@app.get("/api/champions")
async def list_champions():
    """Known champion names for pickers."""
    return {"champions": all_champion_names()}


# Register routers
app.include_router(matchups_router)
app.include_router(matches_router)
app.include_router(client_router)


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run("matchup_notes.main:app", host=settings.host, port=settings.port)
