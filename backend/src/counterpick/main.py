"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from counterpick.config import settings
from counterpick.api.routes.matchups import router as matchups_router
from counterpick.services.catalog_client import ChampionCatalogClient
from counterpick.services.fetch_orchestrator import FetchOrchestrator
from counterpick.services.matchup_fetcher import MatchupFetcher
from counterpick.services.matchup_summary_service import MatchupSummaryService
from counterpick.services.preference_store import PreferenceStore


def get_preferences_path() -> Path:
    """Preferences file from settings, relative paths resolved from the repo root."""
    prefs_path = Path(settings.preferences_path)
    if prefs_path.is_absolute():
        return prefs_path
    repo_root = Path(__file__).parent.parent.parent.parent
    return repo_root / settings.preferences_path


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: tests may have set these already
    if not hasattr(app.state, "catalog_client"):
        app.state.catalog_client = ChampionCatalogClient(
            base_url=settings.ddragon_base_url,
            timeout=settings.request_timeout,
        )
    if not hasattr(app.state, "summary_service"):
        fetcher = MatchupFetcher(
            relay_base_url=settings.relay_base_url,
            stats_base_url=settings.stats_base_url,
            patch_window=settings.patch_window,
            timeout=settings.request_timeout,
        )
        app.state.summary_service = MatchupSummaryService(FetchOrchestrator(fetcher))
    if not hasattr(app.state, "preference_store"):
        app.state.preference_store = PreferenceStore(get_preferences_path())
    yield
    # Shutdown: close HTTP clients
    await app.state.catalog_client.close()
    await app.state.summary_service.orchestrator.fetcher.close()


app = FastAPI(
    title="Counterpick",
    description="Rank your champion pool against a lane opponent",
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
    return {"status": "healthy", "service": "counterpick"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Counterpick API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(matchups_router)
