"""Business logic services."""

from counterpick.services.catalog_client import ChampionCatalogClient, filter_champions
from counterpick.services.fetch_orchestrator import FetchOrchestrator
from counterpick.services.matchup_cache import MatchupCache
from counterpick.services.matchup_fetcher import MatchupFetcher
from counterpick.services.matchup_summary_service import MatchupSummaryService
from counterpick.services.preference_store import PreferenceStore

__all__ = [
    "ChampionCatalogClient",
    "filter_champions",
    "FetchOrchestrator",
    "MatchupCache",
    "MatchupFetcher",
    "MatchupSummaryService",
    "PreferenceStore",
]
