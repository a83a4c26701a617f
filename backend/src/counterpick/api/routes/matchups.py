"""REST endpoints for champion catalog, stored selection and matchup rankings."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from counterpick.config import settings
from counterpick.exceptions import CatalogUnavailableError
from counterpick.models.selection import DEFAULT_TIER, Lane, Selection, Tier, parse_tier
from counterpick.services.catalog_client import ChampionCatalogClient, filter_champions
from counterpick.services.matchup_summary_service import MatchupSummaryService
from counterpick.services.preference_store import PreferenceStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["matchups"])


def configured_default_tier() -> Tier:
    """Tier used when neither the request nor the stored preferences name one."""
    return parse_tier(settings.default_tier) or DEFAULT_TIER


class SelectionRequest(BaseModel):
    own_champion_ids: list[str] = Field(default_factory=list)
    opponent_champion_id: str = ""
    lane: Optional[Lane] = None
    tier: Optional[Tier] = None  # Falls back to the configured default tier

    def to_selection(self) -> Selection:
        return Selection(
            own_champion_ids=self.own_champion_ids,
            opponent_champion_id=self.opponent_champion_id,
            lane=self.lane,
            tier=self.tier or configured_default_tier(),
        )


def _catalog(request: Request) -> ChampionCatalogClient:
    return request.app.state.catalog_client


def _summary_service(request: Request) -> MatchupSummaryService:
    return request.app.state.summary_service


def _preferences(request: Request) -> PreferenceStore:
    return request.app.state.preference_store


@router.get("/champions")
async def list_champions(request: Request, q: Optional[str] = None):
    """Champion catalog, optionally filtered by a search string."""
    try:
        champions = await _catalog(request).champions()
    except CatalogUnavailableError as e:
        logger.warning(f"Champion catalog unavailable: {e}")
        raise HTTPException(status_code=503, detail="Champion data unavailable")

    return {"champions": [champ.to_dict() for champ in filter_champions(champions, q)]}


@router.get("/tiers")
def list_tiers():
    return {"tiers": [tier.value for tier in Tier], "default": configured_default_tier().value}


@router.get("/lanes")
def list_lanes():
    return {"lanes": [lane.value for lane in Lane]}


@router.get("/selection")
def get_selection(request: Request):
    """Stored selection (own champions, lane, tier). Opponent is always empty."""
    return _preferences(request).load_selection(settings.default_tier).to_dict()


@router.put("/selection")
def save_selection(request: Request, body: SelectionRequest):
    """Persist own champions, lane and tier."""
    store = _preferences(request)
    store.save_selection(body.to_selection())
    return store.load_selection(settings.default_tier).to_dict()


@router.post("/matchups/refresh")
async def refresh_matchups(request: Request, body: SelectionRequest):
    """Fetch missing matchups for the selection and return progress and rankings."""
    snapshot = await _summary_service(request).refresh(body.to_selection())
    return snapshot.to_dict()


@router.post("/matchups/progress")
def matchup_progress(request: Request, body: SelectionRequest):
    """Current progress and rankings for the selection, without fetching."""
    return _summary_service(request).snapshot(body.to_selection()).to_dict()
