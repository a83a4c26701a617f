"""Refresh pipeline: selection -> required keys -> fetch -> rank."""

import logging

from counterpick.models.matchup import MatchupSnapshot, RankedEntry
from counterpick.models.selection import Selection
from counterpick.services.extraction import parse_metrics
from counterpick.services.fetch_orchestrator import FetchOrchestrator
from counterpick.services.matchup_keys import matchup_key, required_keys
from counterpick.services.ranking import rank
from counterpick.utils.champion_slug import champion_slug

logger = logging.getLogger(__name__)

INCOMPLETE_SELECTION_MESSAGE = "Select your champions, opponent, and lane to fetch."


class MatchupSummaryService:
    """Entry point used by the API to refresh and read matchup rankings."""

    def __init__(self, orchestrator: FetchOrchestrator):
        self.orchestrator = orchestrator

    @staticmethod
    def required_keys(selection: Selection) -> list[str]:
        return required_keys(
            selection.own_champion_ids,
            selection.opponent_champion_id,
            selection.lane,
            selection.tier,
        )

    async def refresh(self, selection: Selection) -> MatchupSnapshot:
        """Fetch whatever the selection still needs, then report.

        Rankings are attached only when every required key is cached.
        """
        keys = self.required_keys(selection)
        if keys:
            await self.orchestrator.ensure_fetched(keys)
        return self._build_snapshot(selection, keys)

    def snapshot(self, selection: Selection) -> MatchupSnapshot:
        """Report progress and rankings without fetching anything."""
        return self._build_snapshot(selection, self.required_keys(selection))

    def _build_snapshot(self, selection: Selection, keys: list[str]) -> MatchupSnapshot:
        if not keys:
            return MatchupSnapshot(
                in_progress=self.orchestrator.in_progress,
                message=INCOMPLETE_SELECTION_MESSAGE if not selection.is_complete else None,
            )

        snapshot = MatchupSnapshot(
            required_keys=keys,
            fetched_count=self.orchestrator.fetched_count(keys),
            in_progress=self.orchestrator.in_progress,
        )
        if snapshot.fully_ready:
            snapshot.rankings = rank(self._entries(selection))
        else:
            snapshot.message = f"{snapshot.fetched_count}/{snapshot.total} fetched"
        return snapshot

    def _entries(self, selection: Selection) -> list[RankedEntry]:
        """One entry per distinct non-mirror matchup, in selection order.

        Own ids sharing a slug ("MonkeyKing" and "Wukong") share one entry,
        the first of them.
        """
        opponent_slug = champion_slug(selection.opponent_champion_id)
        cache = self.orchestrator.cache
        fetcher = self.orchestrator.fetcher
        seen_keys: set[str] = set()
        entries = []
        for champion_id in selection.own_champion_ids:
            if champion_slug(champion_id) == opponent_slug:
                continue
            key = matchup_key(
                champion_id,
                selection.opponent_champion_id,
                selection.lane,
                selection.tier,
            )
            if key in seen_keys:
                continue
            seen_keys.add(key)
            record = cache.get(key)
            if record is None:
                continue
            entries.append(
                RankedEntry(
                    champion_id=champion_id,
                    key=key,
                    metrics=parse_metrics(record.summary),
                    games=record.games,
                    matchup_url=fetcher.matchup_url(key),
                )
            )
        return entries
