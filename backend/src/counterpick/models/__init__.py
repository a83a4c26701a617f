"""Data models for counterpick."""

from counterpick.models.champion import ChampionRef
from counterpick.models.selection import Lane, Selection, Tier
from counterpick.models.matchup import (
    MatchupRecord,
    MatchupSnapshot,
    ParsedMetrics,
    RankedEntry,
    Rankings,
)

__all__ = [
    "ChampionRef",
    "Lane",
    "Selection",
    "Tier",
    "MatchupRecord",
    "MatchupSnapshot",
    "ParsedMetrics",
    "RankedEntry",
    "Rankings",
]
