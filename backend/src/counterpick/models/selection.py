"""User selection models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Lane(str, Enum):
    """Lanes as named by the stats site."""

    TOP = "top"
    JUNGLE = "jungle"
    MIDDLE = "middle"
    BOTTOM = "bottom"
    SUPPORT = "support"


class Tier(str, Enum):
    """Skill brackets the stats site aggregates over."""

    ALL = "all"
    ONE_TRICK = "1trick"
    CHALLENGER = "challenger"
    GRANDMASTER = "grandmaster"
    GRANDMASTER_PLUS = "grandmaster_plus"
    MASTER = "master"
    MASTER_PLUS = "master_plus"
    DIAMOND = "diamond"
    D2_PLUS = "d2_plus"
    DIAMOND_PLUS = "diamond_plus"
    EMERALD = "emerald"
    EMERALD_PLUS = "emerald_plus"
    PLATINUM = "platinum"
    PLATINUM_PLUS = "platinum_plus"
    GOLD = "gold"
    GOLD_PLUS = "gold_plus"
    SILVER = "silver"
    BRONZE = "bronze"
    IRON = "iron"
    UNRANKED = "unranked"


DEFAULT_TIER = Tier.DIAMOND_PLUS


def parse_tier(value: Optional[str]) -> Optional[Tier]:
    """Tier for a stored or configured value, or None if it is not a known tier."""
    if not value:
        return None
    try:
        return Tier(str(value).lower())
    except ValueError:
        return None


@dataclass
class Selection:
    """What the user picked: own pool, opponent, lane and tier.

    Own champion ids keep insertion order (display order) and are unique;
    repeated ids are dropped on construction keeping the first occurrence.
    """

    own_champion_ids: list[str] = field(default_factory=list)
    opponent_champion_id: str = ""
    lane: Lane | None = None
    tier: Tier = DEFAULT_TIER

    def __post_init__(self):
        self.own_champion_ids = list(dict.fromkeys(self.own_champion_ids))
        if isinstance(self.lane, str) and not isinstance(self.lane, Lane):
            self.lane = Lane(self.lane.lower()) if self.lane else None
        if not isinstance(self.tier, Tier):
            self.tier = Tier(self.tier)

    @property
    def is_complete(self) -> bool:
        """True when lane, opponent and at least one own champion are set."""
        return bool(self.lane and self.opponent_champion_id and self.own_champion_ids)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "own_champion_ids": list(self.own_champion_ids),
            "opponent_champion_id": self.opponent_champion_id,
            "lane": self.lane.value if self.lane else None,
            "tier": self.tier.value,
        }
