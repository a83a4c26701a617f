"""Matchup records, parsed metrics and ranking results."""

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class MatchupRecord:
    """Raw result of one successful matchup page fetch. Write-once."""

    summary: str
    games: int | float | None = None


@dataclass(frozen=True)
class ParsedMetrics:
    """Signals extracted from a matchup summary sentence (percentages)."""

    win_rate: float | None = None
    vs_average_diff: float | None = None  # Difference from the champion's average win rate
    normalized_diff: float | None = None  # Site-normalized advantage

    @property
    def has_any(self) -> bool:
        return (
            self.win_rate is not None
            or self.vs_average_diff is not None
            or self.normalized_diff is not None
        )


@dataclass(frozen=True)
class RankedEntry:
    """One own champion's matchup against the selected opponent."""

    champion_id: str
    key: str
    metrics: ParsedMetrics = field(default_factory=ParsedMetrics)
    games: int | float | None = None
    matchup_url: str | None = None  # Direct link to the stats-site page

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Rankings:
    """Both ranking views, each sorted descending."""

    by_normalized: list[RankedEntry] = field(default_factory=list)
    by_win_rate: list[RankedEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "by_normalized": [entry.to_dict() for entry in self.by_normalized],
            "by_win_rate": [entry.to_dict() for entry in self.by_win_rate],
        }


@dataclass
class MatchupSnapshot:
    """Progress and (once every required key is cached) rankings for a selection."""

    required_keys: list[str] = field(default_factory=list)
    fetched_count: int = 0
    in_progress: bool = False
    rankings: Rankings | None = None
    message: str | None = None

    @property
    def total(self) -> int:
        return len(self.required_keys)

    @property
    def fully_ready(self) -> bool:
        return self.total > 0 and self.fetched_count == self.total

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "required_keys": list(self.required_keys),
            "fetched_count": self.fetched_count,
            "total": self.total,
            "in_progress": self.in_progress,
            "fully_ready": self.fully_ready,
            "rankings": self.rankings.to_dict() if self.rankings else None,
            "message": self.message,
        }
