"""Ranking of own champions by matchup advantage."""

from typing import Iterable, Optional

from counterpick.models.matchup import RankedEntry, Rankings

NEG_INF = float("-inf")


def _or_neg_inf(value: Optional[float]) -> float:
    return NEG_INF if value is None else value


def normalized_sort_key(entry: RankedEntry) -> tuple[float, float, float]:
    """Normalized advantage, then vs-average difference, then win rate above 50%.

    A missing win rate counts as 0%, so its last tie-break is -50.
    """
    metrics = entry.metrics
    win_rate = metrics.win_rate if metrics.win_rate is not None else 0.0
    return (
        _or_neg_inf(metrics.normalized_diff),
        _or_neg_inf(metrics.vs_average_diff),
        win_rate - 50,
    )


def win_rate_sort_key(entry: RankedEntry) -> tuple[float, float, float]:
    """Win rate, then normalized advantage, then vs-average difference."""
    metrics = entry.metrics
    return (
        _or_neg_inf(metrics.win_rate),
        _or_neg_inf(metrics.normalized_diff),
        _or_neg_inf(metrics.vs_average_diff),
    )


def rank(entries: Iterable[RankedEntry]) -> Rankings:
    """Sort entries into both ranking views, best first.

    Entries without any metric are left out of both views. Entries with
    equal keys keep their input order (sorted() is stable with reverse=True).
    """
    valid = [entry for entry in entries if entry.metrics.has_any]
    return Rankings(
        by_normalized=sorted(valid, key=normalized_sort_key, reverse=True),
        by_win_rate=sorted(valid, key=win_rate_sort_key, reverse=True),
    )
