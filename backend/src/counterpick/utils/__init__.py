"""Utility modules for counterpick."""

from counterpick.utils.champion_slug import (
    SLUG_ALIASES,
    champion_slug,
)

__all__ = [
    "SLUG_ALIASES",
    "champion_slug",
]
