"""Text extraction from lolalytics matchup pages.

The matchup page carries a sentence of the form::

    Aatrox wins against Darius 52.31% of the time which is 1.05% different
    than Aatrox's average ... After normalising both champions win rates
    Aatrox wins against Darius 0.42% different than expected.

and, separately, the number of games the statistics are based on. Both are
located by CSS selectors bundled in an ExtractionRecipe so a layout change
on the site only needs a new recipe.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

from counterpick.exceptions import MalformedPayloadError
from counterpick.models.matchup import MatchupRecord, ParsedMetrics

logger = logging.getLogger(__name__)

_NUMBER = r"(-?\d+(?:\.\d+)?)"

SUMMARY_PATTERN = re.compile(
    _NUMBER
    + r"% of the time which is "
    + _NUMBER
    + r"% different.*?After normalising.*?"
    + _NUMBER
    + r"% different",
    re.IGNORECASE,
)

_WHITESPACE = re.compile(r"\s+")
_GAME_COUNT_NOISE = re.compile(r"[,\s]")


@dataclass(frozen=True)
class ExtractionRecipe:
    """Where the summary sentence and the game count live in the page."""

    summary_selector: str
    games_selector: str


DEFAULT_RECIPE = ExtractionRecipe(
    summary_selector=".lolx-links > span:nth-child(1)",
    games_selector=".w-44 > div:nth-child(1) > div:nth-child(2) > div:nth-child(1)",
)


def parse_document(html: str) -> BeautifulSoup:
    """Parse page HTML into a tree. Scripts are never run."""
    return BeautifulSoup(html, "html.parser")


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _node_text(document: BeautifulSoup, selector: str) -> Optional[str]:
    node = document.select_one(selector)
    if node is None:
        return None
    return node.get_text()


def extract_summary(document: BeautifulSoup, recipe: ExtractionRecipe = DEFAULT_RECIPE) -> str:
    """Summary sentence with whitespace collapsed, or "" when the node is missing."""
    text = _node_text(document, recipe.summary_selector)
    return _collapse(text) if text else ""


def extract_game_count(
    document: BeautifulSoup, recipe: ExtractionRecipe = DEFAULT_RECIPE
) -> int | float | None:
    """Number of games behind the matchup statistics.

    Commas and whitespace are stripped before parsing ("12,345" -> 12345).
    Returns None when the node is missing or its text is not a finite number.
    """
    text = _node_text(document, recipe.games_selector)
    if text is None:
        return None
    cleaned = _GAME_COUNT_NOISE.sub("", text)
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def extract_record(html: str, recipe: ExtractionRecipe = DEFAULT_RECIPE) -> MatchupRecord:
    """Build a MatchupRecord from a fetched page.

    Raises:
        MalformedPayloadError: If the page has no summary node at all (relay
            error pages, layout changes). A summary that is present but does
            not match SUMMARY_PATTERN is not an error.
    """
    document = parse_document(html)
    if document.select_one(recipe.summary_selector) is None:
        raise MalformedPayloadError(
            f"No node matches summary selector {recipe.summary_selector!r}"
        )
    return MatchupRecord(
        summary=extract_summary(document, recipe),
        games=extract_game_count(document, recipe),
    )


def parse_metrics(summary: Optional[str]) -> ParsedMetrics:
    """Extract win rate, vs-average and normalized differences from a summary.

    Examples:
        >>> parse_metrics("62.34% of the time which is 4.10% different. "
        ...               "After normalising it is -1.20% different")
        ParsedMetrics(win_rate=62.34, vs_average_diff=4.1, normalized_diff=-1.2)
    """
    if not summary:
        return ParsedMetrics()
    match = SUMMARY_PATTERN.search(_collapse(summary))
    if match is None:
        logger.debug(f"Summary did not match pattern: {summary[:80]!r}")
        return ParsedMetrics()
    win_rate, vs_average, normalized = (float(group) for group in match.groups())
    return ParsedMetrics(
        win_rate=win_rate,
        vs_average_diff=vs_average,
        normalized_diff=normalized,
    )
