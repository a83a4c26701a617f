"""HTTP client for lolalytics matchup pages.

Pages are requested through a CORS relay (``<relay>/v1?url=<target>``) the
same way the browser frontend does, so both see identical payloads.
"""

import asyncio
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from counterpick.exceptions import MatchupFetchError
from counterpick.models.matchup import MatchupRecord
from counterpick.services.extraction import DEFAULT_RECIPE, ExtractionRecipe, extract_record
from counterpick.services.matchup_keys import parse_matchup_key

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_matchup_url(
    stats_base_url: str,
    own_slug: str,
    opponent_slug: str,
    lane: str,
    tier: str,
    patch_window: str = "30",
) -> str:
    """Direct stats-site URL for one matchup page."""
    return (
        f"{stats_base_url.rstrip('/')}/lol/{own_slug}/vs/{opponent_slug}/build/"
        f"?lane={lane}&tier={tier}&vslane={lane}&patch={patch_window}"
    )


def build_relay_url(relay_base_url: str, target: str) -> str:
    """Wrap ``target`` in the CORS relay endpoint."""
    return f"{relay_base_url.rstrip('/')}/v1?url={quote(target, safe=_URI_COMPONENT_SAFE)}"


class MatchupFetcher:
    """Fetches and extracts one matchup page per key."""

    def __init__(
        self,
        relay_base_url: str,
        stats_base_url: str,
        patch_window: str = "30",
        timeout: float = 20.0,
        recipe: ExtractionRecipe = DEFAULT_RECIPE,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the fetcher.

        Args:
            relay_base_url: CORS relay host, e.g. https://corsmirror.com
            stats_base_url: Stats site host, e.g. https://lolalytics.com
            patch_window: Value of the ``patch`` query parameter
            timeout: Request timeout in seconds
            recipe: Selectors used to locate summary and game count
            client: Optional pre-built client (tests inject a MockTransport)
        """
        self.relay_base_url = relay_base_url
        self.stats_base_url = stats_base_url
        self.patch_window = patch_window
        self.timeout = timeout
        self.recipe = recipe
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    def matchup_url(self, key: str) -> str:
        """Stats-site page for a matchup key."""
        parts = parse_matchup_key(key)
        return build_matchup_url(
            self.stats_base_url,
            parts.own_slug,
            parts.opponent_slug,
            parts.lane,
            parts.tier,
            self.patch_window,
        )

    def relay_url(self, key: str) -> str:
        return build_relay_url(self.relay_base_url, self.matchup_url(key))

    async def fetch(self, key: str) -> MatchupRecord:
        """Fetch and extract the page for ``key``.

        Raises:
            MatchupFetchError: On transport errors or a non-success status
            MalformedPayloadError: If the page has no summary node
        """
        client = await self._get_client()
        url = self.relay_url(key)
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise MatchupFetchError(key, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise MatchupFetchError(key, str(e) or type(e).__name__) from e

        # Page parsing runs in a worker thread so the event loop keeps serving fetches
        return await asyncio.to_thread(extract_record, response.text, self.recipe)
