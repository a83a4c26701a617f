"""Fetches missing matchup keys into the shared cache."""

import asyncio
import logging
from typing import Iterable, Optional

from counterpick.exceptions import MalformedPayloadError, MatchupFetchError
from counterpick.services.matchup_cache import MatchupCache
from counterpick.services.matchup_fetcher import MatchupFetcher

logger = logging.getLogger(__name__)


class FetchOrchestrator:
    """Fills a MatchupCache with one fetch per missing key.

    Every missing key of a batch is dispatched at once; a failed key is
    logged and left absent so a later call retries it. Two overlapping
    calls may both fetch the same key. The cache keeps the first record.
    """

    def __init__(self, fetcher: MatchupFetcher, cache: Optional[MatchupCache] = None):
        self.fetcher = fetcher
        self.cache = cache if cache is not None else MatchupCache()
        self._outstanding = 0

    @property
    def in_progress(self) -> bool:
        """True while any dispatched fetch has not settled."""
        return self._outstanding > 0

    def fetched_count(self, keys: Iterable[str]) -> int:
        """How many of ``keys`` already have a cached record."""
        return self.cache.count_present(keys)

    def is_fully_ready(self, keys: list[str]) -> bool:
        """True when ``keys`` is non-empty and every key is cached."""
        return bool(keys) and self.fetched_count(keys) == len(keys)

    async def ensure_fetched(self, keys: Iterable[str]) -> None:
        """Fetch every key not yet cached and wait for all of them to settle."""
        missing = self.cache.missing(dict.fromkeys(keys))
        if not missing:
            logger.debug("All required matchups already cached")
            return

        logger.info(f"Fetching {len(missing)} matchup page(s)")
        self._outstanding += len(missing)
        results = await asyncio.gather(
            *(self._fetch_one(key) for key in missing),
            return_exceptions=True,
        )
        for key, result in zip(missing, results):
            if isinstance(result, Exception):
                logger.error(f"Unexpected error fetching {key}: {result!r}")

    async def _fetch_one(self, key: str) -> None:
        try:
            record = await self.fetcher.fetch(key)
        except MatchupFetchError as e:
            logger.warning(str(e))
            return
        except MalformedPayloadError as e:
            logger.warning(f"Malformed payload for {key}: {e}")
            return
        finally:
            self._outstanding -= 1

        self.cache.add(key, record)
