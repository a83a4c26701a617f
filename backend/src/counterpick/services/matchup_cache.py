"""Write-once matchup cache."""

import logging
from typing import Iterable, Iterator, Optional

from counterpick.models.matchup import MatchupRecord

logger = logging.getLogger(__name__)


class MatchupCache:
    """Append-only map from matchup key to fetched record.

    A key is either absent or bound to a complete record. Existing keys are
    never overwritten and nothing is evicted, so concurrent duplicate
    inserts for the same key keep whichever record landed first.
    """

    def __init__(self):
        self._records: dict[str, MatchupRecord] = {}

    def get(self, key: str) -> Optional[MatchupRecord]:
        return self._records.get(key)

    def add(self, key: str, record: MatchupRecord) -> bool:
        """Insert ``record`` under ``key`` unless the key is already bound.

        Returns:
            True if the record was inserted, False if the key already existed
        """
        if key in self._records:
            logger.debug(f"Cache already holds {key}, keeping existing record")
            return False
        self._records[key] = record
        return True

    def missing(self, keys: Iterable[str]) -> list[str]:
        """Keys from ``keys`` with no cached record, in input order."""
        return [key for key in keys if key not in self._records]

    def count_present(self, keys: Iterable[str]) -> int:
        return sum(1 for key in keys if key in self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)
