"""Durable user preferences stored as a JSON file.

Holds the own-champion list, lane and tier between runs. The opponent is
never persisted.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from counterpick.models.selection import DEFAULT_TIER, Lane, Selection, Tier, parse_tier

logger = logging.getLogger(__name__)

MY_CHAMPIONS_KEY = "my_champions"
LANE_KEY = "lane"
TIER_KEY = "tier"


class PreferenceStore:
    """Key/value store persisted to a single JSON document."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp_path.replace(self.path)

    def get(self, name: str, default: Any = None) -> Any:
        return self._read().get(name, default)

    def set(self, name: str, value: Any) -> None:
        data = self._read()
        data[name] = value
        self._write(data)

    def load_selection(self, default_tier: Optional[str] = None) -> Selection:
        """Materialize the stored preferences into a Selection.

        Invalid stored values fall back to defaults instead of failing.
        """
        data = self._read()

        own = data.get(MY_CHAMPIONS_KEY, [])
        if not isinstance(own, list):
            own = []
        own = [champ for champ in own if isinstance(champ, str) and champ]

        lane = None
        raw_lane = data.get(LANE_KEY)
        if raw_lane:
            try:
                lane = Lane(str(raw_lane).lower())
            except ValueError:
                logger.warning(f"Ignoring unknown stored lane {raw_lane!r}")

        tier = _parse_tier(data.get(TIER_KEY)) or _parse_tier(default_tier) or DEFAULT_TIER

        return Selection(own_champion_ids=own, lane=lane, tier=tier)

    def save_selection(self, selection: Selection) -> None:
        """Persist the durable parts of a selection (own list, lane, tier)."""
        data = self._read()
        data[MY_CHAMPIONS_KEY] = list(selection.own_champion_ids)
        data[LANE_KEY] = selection.lane.value if selection.lane else ""
        data[TIER_KEY] = selection.tier.value
        self._write(data)


def _parse_tier(value: Any) -> Optional[Tier]:
    tier = parse_tier(value)
    if value and tier is None:
        logger.warning(f"Ignoring unknown tier {value!r}")
    return tier
