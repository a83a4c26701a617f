"""Matchup key derivation.

A matchup key identifies one (own champion, opponent, lane, tier) page on
the stats site: ``ownSlug|opponentSlug|lane|tier``. Components are
normalized before joining, so semantically identical selections always
produce the same key.
"""

from enum import Enum
from typing import Iterable, NamedTuple, Optional

from counterpick.utils.champion_slug import champion_slug

KEY_SEPARATOR = "|"


class MatchupKeyParts(NamedTuple):
    own_slug: str
    opponent_slug: str
    lane: str
    tier: str


def _component(value: Optional[str | Enum]) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return value


def matchup_key(own_id: str, opponent_id: str, lane: str | Enum, tier: str | Enum) -> str:
    """Build the canonical key for a single matchup."""
    return KEY_SEPARATOR.join(
        (
            champion_slug(own_id),
            champion_slug(opponent_id),
            _component(lane).lower(),
            _component(tier).lower(),
        )
    )


def parse_matchup_key(key: str) -> MatchupKeyParts:
    """Split a key back into its components.

    Raises:
        ValueError: If the key does not have exactly four components
    """
    parts = key.split(KEY_SEPARATOR)
    if len(parts) != 4:
        raise ValueError(f"Malformed matchup key: {key}")
    return MatchupKeyParts(*parts)


def required_keys(
    own_ids: Iterable[str],
    opponent_id: Optional[str],
    lane: Optional[str | Enum],
    tier: str | Enum,
) -> list[str]:
    """Keys needed to rank ``own_ids`` against ``opponent_id``.

    Returns keys in own-id order. Mirror matchups are skipped since the
    site has no page for a champion against itself. Returns an empty list
    when lane or opponent is unset or there are no own champions.
    """
    lane_value = _component(lane).lower()
    if not lane_value or not opponent_id:
        return []

    opponent_slug = champion_slug(opponent_id)
    keys: list[str] = []
    for own_id in own_ids:
        if not own_id:
            continue
        if champion_slug(own_id) == opponent_slug:
            continue
        key = matchup_key(own_id, opponent_id, lane_value, tier)
        if key not in keys:
            keys.append(key)
    return keys
