"""Champion id to stats-site slug normalization.

Data Dragon ids are mostly the site's slug once lower-cased. The few
champions whose legacy id differs from the site's URL are listed in
SLUG_ALIASES.
"""

# Lower-cased champion id -> site slug. Targets must never be keys themselves.
SLUG_ALIASES: dict[str, str] = {
    "monkeyking": "wukong",
}


def champion_slug(champion_id: str) -> str:
    """Map a champion id to the stats-site URL slug.

    Examples:
        >>> champion_slug("Aatrox")
        'aatrox'
        >>> champion_slug("MonkeyKing")
        'wukong'
    """
    slug = champion_id.lower()
    return SLUG_ALIASES.get(slug, slug)
