"""Champion catalog models."""

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class ChampionRef:
    """A champion as listed by the catalog."""

    id: str  # Data Dragon id, e.g. "MonkeyKing"
    name: str  # Display name, e.g. "Wukong"
    icon_url: str
    tags: tuple[str, ...] = field(default_factory=tuple)  # e.g. ("Fighter", "Tank")

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        data = asdict(self)
        data["tags"] = list(self.tags)
        return data
