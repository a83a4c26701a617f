"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS - comma-separated origins (env var: CORS_ORIGINS)
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Champion catalog (Data Dragon)
    ddragon_base_url: str = "https://ddragon.leagueoflegends.com"

    # Matchup pages are fetched through a CORS relay
    relay_base_url: str = "https://corsmirror.com"
    stats_base_url: str = "https://lolalytics.com"
    patch_window: str = "30"
    request_timeout: float = 20.0

    default_tier: str = "diamond_plus"

    # Preference store (JSON file)
    preferences_path: str = "data/preferences.json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
