"""Champion catalog client backed by Riot's Data Dragon."""

import logging
from typing import Optional

import httpx

from counterpick.exceptions import CatalogUnavailableError
from counterpick.models.champion import ChampionRef

logger = logging.getLogger(__name__)


class ChampionCatalogClient:
    """Loads the latest champion list from Data Dragon.

    The version and champion list are fetched once per client and reused.
    """

    def __init__(
        self,
        base_url: str = "https://ddragon.leagueoflegends.com",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._version: Optional[str] = None
        self._champions: Optional[list[ChampionRef]] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _get_json(self, url: str, what: str):
        client = await self._get_client()
        try:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise CatalogUnavailableError(
                f"Failed to fetch {what}: {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogUnavailableError(f"Failed to fetch {what}: {e}") from e

    async def latest_version(self) -> str:
        """Newest Data Dragon version, e.g. "15.15.1"."""
        if self._version is None:
            versions = await self._get_json(f"{self.base_url}/api/versions.json", "versions")
            if not isinstance(versions, list) or not versions:
                raise CatalogUnavailableError("No versions returned from ddragon")
            self._version = str(versions[0])
            logger.info(f"Using Data Dragon version {self._version}")
        return self._version

    def icon_url(self, version: str, image_file: str) -> str:
        return f"{self.base_url}/cdn/{version}/img/champion/{image_file}"

    async def champions(self) -> list[ChampionRef]:
        """All champions, sorted by display name.

        Raises:
            CatalogUnavailableError: If the version or champion list cannot be loaded
        """
        if self._champions is not None:
            return self._champions

        version = await self.latest_version()
        payload = await self._get_json(
            f"{self.base_url}/cdn/{version}/data/en_US/champion.json", "champions"
        )
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise CatalogUnavailableError("Champion payload has no data section")

        champions = [
            ChampionRef(
                id=champ["id"],
                name=champ.get("name", champ["id"]),
                icon_url=self.icon_url(version, champ.get("image", {}).get("full", f"{champ['id']}.png")),
                tags=tuple(champ.get("tags", [])),
            )
            for champ in data.values()
        ]
        champions.sort(key=lambda c: c.name.casefold())
        logger.info(f"Loaded {len(champions)} champions")
        self._champions = champions
        return champions


def filter_champions(champions: list[ChampionRef], query: Optional[str]) -> list[ChampionRef]:
    """Case-insensitive search over champion name and id."""
    if not query or not query.strip():
        return list(champions)
    needle = query.strip().casefold()
    return [
        champ
        for champ in champions
        if needle in champ.name.casefold() or needle in champ.id.casefold()
    ]
