"""MusicBrainz web service client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from wegig.adapters.http import get_json
from wegig.services.query import build_query

SERVICE_NAME = "MusicBrainz"


class MusicBrainzClient(Protocol):
    """Interface for MusicBrainz API interactions."""

    async def search_artists(self, query: str, limit: int) -> dict[str, object]:
        """Search artists by name and return raw API data."""


@dataclass
class HttpxMusicBrainzClient(MusicBrainzClient):
    """HTTPX-backed MusicBrainz client.

    MusicBrainz rejects anonymous clients, so every request carries the
    configured user agent.
    """

    user_agent: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout: float | None = 15

    @classmethod
    def create(
        cls, user_agent: str, base_url: str, timeout: float | None = 15
    ) -> "HttpxMusicBrainzClient":
        """Create a MusicBrainz client with a managed httpx session."""
        return cls(
            user_agent=user_agent,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def search_artists(self, query: str, limit: int) -> dict[str, object]:
        """Search artists using the Lucene ``artist:`` field."""
        params = build_query({"query": f"artist:{query}", "limit": limit, "fmt": "json"})
        return await get_json(
            self.http_client,
            f"{self.base_url}/artist?{params}",
            service=SERVICE_NAME,
            headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            timeout=self.timeout,
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
