"""Ticketmaster Discovery API client."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx

from wegig.adapters.http import get_json

SERVICE_NAME = "Ticketmaster"


class TicketmasterClient(Protocol):
    """Interface for Ticketmaster Discovery API interactions."""

    async def search_events(self, query: str) -> dict[str, object]:
        """Search events with a prepared query string and return raw API data."""

    async def get_event(self, event_id: str, query: str) -> dict[str, object]:
        """Fetch an event by id and return raw API data."""

    async def search_venues(self, query: str) -> dict[str, object]:
        """Search venues with a prepared query string and return raw API data."""


@dataclass
class HttpxTicketmasterClient(TicketmasterClient):
    """HTTPX-backed Ticketmaster client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float | None = 15

    @classmethod
    def create(
        cls, base_url: str, timeout: float | None = 15
    ) -> "HttpxTicketmasterClient":
        """Create a Ticketmaster client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout)

    async def search_events(self, query: str) -> dict[str, object]:
        """Search events."""
        return await self._get(f"{self.base_url}/events.json?{query}")

    async def get_event(self, event_id: str, query: str) -> dict[str, object]:
        """Fetch a single event."""
        event_path = quote(event_id, safe="")
        return await self._get(f"{self.base_url}/events/{event_path}.json?{query}")

    async def search_venues(self, query: str) -> dict[str, object]:
        """Search venues."""
        return await self._get(f"{self.base_url}/venues.json?{query}")

    async def _get(self, url: str) -> dict[str, object]:
        return await get_json(
            self.http_client, url, service=SERVICE_NAME, timeout=self.timeout
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
