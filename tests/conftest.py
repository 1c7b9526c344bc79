"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from wegig.adapters.memory_store import InMemoryKeyValueStore
from wegig.adapters.musicbrainz_client import MusicBrainzClient
from wegig.adapters.ticketmaster_client import TicketmasterClient
from wegig.config import Settings
from wegig.containers import AppContainer
from wegig.services.artists import ArtistCatalogService
from wegig.services.cache import InMemoryCache
from wegig.services.events import EventCatalogService
from wegig.services.gigs import GigService
from wegig.services.rate_limit import RateLimiter


@dataclass
class FakeWallClock:
    """Controllable datetime clock for cache tests."""

    now: datetime = field(
        default_factory=lambda: datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@dataclass
class FakeMonotonicClock:
    """Monotonic clock whose sleep advances time instead of waiting."""

    now: float = 1000.0
    sleeps: list[float] = field(default_factory=list)

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        await asyncio.sleep(0)


@dataclass
class FakeTicketmasterClient(TicketmasterClient):
    """Fake Ticketmaster client that records queries."""

    events_payload: dict[str, object] = field(
        default_factory=lambda: {
            "_embedded": {
                "events": [
                    {
                        "id": "G5vYZ9",
                        "name": "Radiohead",
                        "dates": {"start": {"localDate": "2025-06-01"}},
                    }
                ]
            },
            "page": {"size": 20, "totalElements": 1},
        }
    )
    event_payload: dict[str, object] = field(
        default_factory=lambda: {"id": "G5vYZ9", "name": "Radiohead"}
    )
    venues_payload: dict[str, object] = field(
        default_factory=lambda: {
            "_embedded": {
                "venues": [
                    {
                        "id": "KovZ9177",
                        "name": "O2 Academy Brixton",
                        "city": {"name": "London"},
                        "country": {"countryCode": "GB", "name": "Great Britain"},
                        "address": {"line1": "211 Stockwell Rd"},
                        "url": "https://example.test/venue",
                    }
                ]
            }
        }
    )
    error: Exception | None = None
    event_queries: list[str] = field(default_factory=list)
    event_lookups: list[tuple[str, str]] = field(default_factory=list)
    venue_queries: list[str] = field(default_factory=list)

    @property
    def call_count(self) -> int:
        return len(self.event_queries) + len(self.event_lookups) + len(
            self.venue_queries
        )

    async def search_events(self, query: str) -> dict[str, object]:
        self.event_queries.append(query)
        if self.error:
            raise self.error
        return self.events_payload

    async def get_event(self, event_id: str, query: str) -> dict[str, object]:
        self.event_lookups.append((event_id, query))
        if self.error:
            raise self.error
        return self.event_payload

    async def search_venues(self, query: str) -> dict[str, object]:
        self.venue_queries.append(query)
        if self.error:
            raise self.error
        return self.venues_payload


@dataclass
class FakeMusicBrainzClient(MusicBrainzClient):
    """Fake MusicBrainz client that records searches."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "created": "2025-01-01T00:00:00.000Z",
            "count": 2,
            "offset": 0,
            "artists": [
                {
                    "id": "a74b1b7f-71a5-4011-9441-d0b5e4122711",
                    "type": "Group",
                    "name": "Radiohead",
                    "sort-name": "Radiohead",
                    "country": "GB",
                    "score": 100,
                    "tags": [{"count": 10, "name": "rock"}],
                },
                {
                    "id": "0b7d8d9a-2d1e-4c36-9c0e-5a4f0b9d1a11",
                    "name": "Radiohead Tribute",
                    "disambiguation": "UK tribute band",
                    "score": 61,
                },
            ],
        }
    )
    errors: list[Exception] = field(default_factory=list)
    calls: list[tuple[str, int]] = field(default_factory=list)

    async def search_artists(self, query: str, limit: int) -> dict[str, object]:
        self.calls.append((query, limit))
        if self.errors:
            raise self.errors.pop(0)
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ticketmaster_api_key="tm-key",
        ticketmaster_country_code="GB",
        mb_user_agent="WeGigTests/1.0 (tests@example.com)",
    )


@pytest.fixture
def ticketmaster_client() -> FakeTicketmasterClient:
    return FakeTicketmasterClient()


@pytest.fixture
def musicbrainz_client() -> FakeMusicBrainzClient:
    return FakeMusicBrainzClient()


@pytest.fixture
def monotonic_clock() -> FakeMonotonicClock:
    return FakeMonotonicClock()


@pytest.fixture
def event_catalog(ticketmaster_client: FakeTicketmasterClient) -> EventCatalogService:
    return EventCatalogService(
        client=ticketmaster_client,
        cache=InMemoryCache(),
        api_key="tm-key",
        country_code="GB",
    )


@pytest.fixture
def artist_catalog(
    musicbrainz_client: FakeMusicBrainzClient, monotonic_clock: FakeMonotonicClock
) -> ArtistCatalogService:
    return ArtistCatalogService(
        client=musicbrainz_client,
        cache=InMemoryCache(),
        rate_limiter=RateLimiter(
            min_interval_seconds=1.0,
            clock=monotonic_clock,
            sleep=monotonic_clock.sleep,
        ),
    )


@pytest.fixture
def container(
    settings: Settings,
    event_catalog: EventCatalogService,
    artist_catalog: ArtistCatalogService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        gig_service=GigService(InMemoryKeyValueStore()),
        event_catalog=event_catalog,
        artist_catalog=artist_catalog,
        close_resources=close_resources,
    )

