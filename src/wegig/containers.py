"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from wegig.adapters.memory_store import InMemoryKeyValueStore
from wegig.adapters.musicbrainz_client import HttpxMusicBrainzClient
from wegig.adapters.supabase_store import SupabaseKeyValueStore
from wegig.adapters.ticketmaster_client import HttpxTicketmasterClient
from wegig.config import Settings, resolve_user_agent
from wegig.services.artists import ArtistCatalogService
from wegig.services.cache import InMemoryCache
from wegig.services.events import EventCatalogService
from wegig.services.gigs import GigService, KeyValueStore
from wegig.services.rate_limit import RateLimiter


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gig_service: GigService
    event_catalog: EventCatalogService
    artist_catalog: ArtistCatalogService
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> KeyValueStore:
    """Use Supabase when it is configured, otherwise keep gigs in memory."""
    if settings.supabase_url and settings.supabase_service_key:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client)
    return InMemoryKeyValueStore()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    ticketmaster_client = HttpxTicketmasterClient.create(
        base_url=resolved_settings.ticketmaster_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    musicbrainz_client = HttpxMusicBrainzClient.create(
        user_agent=resolve_user_agent(resolved_settings.mb_user_agent),
        base_url=resolved_settings.musicbrainz_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    event_catalog = EventCatalogService(
        client=ticketmaster_client,
        cache=InMemoryCache(),
        api_key=resolved_settings.ticketmaster_api_key,
        country_code=resolved_settings.ticketmaster_country_code,
    )
    artist_catalog = ArtistCatalogService(
        client=musicbrainz_client,
        cache=InMemoryCache(),
        rate_limiter=RateLimiter(
            min_interval_seconds=resolved_settings.musicbrainz_min_interval_seconds
        ),
    )
    gig_service = GigService(build_store(resolved_settings))

    async def close_resources() -> None:
        await ticketmaster_client.close()
        await musicbrainz_client.close()

    return AppContainer(
        settings=resolved_settings,
        gig_service=gig_service,
        event_catalog=event_catalog,
        artist_catalog=artist_catalog,
        close_resources=close_resources,
    )
