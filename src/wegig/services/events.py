"""Events catalog proxy backed by Ticketmaster."""

import logging
from dataclasses import dataclass

from wegig.adapters.ticketmaster_client import TicketmasterClient
from wegig.config import resolve_country_code
from wegig.domain.catalog import NormalizedVenue, VenueSearchResult
from wegig.errors import ConfigurationError
from wegig.services.cache import Cache
from wegig.services.query import build_query

_logger = logging.getLogger(__name__)


@dataclass
class EventCatalogService:
    """Cached lookups against the events catalog.

    Event search and event details are returned exactly as the upstream sent
    them; venue search is flattened to ``NormalizedVenue`` entries.
    """

    client: TicketmasterClient
    cache: Cache
    api_key: str | None
    country_code: str | None = None
    search_ttl_seconds: int = 30 * 60
    event_ttl_seconds: int = 24 * 60 * 60
    venue_ttl_seconds: int = 60 * 60
    default_event_size: int = 20
    default_venue_size: int = 8

    async def search_events(  # noqa: PLR0913
        self,
        keyword: str | None = None,
        city: str | None = None,
        start_date_time: str | None = None,
        end_date_time: str | None = None,
        size: int | None = None,
    ) -> dict[str, object]:
        """Search events, serving repeated queries from the cache."""
        api_key = self._require_api_key()
        query = build_query(
            {
                "apikey": api_key,
                "countryCode": resolve_country_code(self.country_code),
                "keyword": keyword,
                "city": city,
                "startDateTime": start_date_time,
                "endDateTime": end_date_time,
                "size": size if size is not None else self.default_event_size,
                "sort": "date,asc",
            }
        )
        cache_key = f"tm:search:{query}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            _logger.debug("Event search cache hit")
            return cached

        payload = await self.client.search_events(query)
        self.cache.set(cache_key, payload, ttl_seconds=self.search_ttl_seconds)
        _logger.info("Event search: keyword=%s city=%s", keyword, city)
        return payload

    async def get_event_by_id(self, event_id: str) -> dict[str, object]:
        """Fetch one event, cached for a day."""
        api_key = self._require_api_key()
        query = build_query(
            {
                "apikey": api_key,
                "countryCode": resolve_country_code(self.country_code),
            }
        )
        cache_key = f"tm:event:{event_id}:{query}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            _logger.debug("Event cache hit: event_id=%s", event_id)
            return cached

        payload = await self.client.get_event(event_id, query)
        self.cache.set(cache_key, payload, ttl_seconds=self.event_ttl_seconds)
        _logger.info("Event lookup: event_id=%s", event_id)
        return payload

    async def search_venues(
        self, q: str | None, city: str | None = None, size: int | None = None
    ) -> VenueSearchResult:
        """Search venues by name; a blank query yields no venues."""
        api_key = self._require_api_key()
        keyword = (q or "").strip()
        if not keyword:
            return VenueSearchResult(venues=[])

        query = build_query(
            {
                "apikey": api_key,
                "countryCode": resolve_country_code(self.country_code),
                "keyword": keyword,
                "city": city,
                "size": size if size is not None else self.default_venue_size,
            }
        )
        cache_key = f"tm:venues:{query}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, VenueSearchResult):
            _logger.debug("Venue search cache hit")
            return cached

        payload = await self.client.search_venues(query)
        result = VenueSearchResult(venues=_extract_venues(payload))
        self.cache.set(cache_key, result, ttl_seconds=self.venue_ttl_seconds)
        _logger.info("Venue search: q=%s results=%s", keyword, len(result.venues))
        return result

    def _require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError("Missing TICKETMASTER_API_KEY secret")
        return self.api_key


def _extract_venues(payload: object) -> list[NormalizedVenue]:
    """Flatten ``_embedded.venues`` into normalized venues."""
    embedded = _as_dict(_as_dict(payload).get("_embedded"))
    raw_venues = embedded.get("venues")
    if not isinstance(raw_venues, list):
        return []
    venues = []
    for venue in raw_venues:
        if not isinstance(venue, dict):
            continue
        venues.append(
            NormalizedVenue(
                id=_as_str(venue.get("id")),
                name=_as_str(venue.get("name")),
                city=_as_str(_as_dict(venue.get("city")).get("name")),
                country_code=_as_str(
                    _as_dict(venue.get("country")).get("countryCode")
                ),
            )
        )
    return venues


def _as_dict(value: object) -> dict[str, object]:
    return value if isinstance(value, dict) else {}


def _as_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
