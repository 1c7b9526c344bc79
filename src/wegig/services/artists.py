"""Artist catalog proxy backed by MusicBrainz."""

import logging
from dataclasses import dataclass

from wegig.adapters.musicbrainz_client import MusicBrainzClient
from wegig.domain.catalog import ArtistSearchResult, NormalizedArtist
from wegig.services.cache import Cache
from wegig.services.rate_limit import RateLimiter

_logger = logging.getLogger(__name__)

_MIN_LIMIT = 1
_MAX_LIMIT = 25


@dataclass
class ArtistCatalogService:
    """Rate-limited, cached artist search.

    MusicBrainz allows roughly one request per second per client, so every
    upstream call goes through ``rate_limiter``. Cache hits never wait.
    """

    client: MusicBrainzClient
    cache: Cache
    rate_limiter: RateLimiter
    search_ttl_seconds: int = 24 * 60 * 60
    default_limit: int = 8

    async def search_artists(
        self, q: str | None, limit: int | None = None
    ) -> ArtistSearchResult:
        """Search artists by name."""
        query = (q or "").strip()
        if not query:
            return ArtistSearchResult(count=0, artists=[])
        resolved_limit = clamp_limit(limit if limit is not None else self.default_limit)

        cache_key = f"mb:artist:{query.lower()}:{resolved_limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, ArtistSearchResult):
            _logger.debug("Artist search cache hit: q=%s", query)
            return cached

        await self.rate_limiter.throttle()
        payload = await self.client.search_artists(query, resolved_limit)
        artists = _extract_artists(payload)
        result = ArtistSearchResult(count=len(artists), artists=artists)
        self.cache.set(cache_key, result, ttl_seconds=self.search_ttl_seconds)
        _logger.info("Artist search: q=%s results=%s", query, result.count)
        return result


def clamp_limit(limit: int) -> int:
    """Clamp a requested result limit into the range MusicBrainz accepts."""
    return min(max(limit, _MIN_LIMIT), _MAX_LIMIT)


def _extract_artists(payload: object) -> list[NormalizedArtist]:
    raw_artists = payload.get("artists") if isinstance(payload, dict) else None
    if not isinstance(raw_artists, list):
        return []
    return [
        NormalizedArtist(
            id=_optional_str(artist.get("id")),
            name=_optional_str(artist.get("name")),
            country=_optional_str(artist.get("country")),
            disambiguation=_optional_str(artist.get("disambiguation")),
            score=_optional_int(artist.get("score")),
        )
        for artist in raw_artists
        if isinstance(artist, dict)
    ]


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)


def _optional_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None
