"""Normalized results returned by the external catalog proxies."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NormalizedVenue:
    """Venue summary projected from the events catalog."""

    id: str | None
    name: str | None
    city: str | None
    country_code: str | None


@dataclass(frozen=True)
class VenueSearchResult:
    """Venue search payload."""

    venues: list[NormalizedVenue] = field(default_factory=list)


@dataclass(frozen=True)
class NormalizedArtist:
    """Artist summary projected from the artist catalog."""

    id: str | None
    name: str | None
    country: str | None
    disambiguation: str | None
    score: int | None


@dataclass(frozen=True)
class ArtistSearchResult:
    """Artist search payload."""

    count: int
    artists: list[NormalizedArtist] = field(default_factory=list)
