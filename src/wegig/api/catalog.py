"""Proxy endpoints for the external event and artist catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from wegig.api.catalog_models import VenueSearchResponse
from wegig.domain.catalog import ArtistSearchResult  # noqa: TC001

if TYPE_CHECKING:
    from wegig.containers import AppContainer

router = APIRouter(tags=["catalog"])


@router.get("/ticketmaster/events")
async def search_events(  # noqa: PLR0913
    request: Request,
    keyword: str | None = None,
    city: str | None = None,
    start_date_time: str | None = Query(default=None, alias="startDateTime"),
    end_date_time: str | None = Query(default=None, alias="endDateTime"),
    size: int | None = Query(default=None, ge=1),
) -> dict[str, object]:
    """Search upcoming events."""
    container: AppContainer = request.app.state.container
    return await container.event_catalog.search_events(
        keyword=keyword,
        city=city,
        start_date_time=start_date_time,
        end_date_time=end_date_time,
        size=size,
    )


@router.get("/ticketmaster/events/{event_id}")
async def get_event(event_id: str, request: Request) -> dict[str, object]:
    """Return a single event."""
    container: AppContainer = request.app.state.container
    return await container.event_catalog.get_event_by_id(event_id)


@router.get("/ticketmaster/venues")
async def search_venues(
    request: Request,
    q: str = "",
    city: str | None = None,
    size: int | None = Query(default=None, ge=1),
) -> VenueSearchResponse:
    """Search venues by name."""
    container: AppContainer = request.app.state.container
    result = await container.event_catalog.search_venues(q, city=city, size=size)
    return VenueSearchResponse.from_result(result)


@router.get("/musicbrainz/artists")
async def search_artists(
    request: Request, q: str = "", limit: int | None = None
) -> ArtistSearchResult:
    """Search artists by name."""
    container: AppContainer = request.app.state.container
    return await container.artist_catalog.search_artists(q, limit=limit)
