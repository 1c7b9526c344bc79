"""Response models for the catalog proxy endpoints."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from wegig.domain.catalog import VenueSearchResult


class VenueOut(BaseModel):
    """Venue summary with the catalog's camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str | None
    name: str | None
    city: str | None
    country_code: str | None


class VenueSearchResponse(BaseModel):
    venues: list[VenueOut]

    @classmethod
    def from_result(cls, result: VenueSearchResult) -> "VenueSearchResponse":
        return cls(venues=[VenueOut.model_validate(venue) for venue in result.venues])
