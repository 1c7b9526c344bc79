"""Request and response models for the gig endpoints."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from wegig.domain.gigs import Gig


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class GigPayload(_CamelModel):
    """Gig fields accepted on create and update.

    Required-field checks happen in ``GigService`` so that create and partial
    update share one set of rules.
    """

    artist: str | None = None
    venue: str | None = None
    city: str | None = None
    date: str | None = None
    rating: int | None = None
    notes: str | None = None
    external_source: str | None = None
    external_id: str | None = None


class GigOut(_CamelModel):
    """Gig as returned to clients."""

    id: str
    artist: str
    venue: str
    city: str
    date: str
    rating: int | None = None
    notes: str | None = None
    external_source: str | None = None
    external_id: str | None = None

    @classmethod
    def from_gig(cls, gig: Gig) -> "GigOut":
        return cls.model_validate(gig)


class GigListResponse(BaseModel):
    count: int
    gigs: list[GigOut]


class GigResponse(BaseModel):
    gig: GigOut


class GigChangeResponse(BaseModel):
    message: str
    gig: GigOut
