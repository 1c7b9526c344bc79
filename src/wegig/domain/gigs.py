"""Domain models for logged gigs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Gig:
    """A concert the user attended."""

    id: str
    artist: str
    venue: str
    city: str
    date: str
    rating: int | None = None
    notes: str | None = None
    external_source: str | None = None
    external_id: str | None = None


SEED_GIGS: tuple[Gig, ...] = (
    Gig(
        id="1",
        artist="The National",
        venue="Radio City Music Hall",
        city="New York",
        date="2024-05-15",
        rating=5,
        notes="Amazing setlist, played all the classics",
    ),
    Gig(
        id="2",
        artist="Arcade Fire",
        venue="Madison Square Garden",
        city="New York",
        date="2024-08-22",
        rating=4,
        notes="Great energy but sound quality could have been better",
    ),
)
