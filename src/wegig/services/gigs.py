"""Gig log service."""

import logging
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Protocol

from wegig.domain.gigs import SEED_GIGS, Gig
from wegig.errors import GigValidationError

_logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("artist", "venue", "city", "date")
_EDITABLE_FIELDS = frozenset(f.name for f in fields(Gig)) - {"id"}
_MIN_RATING = 1
_MAX_RATING = 5


class KeyValueStore(Protocol):
    """Persistence interface used to load and save the gig list."""

    async def get(self, key: str) -> object | None:
        """Return the stored value for a key, if any."""

    async def set(self, key: str, value: object) -> None:
        """Store a value under a key."""


@dataclass
class GigService:
    """Keeps the gig list in memory and saves it after every change."""

    store: KeyValueStore
    storage_key: str = "gigs"
    _gigs: list[Gig] | None = field(default=None, repr=False)

    async def list_gigs(self) -> list[Gig]:
        """Return all logged gigs in insertion order."""
        return list(await self._load())

    async def get_gig(self, gig_id: str) -> Gig | None:
        """Return a gig by id."""
        for gig in await self._load():
            if gig.id == gig_id:
                return gig
        return None

    async def create_gig(self, data: dict[str, object]) -> Gig:
        """Validate input and append a new gig."""
        gigs = await self._load()
        values = _clean_input(data)
        _validate(values)
        gig = Gig(id=_next_id(gigs), **values)
        gigs.append(gig)
        await self._save()
        return gig

    async def update_gig(self, gig_id: str, changes: dict[str, object]) -> Gig | None:
        """Apply a partial update to a gig."""
        gigs = await self._load()
        for index, gig in enumerate(gigs):
            if gig.id != gig_id:
                continue
            merged = {**_gig_values(gig), **_clean_input(changes)}
            _validate(merged)
            updated = replace(gig, **merged)
            gigs[index] = updated
            await self._save()
            return updated
        return None

    async def delete_gig(self, gig_id: str) -> bool:
        """Remove a gig; returns False when it does not exist."""
        gigs = await self._load()
        remaining = [gig for gig in gigs if gig.id != gig_id]
        if len(remaining) == len(gigs):
            return False
        self._gigs = remaining
        await self._save()
        return True

    async def _load(self) -> list[Gig]:
        if self._gigs is not None:
            return self._gigs
        stored = await self.store.get(self.storage_key)
        if isinstance(stored, list):
            self._gigs = [
                gig
                for gig in (_gig_from_record(record) for record in stored)
                if gig is not None
            ]
        else:
            self._gigs = list(SEED_GIGS)
        return self._gigs

    async def _save(self) -> None:
        records = [asdict(gig) for gig in self._gigs or []]
        try:
            await self.store.set(self.storage_key, records)
        except Exception:
            _logger.exception("Failed to save gigs", extra={"count": len(records)})


def _clean_input(data: dict[str, object]) -> dict[str, object]:
    """Keep known fields and strip surrounding whitespace from strings."""
    cleaned: dict[str, object] = {}
    for key, value in data.items():
        if key not in _EDITABLE_FIELDS:
            continue
        cleaned[key] = value.strip() if isinstance(value, str) else value
    return cleaned


def _validate(values: dict[str, object]) -> None:
    missing = [name for name in _REQUIRED_FIELDS if not values.get(name)]
    if missing:
        raise GigValidationError(
            "Missing required fields: artist, venue, city, and date are required"
        )
    rating = values.get("rating")
    if rating is None:
        return
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise GigValidationError("Rating must be a whole number between 1 and 5")
    if not _MIN_RATING <= rating <= _MAX_RATING:
        raise GigValidationError("Rating must be a whole number between 1 and 5")


def _next_id(gigs: list[Gig]) -> str:
    numeric_ids = [int(gig.id) for gig in gigs if gig.id.isdigit()]
    return str(max(numeric_ids, default=0) + 1)


def _gig_values(gig: Gig) -> dict[str, object]:
    values = asdict(gig)
    values.pop("id")
    return values


def _gig_from_record(record: object) -> Gig | None:
    """Rebuild a stored gig; records without an id are skipped."""
    if not isinstance(record, dict) or not isinstance(record.get("id"), str | int):
        _logger.warning("Skipping malformed stored gig: %r", record)
        return None
    return Gig(
        id=str(record["id"]),
        artist=str(record.get("artist") or ""),
        venue=str(record.get("venue") or ""),
        city=str(record.get("city") or ""),
        date=str(record.get("date") or ""),
        rating=_stored_rating(record.get("rating")),
        notes=_optional_str(record.get("notes")),
        external_source=_optional_str(record.get("external_source")),
        external_id=_optional_str(record.get("external_id")),
    )


def _stored_rating(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        rating = value
    elif isinstance(value, str) and value.strip().isdigit():
        rating = int(value.strip())
    else:
        return None
    return rating if _MIN_RATING <= rating <= _MAX_RATING else None


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)
