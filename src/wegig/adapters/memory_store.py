"""In-process key-value store."""

import copy
from dataclasses import dataclass, field

from wegig.services.gigs import KeyValueStore


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Keeps values for the lifetime of the process."""

    values: dict[str, object] = field(default_factory=dict)

    async def get(self, key: str) -> object | None:
        """Return a copy of the stored value."""
        return copy.deepcopy(self.values.get(key))

    async def set(self, key: str, value: object) -> None:
        """Store a copy of the value."""
        self.values[key] = copy.deepcopy(value)
