"""Supabase-backed key-value store."""

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from wegig.services.gigs import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Stores JSON values in a ``key``/``value`` table.

    The supabase client is synchronous, so queries run in a worker thread to
    keep them off the event loop.
    """

    client: Client
    table_name: str = "kv_store"

    async def get(self, key: str) -> object | None:
        """Return the stored value for a key."""
        return await asyncio.to_thread(self._get, key)

    async def set(self, key: str, value: object) -> None:
        """Insert or replace the value for a key."""
        await asyncio.to_thread(self._set, key, value)

    def _get(self, key: str) -> object | None:
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def _set(self, key: str, value: object) -> None:
        self.client.table(self.table_name).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
