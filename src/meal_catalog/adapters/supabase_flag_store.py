"""Supabase-backed remote feature flags."""

from dataclasses import dataclass

from supabase import Client

from meal_catalog.services.gate import FlagStore


@dataclass
class SupabaseFlagStore(FlagStore):
    """Reads boolean switches from the feature_flags table."""

    client: Client
    table: str = "feature_flags"

    def get(self, key: str) -> bool | None:
        """Return the flag value, or None when the flag is not defined."""
        response = (
            self.client.table(self.table)
            .select("enabled")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        rows = response.data or []
        if not rows:
            return None
        value = rows[0].get("enabled")
        return value if isinstance(value, bool) else None
