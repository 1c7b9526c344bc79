"""Canonical query strings used for outbound requests and cache keys."""

from collections.abc import Mapping
from urllib.parse import urlencode

QueryValue = str | int | float | None


def compact_params(params: Mapping[str, QueryValue]) -> dict[str, str]:
    """Drop unset parameters and stringify the rest, sorted by name.

    ``None`` and the empty string both mean "not provided".
    """
    return {
        key: str(value)
        for key, value in sorted(params.items())
        if value is not None and value != ""
    }


def build_query(params: Mapping[str, QueryValue]) -> str:
    """Build a deterministic, URL-encoded query string."""
    return urlencode(compact_params(params))
