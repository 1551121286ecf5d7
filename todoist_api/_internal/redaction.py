"""Masking of credentials in data written to debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "token",
    "api_token",
    "access_token",
    "refresh_token",
    "client_secret",
    "password",
})

REDACTED_VALUE = "[REDACTED]"


def redact(data: Any) -> Any:
    """Recursively replace values stored under sensitive keys.

    Key matching is case-insensitive so HTTP header names are covered.
    Returns a new structure; the input is never mutated.
    """
    if isinstance(data, dict):
        return {
            key: REDACTED_VALUE
            if isinstance(key, str) and key.lower() in REDACT_KEYS
            else redact(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact(item) for item in data]
    return data
