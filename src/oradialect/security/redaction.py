"""Redaction helpers for DSN query strings and logged bind values."""

from __future__ import annotations

from typing import Any, Iterable

REDACTED_VALUE = "***"

_SENSITIVE_TOKENS = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "api_key",
    "private_key",
    "wallet",
)


def _compact(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch.isalnum())


def is_sensitive(text: str) -> bool:
    normalized = text.lower()
    compact = _compact(text)
    return any(token in normalized or _compact(token) in compact for token in _SENSITIVE_TOKENS)


def redact_query_params(query: dict[str, str]) -> dict[str, str]:
    return {key: REDACTED_VALUE if is_sensitive(key) else val for key, val in query.items()}


def redact_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return type(value)(redact_value(item) for item in value)
    if isinstance(value, bytes):
        return REDACTED_VALUE if is_sensitive(value.decode("utf-8", errors="ignore")) else value
    if isinstance(value, str) and is_sensitive(value):
        return REDACTED_VALUE
    return value


def redact_params(params: Iterable[Any]) -> list[Any]:
    return [redact_value(value) for value in params]
