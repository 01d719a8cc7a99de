"""Lightweight validation helpers."""

from typing import Any

from dynamodb_chat_history.utils.error_handling import ConfigurationError


def ensure_present(value: Any, field: str) -> None:
    """Raise ConfigurationError if value is falsy."""
    if value in (None, "", []):
        raise ConfigurationError(f"{field} is required")
