"""
Configuration for a chat history store.

Defaults favour a single on-demand table keyed by ``chat_id``.
"""

from dataclasses import dataclass
import os
from typing import Optional

from dynamodb_chat_history.utils.validators import ensure_present


@dataclass(frozen=True)
class HistoryConfig:
    """Options used to bind a store to one table and one conversation."""

    table_name: str = ""
    primary_key_name: str = "chat_id"
    primary_key_value: str = ""
    region: Optional[str] = None

    # botocore client timeouts; None keeps botocore's defaults
    connect_timeout_seconds: Optional[float] = None
    read_timeout_seconds: Optional[float] = None

    # Stored entries with a type other than human/ai are skipped on read
    drop_unknown_types: bool = True

    def validate(self) -> "HistoryConfig":
        """Raise ConfigurationError for the first missing required option."""
        ensure_present(self.table_name, "table_name")
        ensure_present(self.primary_key_name, "primary_key_name")
        ensure_present(self.primary_key_value, "primary_key_value")
        return self

    @classmethod
    def from_environment(cls, **overrides) -> "HistoryConfig":
        """Load settings from environment variables."""
        values = {
            "table_name": os.environ.get("CHAT_HISTORY_TABLE", ""),
            "primary_key_name": os.environ.get("CHAT_HISTORY_PK_NAME", "chat_id"),
            "primary_key_value": os.environ.get("CHAT_HISTORY_PK_VALUE", ""),
            "region": os.environ.get("AWS_REGION")
            or os.environ.get("AWS_DEFAULT_REGION"),
            "drop_unknown_types": os.environ.get(
                "CHAT_HISTORY_DROP_UNKNOWN_TYPES", "true"
            ).lower()
            == "true",
        }
        values.update(overrides)
        return cls(**values)
