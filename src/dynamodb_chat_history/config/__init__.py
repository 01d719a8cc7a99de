"""Store configuration."""

from dynamodb_chat_history.config.settings import HistoryConfig  # noqa: F401
