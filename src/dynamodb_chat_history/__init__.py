"""Chat message history persisted on a single DynamoDB item per conversation."""

from dynamodb_chat_history.config.settings import HistoryConfig
from dynamodb_chat_history.models.message import (
    AIChatMessage,
    ChatMessage,
    HumanChatMessage,
    MessageType,
)
from dynamodb_chat_history.repositories.base import ChatMessageHistory
from dynamodb_chat_history.repositories.dynamodb_repo import DynamoDBChatMessageHistory
from dynamodb_chat_history.utils.error_handling import (
    ChatHistoryError,
    ConfigurationError,
    SerializationError,
    StoreError,
)

__all__ = [
    "AIChatMessage",
    "ChatHistoryError",
    "ChatMessage",
    "ChatMessageHistory",
    "ConfigurationError",
    "DynamoDBChatMessageHistory",
    "HistoryConfig",
    "HumanChatMessage",
    "MessageType",
    "SerializationError",
    "StoreError",
]
