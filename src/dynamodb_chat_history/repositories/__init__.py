"""Chat history backends."""

from dynamodb_chat_history.repositories.base import ChatMessageHistory  # noqa: F401
from dynamodb_chat_history.repositories.dynamodb_repo import (  # noqa: F401
    DynamoDBChatMessageHistory,
)
