"""Message models and their DynamoDB representation."""

from dynamodb_chat_history.models.message import (  # noqa: F401
    AIChatMessage,
    ChatMessage,
    HumanChatMessage,
    MessageType,
)
from dynamodb_chat_history.models.serialization import (  # noqa: F401
    attribute_to_message,
    message_to_attribute,
    messages_from_item,
)
