"""
Mapping between ChatMessage and DynamoDB attribute values.

Stored layout of the ``messages`` attribute::

    {"L": [{"M": {"type": {"S": "human"}, "content": {"S": "hi"}}}, ...]}

Reads check the attribute tag at every level and raise SerializationError on
a mismatch instead of guessing.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from boto3.dynamodb.types import TypeSerializer

from dynamodb_chat_history.models.message import (
    AIChatMessage,
    ChatMessage,
    HumanChatMessage,
    MessageType,
)
from dynamodb_chat_history.utils.error_handling import SerializationError
from dynamodb_chat_history.utils.logging_config import get_logger

logger = get_logger(__name__)

MESSAGES_ATTRIBUTE = "messages"

_serializer = TypeSerializer()


def message_to_attribute(message: ChatMessage) -> Dict[str, Any]:
    """Serialize a message into an ``M`` attribute value."""
    return _serializer.serialize(
        {"type": MessageType(message.type).value, "content": message.content}
    )


def _unwrap(value: Any, tag: str, path: str) -> Any:
    """Return the payload of a single-tag attribute value or fail."""
    if not isinstance(value, Mapping) or len(value) != 1:
        raise SerializationError(f"expected a {tag} attribute value", path)
    actual = next(iter(value))
    if actual != tag:
        raise SerializationError(f"expected {tag}, found {actual}", path)
    return value[tag]


def attribute_to_message(
    value: Any, drop_unknown_types: bool = True, path: str = MESSAGES_ATTRIBUTE
) -> Optional[ChatMessage]:
    """
    Deserialize one ``M`` entry of the messages list.

    Returns None for entries whose type is not human/ai when
    ``drop_unknown_types`` is set.
    """
    fields = _unwrap(value, "M", path)
    for name in ("type", "content"):
        if name not in fields:
            raise SerializationError(f"missing field {name!r}", path)
    message_type = _unwrap(fields["type"], "S", f"{path}.type")
    content = _unwrap(fields["content"], "S", f"{path}.content")

    if message_type == MessageType.HUMAN.value:
        return HumanChatMessage(content=content)
    if message_type == MessageType.AI.value:
        return AIChatMessage(content=content)

    if not drop_unknown_types:
        raise SerializationError(f"unsupported message type {message_type!r}", path)
    logger.warning(
        "Skipping message with unknown type",
        extra={"path": path, "message_type": message_type},
    )
    return None


def messages_from_item(
    item: Optional[Mapping[str, Any]], drop_unknown_types: bool = True
) -> List[ChatMessage]:
    """Deserialize the messages list of a GetItem result item."""
    if not item or MESSAGES_ATTRIBUTE not in item:
        return []

    entries = _unwrap(item[MESSAGES_ATTRIBUTE], "L", MESSAGES_ATTRIBUTE)
    messages: List[ChatMessage] = []
    for index, entry in enumerate(entries):
        message = attribute_to_message(
            entry, drop_unknown_types, path=f"{MESSAGES_ATTRIBUTE}[{index}]"
        )
        if message is not None:
            messages.append(message)
    return messages
