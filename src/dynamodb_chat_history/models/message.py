"""Pydantic models for chat messages."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class MessageType(str, Enum):
    """Speaker of a message turn, stored verbatim in the ``type`` field."""

    HUMAN = "human"
    AI = "ai"
    SYSTEM = "system"
    GENERIC = "generic"


class ChatMessage(BaseModel):
    """One turn in a conversation."""

    type: MessageType
    content: str

    @classmethod
    def human(cls, content: str) -> "HumanChatMessage":
        return HumanChatMessage(content=content)

    @classmethod
    def ai(cls, content: str) -> "AIChatMessage":
        return AIChatMessage(content=content)


class HumanChatMessage(ChatMessage):
    """Message written by the user."""

    type: Literal[MessageType.HUMAN] = MessageType.HUMAN


class AIChatMessage(ChatMessage):
    """Message produced by the model."""

    type: Literal[MessageType.AI] = MessageType.AI
