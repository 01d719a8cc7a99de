"""Interface shared by chat message history backends."""

from abc import ABC, abstractmethod
from typing import Iterable, List

from dynamodb_chat_history.models.message import AIChatMessage, ChatMessage, HumanChatMessage


class ChatMessageHistory(ABC):
    """Ordered, append-only history of one conversation."""

    @abstractmethod
    def add_message(self, message: ChatMessage) -> None:
        """Append one message to the end of the conversation."""

    def add_user_message(self, text: str) -> None:
        """Append a human message."""
        self.add_message(HumanChatMessage(content=text))

    def add_ai_message(self, text: str) -> None:
        """Append an AI message."""
        self.add_message(AIChatMessage(content=text))

    def set_messages(self, messages: Iterable[ChatMessage]) -> None:
        """
        Append each message in order.

        Stops at the first failure; messages already written are kept.
        """
        for message in messages:
            self.add_message(message)

    @abstractmethod
    def messages(self) -> List[ChatMessage]:
        """Return every stored message in conversation order."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored history."""
