"""
DynamoDB-backed chat message history.

One conversation is one item, keyed by ``{primary_key_name: primary_key_value}``,
holding its messages in a single list attribute. Appends are a single
UpdateItem with ``list_append`` so the item is created on first write and
concurrent writers never lose a message.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from dynamodb_chat_history.config.settings import HistoryConfig
from dynamodb_chat_history.models.message import ChatMessage
from dynamodb_chat_history.models.serialization import (
    MESSAGES_ATTRIBUTE,
    message_to_attribute,
    messages_from_item,
)
from dynamodb_chat_history.repositories.base import ChatMessageHistory
from dynamodb_chat_history.utils.error_handling import (
    ConfigurationError,
    to_store_error,
)
from dynamodb_chat_history.utils.logging_config import get_logger

logger = get_logger(__name__)

UPDATE_EXPRESSION = (
    "SET #messages = list_append(if_not_exists(#messages, :empty_list), :newMessage)"
)

# Seconds between DescribeTable polls while waiting on table status
WAITER_DELAY_SECONDS = 5


def build_client(
    region: Optional[str] = None,
    connect_timeout_seconds: Optional[float] = None,
    read_timeout_seconds: Optional[float] = None,
):
    """Create a DynamoDB client from the ambient AWS configuration."""
    timeouts: Dict[str, float] = {}
    if connect_timeout_seconds is not None:
        timeouts["connect_timeout"] = connect_timeout_seconds
    if read_timeout_seconds is not None:
        timeouts["read_timeout"] = read_timeout_seconds

    try:
        session = boto3.session.Session(region_name=region)
        return session.client("dynamodb", config=Config(**timeouts))
    except BotoCoreError as exc:
        logger.error(
            "Failed to build DynamoDB client",
            extra={"region": region, "error": str(exc)},
        )
        raise ConfigurationError(f"could not configure DynamoDB client: {exc}") from exc


class DynamoDBChatMessageHistory(ChatMessageHistory):
    """Chat history stored as a list attribute on one DynamoDB item."""

    def __init__(
        self,
        region: Optional[str] = None,
        *,
        table_name: str,
        primary_key_name: str,
        primary_key_value: str,
        client: Any = None,
        connect_timeout_seconds: Optional[float] = None,
        read_timeout_seconds: Optional[float] = None,
        drop_unknown_types: bool = True,
    ):
        self._config = HistoryConfig(
            table_name=table_name,
            primary_key_name=primary_key_name,
            primary_key_value=primary_key_value,
            region=region,
            connect_timeout_seconds=connect_timeout_seconds,
            read_timeout_seconds=read_timeout_seconds,
            drop_unknown_types=drop_unknown_types,
        ).validate()

        if client is None:
            client = build_client(region, connect_timeout_seconds, read_timeout_seconds)
        self.client = client
        logger.debug(
            "Chat history store ready",
            extra={"table": table_name, "primary_key_name": primary_key_name},
        )

    @classmethod
    def from_config(
        cls, config: HistoryConfig, client: Any = None
    ) -> "DynamoDBChatMessageHistory":
        """Build a store from a HistoryConfig."""
        return cls(
            config.region,
            table_name=config.table_name,
            primary_key_name=config.primary_key_name,
            primary_key_value=config.primary_key_value,
            client=client,
            connect_timeout_seconds=config.connect_timeout_seconds,
            read_timeout_seconds=config.read_timeout_seconds,
            drop_unknown_types=config.drop_unknown_types,
        )

    @property
    def table_name(self) -> str:
        return self._config.table_name

    @property
    def primary_key_name(self) -> str:
        return self._config.primary_key_name

    @property
    def primary_key_value(self) -> str:
        return self._config.primary_key_value

    def for_conversation(self, primary_key_value: str) -> "DynamoDBChatMessageHistory":
        """Return a store for another conversation in the same table, sharing the client."""
        return self.from_config(
            HistoryConfig(
                table_name=self.table_name,
                primary_key_name=self.primary_key_name,
                primary_key_value=primary_key_value,
                region=self._config.region,
                connect_timeout_seconds=self._config.connect_timeout_seconds,
                read_timeout_seconds=self._config.read_timeout_seconds,
                drop_unknown_types=self._config.drop_unknown_types,
            ),
            client=self.client,
        )

    def _key(self) -> Dict[str, Dict[str, str]]:
        return {self.primary_key_name: {"S": self.primary_key_value}}

    def add_message(self, message: ChatMessage) -> None:
        """Append one message with a single conditional list append."""
        try:
            self.client.update_item(
                TableName=self.table_name,
                Key=self._key(),
                UpdateExpression=UPDATE_EXPRESSION,
                ExpressionAttributeNames={"#messages": MESSAGES_ATTRIBUTE},
                ExpressionAttributeValues={
                    ":newMessage": {"L": [message_to_attribute(message)]},
                    ":empty_list": {"L": []},
                },
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error(
                "Failed to append message",
                extra={"table": self.table_name, "error": str(exc)},
            )
            raise to_store_error("UpdateItem", exc) from exc

    def messages(self) -> List[ChatMessage]:
        """Read the conversation; a missing item yields an empty list."""
        try:
            response = self.client.get_item(
                TableName=self.table_name,
                Key=self._key(),
                ConsistentRead=True,
                ProjectionExpression="#messages",
                ExpressionAttributeNames={"#messages": MESSAGES_ATTRIBUTE},
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error(
                "Failed to read messages",
                extra={"table": self.table_name, "error": str(exc)},
            )
            raise to_store_error("GetItem", exc) from exc

        return messages_from_item(
            response.get("Item"), drop_unknown_types=self._config.drop_unknown_types
        )

    def clear(self) -> None:
        """
        Delete the whole backing table.

        Every conversation stored in the table is removed, not only this one.
        """
        logger.warning("Deleting chat history table", extra={"table": self.table_name})
        try:
            self.client.delete_table(TableName=self.table_name)
        except (BotoCoreError, ClientError) as exc:
            logger.error(
                "Failed to delete table",
                extra={"table": self.table_name, "error": str(exc)},
            )
            raise to_store_error("DeleteTable", exc) from exc

    def create_table(self, wait: bool = True, max_wait_seconds: int = 45) -> None:
        """Create the backing table with an on-demand string hash key."""
        try:
            self.client.create_table(
                TableName=self.table_name,
                AttributeDefinitions=[
                    {"AttributeName": self.primary_key_name, "AttributeType": "S"}
                ],
                KeySchema=[{"AttributeName": self.primary_key_name, "KeyType": "HASH"}],
                BillingMode="PAY_PER_REQUEST",
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error(
                "Failed to create table",
                extra={"table": self.table_name, "error": str(exc)},
            )
            raise to_store_error("CreateTable", exc) from exc

        logger.info("Created chat history table", extra={"table": self.table_name})
        if wait:
            self._wait("table_exists", max_wait_seconds)

    def wait_until_deleted(self, max_wait_seconds: int = 45) -> None:
        """Block until the backing table no longer exists."""
        self._wait("table_not_exists", max_wait_seconds)

    def _wait(self, waiter_name: str, max_wait_seconds: int) -> None:
        delay = min(WAITER_DELAY_SECONDS, max(1, max_wait_seconds))
        try:
            self.client.get_waiter(waiter_name).wait(
                TableName=self.table_name,
                WaiterConfig={
                    "Delay": delay,
                    "MaxAttempts": max(1, max_wait_seconds // delay),
                },
            )
        except (BotoCoreError, ClientError) as exc:
            raise to_store_error(f"Wait:{waiter_name}", exc) from exc
