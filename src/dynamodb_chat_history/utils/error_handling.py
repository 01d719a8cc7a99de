"""Exceptions raised by the chat history store."""

from typing import Optional

from botocore.exceptions import ClientError


class ChatHistoryError(Exception):
    """Base class for chat history errors."""


class ConfigurationError(ChatHistoryError):
    """Raised when options are missing or the DynamoDB client cannot be built."""


class SerializationError(ChatHistoryError):
    """Raised when a stored attribute does not have the expected shape."""

    def __init__(self, message: str, path: str = "messages"):
        super().__init__(f"{path}: {message}")
        self.path = path


class StoreError(ChatHistoryError):
    """Wraps any failure returned by a DynamoDB call."""

    def __init__(self, operation: str, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.code = code


def to_store_error(operation: str, exc: Exception) -> StoreError:
    """Convert a botocore exception into a StoreError without reinterpreting it."""
    code = None
    if isinstance(exc, ClientError):
        code = exc.response.get("Error", {}).get("Code")
    return StoreError(operation, f"{operation} failed: {exc}", code=code)
