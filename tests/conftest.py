"""
Pytest configuration to ensure paths are set up correctly for tests.

The src/ directory is added so ``import dynamodb_chat_history`` works from a
plain checkout, without installing the package first.
"""

import os
import sys
from pathlib import Path

import boto3
import pytest


def _ensure_src_on_sys_path() -> None:
    """Add src/ to sys.path if missing."""
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_sys_path()

# Ensure boto3 has offline-friendly defaults so tests do not require AWS access.
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")

boto3.setup_default_session(region_name="us-east-1")

TABLE_NAME = "test-table"
PK_NAME = "chat_id"
PK_VALUE = "42"
REGION = "us-east-1"


@pytest.fixture
def ddb_history():
    """A store bound to a freshly created moto table."""
    from moto import mock_aws

    from dynamodb_chat_history import DynamoDBChatMessageHistory

    with mock_aws():
        history = DynamoDBChatMessageHistory(
            REGION,
            table_name=TABLE_NAME,
            primary_key_name=PK_NAME,
            primary_key_value=PK_VALUE,
        )
        history.create_table()
        yield history
