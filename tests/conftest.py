"""Pytest fixtures for CDK construct and counter API tests."""

import sys
import threading
from decimal import Decimal
from pathlib import Path
from typing import Any

import aws_cdk as cdk
import pytest

# The Lambda source is deployed flat, so its modules import each other by name
sys.path.insert(0, str(Path(__file__).parent.parent / "api"))


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


class FakeCounterTable:
  """In-memory stand-in for a DynamoDB Table resource.

  Supports the single ADD update the counter issues, serialized by a lock the
  way DynamoDB serializes writes to one item.
  """

  def __init__(self, items: dict[str, int] | None = None) -> None:
    self.items: dict[str, dict[str, Any]] = {
      key: {"id": key, "count": Decimal(value)} for key, value in (items or {}).items()
    }
    self.error: Exception | None = None
    self.response_override: Any = None
    self.calls: list[dict[str, Any]] = []
    self._lock = threading.Lock()

  def count(self, key: str = "visits") -> int | None:
    item = self.items.get(key)
    return None if item is None else int(item["count"])

  def update_item(self, **kwargs: Any) -> Any:
    self.calls.append(kwargs)
    if self.error is not None:
      raise self.error

    assert kwargs["UpdateExpression"] == "ADD #count :incr"
    key = kwargs["Key"]["id"]
    attribute = kwargs["ExpressionAttributeNames"]["#count"]
    amount = Decimal(kwargs["ExpressionAttributeValues"][":incr"])

    with self._lock:
      item = self.items.setdefault(key, {"id": key})
      item[attribute] = item.get(attribute, Decimal(0)) + amount
      new_value = item[attribute]

    if self.response_override is not None:
      return self.response_override
    return {"Attributes": {attribute: new_value}}


@pytest.fixture
def counter_table() -> FakeCounterTable:
  """Empty counter table."""
  return FakeCounterTable()


@pytest.fixture
def make_counter_table() -> type[FakeCounterTable]:
  """Factory for tables seeded with existing counts."""
  return FakeCounterTable
