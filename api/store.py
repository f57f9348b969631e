"""DynamoDB-backed atomic counter."""

from decimal import Decimal
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import (
  BotoCoreError,
  ClientError,
  ConnectionClosedError,
  ConnectTimeoutError,
  EndpointConnectionError,
  ReadTimeoutError,
)
from settings import CounterSettings

# Error codes DynamoDB returns for transient conditions
TRANSIENT_ERROR_CODES = {
  "ProvisionedThroughputExceededException",
  "ThrottlingException",
  "RequestLimitExceeded",
  "InternalServerError",
  "ServiceUnavailable",
}

# Network failures reaching the endpoint; anything else from botocore is a local fault
TRANSIENT_EXCEPTIONS = (
  ConnectTimeoutError,
  ReadTimeoutError,
  EndpointConnectionError,
  ConnectionClosedError,
)


class CounterStoreError(Exception):
  """The counter could not be incremented."""


class StoreUnavailableError(CounterStoreError):
  """The store timed out, was unreachable, or throttled the request."""


class MalformedResultError(CounterStoreError):
  """The store answered, but without a usable count."""


class CounterStore:
  """Single-record counter incremented with DynamoDB's ADD update.

  The increment is one UpdateItem call that creates the item when it does not
  exist, so concurrent callers never lose an update.
  """

  def __init__(self, table: Any, key: str = "visits", attribute: str = "count") -> None:
    self.table = table
    self.key = key
    self.attribute = attribute

  @classmethod
  def from_settings(cls, settings: CounterSettings) -> "CounterStore":
    """Build a store with bounded timeouts and no automatic retries."""
    client_config = Config(
      connect_timeout=settings.timeout_seconds,
      read_timeout=settings.timeout_seconds,
      retries={"total_max_attempts": 1, "mode": "standard"},
    )
    dynamodb = boto3.resource("dynamodb", config=client_config)
    return cls(dynamodb.Table(settings.table_name), key=settings.counter_key)

  def increment(self, amount: int = 1) -> int:
    """Atomically add `amount` to the counter and return the new total."""
    try:
      response = self.table.update_item(
        Key={"id": self.key},
        UpdateExpression="ADD #count :incr",
        ExpressionAttributeNames={"#count": self.attribute},
        ExpressionAttributeValues={":incr": amount},
        ReturnValues="UPDATED_NEW",
      )
    except TRANSIENT_EXCEPTIONS as e:
      raise StoreUnavailableError(str(e)) from e
    except ClientError as e:
      code = e.response.get("Error", {}).get("Code", "Unknown")
      if code in TRANSIENT_ERROR_CODES:
        raise StoreUnavailableError(code) from e
      raise CounterStoreError(code) from e
    except BotoCoreError as e:
      raise CounterStoreError(str(e)) from e

    return self._parse_count(response)

  def _parse_count(self, response: Any) -> int:
    if not isinstance(response, dict):
      raise MalformedResultError("Update response is not a mapping")

    attributes = response.get("Attributes")
    if not isinstance(attributes, dict) or self.attribute not in attributes:
      raise MalformedResultError(f"Update response has no '{self.attribute}' attribute")

    value = attributes[self.attribute]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
      raise MalformedResultError(f"Non-numeric count: {value!r}")
    if isinstance(value, Decimal) and (not value.is_finite() or value != value.to_integral_value()):
      raise MalformedResultError(f"Non-integral count: {value}")
    if value < 0:
      raise MalformedResultError(f"Negative count: {value}")

    return int(value)
