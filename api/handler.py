"""Visit counter Lambda: increments the counter and returns the new total."""

import json
import logging
from typing import Any

from settings import CounterSettings
from store import CounterStore, CounterStoreError, MalformedResultError, StoreUnavailableError

logger = logging.getLogger()
logger.setLevel(logging.INFO)

ALLOWED_METHODS = {"GET"}

RESPONSE_HEADERS = {
  "Content-Type": "application/json",
  "Access-Control-Allow-Origin": "*",
}

# Built on first invocation and reused while the container is warm
_store: CounterStore | None = None


def get_store() -> CounterStore:
  """Return the store for this container, creating it from the environment."""
  global _store
  if _store is None:
    settings = CounterSettings.from_env()
    logger.setLevel(settings.log_level)
    _store = CounterStore.from_settings(settings)
  return _store


def request_method(event: dict[str, Any]) -> str:
  """Extract the HTTP method from a Function URL or API Gateway event.

  Direct invocations carry no method and count as GET.
  """
  http = event.get("requestContext", {}).get("http", {})
  method = http.get("method") or event.get("httpMethod") or "GET"
  return str(method).upper()


def _response(
  status_code: int, body: dict[str, Any], extra_headers: dict[str, str] | None = None
) -> dict[str, Any]:
  return {
    "statusCode": status_code,
    "headers": {**RESPONSE_HEADERS, **(extra_headers or {})},
    "body": json.dumps(body),
  }


def handle(event: dict[str, Any], store: CounterStore) -> dict[str, Any]:
  """Increment the counter once and build the HTTP response."""
  method = request_method(event)
  if method not in ALLOWED_METHODS:
    return _response(405, {"error": f"Method {method} not allowed"}, {"Allow": "GET"})

  try:
    count = store.increment()
  except StoreUnavailableError as e:
    logger.warning("Counter store unavailable: %s", e)
    return _response(503, {"error": "Counter temporarily unavailable"})
  except MalformedResultError as e:
    logger.error("Malformed counter result: %s", e)
    return _response(500, {"error": "Failed to update visit count"})
  except CounterStoreError as e:
    logger.error("Counter update failed: %s", e)
    return _response(500, {"error": "Failed to update visit count"})

  logger.info("Visit count is now %d", count)
  return _response(200, {"count": count})


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
  """Lambda entry point."""
  try:
    store = get_store()
  except ValueError as e:
    logger.error("Invalid counter configuration: %s", e)
    return _response(500, {"error": "Failed to update visit count"})
  return handle(event or {}, store)
