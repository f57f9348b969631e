"""Runtime settings for the visit counter Lambda."""

import logging
import os
from dataclasses import dataclass


@dataclass
class CounterSettings:
  """Settings read from the Lambda environment."""

  table_name: str
  counter_key: str = "visits"
  timeout_seconds: float = 3.0
  log_level: str = "INFO"

  @classmethod
  def from_env(cls, environ: dict[str, str] | None = None) -> "CounterSettings":
    """Load settings from environment variables.

    Raises:
      ValueError: If TABLE_NAME is missing, the timeout is not a positive number,
        or LOG_LEVEL is not a logging level name
    """
    env = os.environ if environ is None else environ

    table_name = env.get("TABLE_NAME", "").strip()
    if not table_name:
      raise ValueError("TABLE_NAME is not set")

    raw_timeout = env.get("STORE_TIMEOUT_SECONDS", "3")
    try:
      timeout_seconds = float(raw_timeout)
    except ValueError:
      raise ValueError(f"Invalid STORE_TIMEOUT_SECONDS: {raw_timeout!r}") from None
    if timeout_seconds <= 0:
      raise ValueError(f"STORE_TIMEOUT_SECONDS must be positive, got {raw_timeout!r}")

    log_level = env.get("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
      raise ValueError(f"Invalid LOG_LEVEL: {log_level!r}")

    return cls(
      table_name=table_name,
      counter_key=env.get("COUNTER_KEY", "visits") or "visits",
      timeout_seconds=timeout_seconds,
      log_level=log_level,
    )
