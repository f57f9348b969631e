"""Configuration loader for static sites and their visit counters."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy


@dataclass
class CounterConfig:
  """Configuration for a site's visit counter API."""

  table_name: str | None = None  # None lets CloudFormation generate a name
  counter_key: str = "visits"
  timeout_seconds: int = 3  # Bound on the DynamoDB call

  def __post_init__(self) -> None:
    if self.timeout_seconds <= 0:
      raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")


@dataclass
class SiteConfig:
  """Configuration for a single static site."""

  domain: str
  owner: str
  email: str
  include_www: bool = True
  deploy_initial_content: bool = True
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  hosted_zone_id: str | None = None
  region: str = "us-east-1"
  counter: CounterConfig | None = field(default_factory=CounterConfig)


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    sites: list[SiteConfig] = []

    for site_data in data.get("sites", []):
      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      # Convert removal_policy string to enum
      removal_policy_str = merged.pop("removal_policy", "retain")
      removal_policy = {
        "retain": RemovalPolicy.RETAIN,
        "destroy": RemovalPolicy.DESTROY,
        "snapshot": RemovalPolicy.SNAPSHOT,
      }.get(removal_policy_str.lower(), RemovalPolicy.RETAIN)

      sites.append(
        SiteConfig(
          domain=merged["domain"],
          owner=merged["owner"],
          email=merged["email"],
          include_www=merged.get("include_www", True),
          deploy_initial_content=merged.get("deploy_initial_content", True),
          removal_policy=removal_policy,
          hosted_zone_id=merged.get("hosted_zone_id"),
          region=merged.get("region", "us-east-1"),
          counter=_parse_counter(
            {**(defaults.get("counter") or {}), **(site_data.get("counter") or {})}
          ),
        )
      )

    return cls(sites=sites)


def _parse_counter(counter_data: dict[str, Any]) -> CounterConfig | None:
  """Build the counter config, or None when the counter is disabled."""
  if not counter_data.get("enabled", True):
    return None

  return CounterConfig(
    table_name=counter_data.get("table_name"),
    counter_key=counter_data.get("counter_key", "visits"),
    timeout_seconds=int(counter_data.get("timeout_seconds", 3)),
  )
