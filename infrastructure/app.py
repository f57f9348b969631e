#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from infrastructure.config import Config
from infrastructure.stacks.site_stack import StaticSiteStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def stack_name_for(domain: str) -> str:
  """Stack names allow only letters, digits and hyphens."""
  return f"StaticSite-{domain.replace('.', '-')}"


def main() -> None:
  """Create CDK app with a stack for each configured site."""
  app = cdk.App()

  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  account_id = get_account_id()

  for site in config.sites:
    StaticSiteStack(
      app,
      stack_name_for(site.domain),
      site_config=site,
      env=cdk.Environment(
        account=account_id,
        region=site.region,
      ),
      description=f"Static website and visit counter for {site.domain}",
    )

  app.synth()


if __name__ == "__main__":
  main()
