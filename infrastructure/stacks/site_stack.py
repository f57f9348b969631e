"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import StaticSiteConstruct
from infrastructure.config import SiteConfig


class StaticSiteStack(cdk.Stack):
  """Stack for one site: hosting, DNS, certificate and visit counter."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.site = StaticSiteConstruct(
      self,
      "Site",
      domain_name=site_config.domain,
      hosted_zone_id=site_config.hosted_zone_id,
      include_www=site_config.include_www,
      deploy_initial_content=site_config.deploy_initial_content,
      counter=site_config.counter,
      removal_policy=site_config.removal_policy,
    )

    tags = {
      "Owner": site_config.owner,
      "OwnerEmail": site_config.email,
      "Project": "static-sites",
      "Domain": site_config.domain,
      "Component": "site-hosting",
    }
    for key, value in tags.items():
      cdk.Tags.of(self).add(key, value)

    # Higher priority overrides the stack-wide Component tag
    if self.site.counter is not None:
      cdk.Tags.of(self.site.counter).add("Component", "visit-counter", priority=200)
