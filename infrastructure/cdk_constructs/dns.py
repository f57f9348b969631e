"""Route 53 hosted zone and alias records."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class DnsRecords(Construct):
  """Hosted zone for the site domain, created or imported by id."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    existing_hosted_zone_id: str | None = None,
    resource_prefix: str = "",
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name
    self._prefix = resource_prefix
    zone_id = f"{resource_prefix}-hosted-zone" if resource_prefix else "HostedZone"

    if existing_hosted_zone_id:
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        zone_id,
        hosted_zone_id=existing_hosted_zone_id,
        zone_name=domain_name,
      )
    else:
      self.hosted_zone = route53.HostedZone(self, zone_id, zone_name=domain_name)

  def record_names(self, include_www: bool = True) -> dict[str, str]:
    """Map record id labels to the names they resolve."""
    names = {"apex": self.domain_name}
    if include_www:
      names["www"] = f"www.{self.domain_name}"
    return names

  def create_cloudfront_records(
    self,
    distribution: cloudfront.IDistribution,
    include_www: bool = True,
  ) -> None:
    """Point A and AAAA alias records at the distribution."""
    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    for label, record_name in self.record_names(include_www).items():
      base = f"{self._prefix}-{label}" if self._prefix else label.capitalize()
      route53.ARecord(
        self,
        f"{base}-a-record" if self._prefix else f"{base}ARecord",
        zone=self.hosted_zone,
        record_name=record_name,
        target=target,
      )
      route53.AaaaRecord(
        self,
        f"{base}-aaaa-record" if self._prefix else f"{base}AAAARecord",
        zone=self.hosted_zone,
        record_name=record_name,
        target=target,
      )
