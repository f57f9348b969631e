"""Composite construct for a static website with a visit counter."""

from aws_cdk import CfnOutput, RemovalPolicy, Stack
from constructs import Construct

from infrastructure.config import CounterConfig

from .certificate import DnsValidatedCertificate
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .initial_content import InitialContent
from .storage import StorageBucket
from .visit_counter import VisitCounter


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates:
  - S3 bucket for static content
  - CloudFront distribution with HTTPS
  - ACM certificate (DNS validated)
  - Route 53 hosted zone with DNS records
  - (Optional) Visit counter API routed under the CDN's /api/* paths
  - (Optional) Initial content deployment
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone_id: str | None = None,
    include_www: bool = True,
    deploy_initial_content: bool = True,
    counter: CounterConfig | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    stack_name = Stack.of(self).stack_name

    # S3 bucket name must match the domain for the website endpoint
    self.bucket = StorageBucket(
      self,
      f"{stack_name}-bucket",
      bucket_name=domain_name,
      removal_policy=removal_policy,
    )

    if deploy_initial_content:
      self.initial_content = InitialContent(
        self,
        f"{stack_name}-initial-content",
        bucket=self.bucket.bucket,
        resource_prefix=stack_name,
      )

    self.dns = DnsRecords(
      self,
      f"{stack_name}-dns",
      domain_name=domain_name,
      existing_hosted_zone_id=hosted_zone_id,
      resource_prefix=stack_name,
    )

    self.certificate = DnsValidatedCertificate(
      self,
      f"{stack_name}-certificate",
      domain_name=domain_name,
      hosted_zone=self.dns.hosted_zone,
      include_www=include_www,
    )

    self.counter: VisitCounter | None = None
    if counter is not None:
      self.counter = VisitCounter(
        self,
        f"{stack_name}-visit-counter",
        table_name=counter.table_name,
        counter_key=counter.counter_key,
        timeout_seconds=counter.timeout_seconds,
        removal_policy=removal_policy,
        resource_prefix=stack_name,
      )

    self.distribution = CloudFrontDistribution(
      self,
      f"{stack_name}-distribution",
      bucket=self.bucket.bucket,
      certificate=self.certificate.certificate,
      domain_names=self.certificate.domain_names,
      api_function_url=self.counter.function_url if self.counter else None,
    )

    self.dns.create_cloudfront_records(
      distribution=self.distribution.distribution,
      include_www=include_www,
    )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "HostedZoneId",
      value=self.dns.hosted_zone.hosted_zone_id,
      description="Route 53 hosted zone ID",
    )
    if self.counter:
      CfnOutput(
        self,
        "CounterFunctionUrl",
        value=self.counter.function_url.url,
        description="Visit counter function URL",
      )
      CfnOutput(
        self,
        "CounterTableName",
        value=self.counter.table.table_name,
        description="DynamoDB table holding the visit count",
      )
