"""CloudFront distribution for static website."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_s3 as s3
from constructs import Construct

# Fixed prefix the browser script calls; see site/script.js
API_PATH = "/api"


class CloudFrontDistribution(Construct):
  """CloudFront distribution with S3 static website origin.

  When a counter Function URL is given, requests under API_PATH are routed
  to it uncached; everything else is served from the bucket.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_names: list[str],
    api_function_url: lambda_.IFunctionUrl | None = None,
  ) -> None:
    super().__init__(scope, id)

    additional_behaviors: dict[str, cloudfront.BehaviorOptions] = {}
    if api_function_url is not None:
      additional_behaviors[f"{API_PATH}/*"] = cloudfront.BehaviorOptions(
        origin=origins.FunctionUrlOrigin(api_function_url),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
        cache_policy=cloudfront.CachePolicy.CACHING_DISABLED,
        # Function URLs reject requests carrying the viewer's Host header
        origin_request_policy=cloudfront.OriginRequestPolicy.ALL_VIEWER_EXCEPT_HOST_HEADER,
      )

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3StaticWebsiteOrigin(bucket),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD,
      ),
      additional_behaviors=additional_behaviors or None,
      domain_names=domain_names,
      certificate=certificate,
      default_root_object="index.html",
      minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
    )
