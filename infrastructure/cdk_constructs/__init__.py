"""CDK constructs for the static site and its visit counter."""

from .certificate import DnsValidatedCertificate
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .initial_content import InitialContent
from .static_site import StaticSiteConstruct
from .storage import StorageBucket
from .visit_counter import VisitCounter

__all__ = [
  "CloudFrontDistribution",
  "DnsRecords",
  "DnsValidatedCertificate",
  "InitialContent",
  "StaticSiteConstruct",
  "StorageBucket",
  "VisitCounter",
]
