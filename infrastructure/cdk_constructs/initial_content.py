"""Initial content deployment for the static site."""

from pathlib import Path

from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

SITE_DIR = Path(__file__).parent.parent.parent / "site"


class InitialContent(Construct):
  """Uploads the starter pages and the visit counter script.

  Existing objects are never pruned, so later edits made directly in the
  bucket survive redeploys.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    resource_prefix: str,
    source_dir: Path = SITE_DIR,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      f"{resource_prefix}-initial-content",
      sources=[s3_deploy.Source.asset(str(source_dir))],
      destination_bucket=bucket,
      prune=False,
      retain_on_delete=True,
    )
