"""Visit counter API: DynamoDB table behind a Lambda Function URL."""

from pathlib import Path

from aws_cdk import Duration, RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

# Lambda source lives at the repository root, next to the site assets
API_DIR = Path(__file__).parent.parent.parent / "api"


class VisitCounter(Construct):
  """Public, unauthenticated endpoint that atomically increments a visit count.

  Creates:
  - DynamoDB table holding the single counter record
  - Lambda function running api/handler.py
  - Function URL with CORS open to all origins (GET only)
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    table_name: str | None = None,
    counter_key: str = "visits",
    timeout_seconds: int = 3,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
    resource_prefix: str = "",
  ) -> None:
    super().__init__(scope, id)

    self.table = dynamodb.Table(
      self,
      f"{resource_prefix}-counter-table" if resource_prefix else "Table",
      table_name=table_name,
      partition_key=dynamodb.Attribute(name="id", type=dynamodb.AttributeType.STRING),
      billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
      removal_policy=removal_policy,
    )

    self.handler = lambda_.Function(
      self,
      f"{resource_prefix}-counter-lambda" if resource_prefix else "Handler",
      function_name=f"{resource_prefix}-visit-counter" if resource_prefix else None,
      runtime=lambda_.Runtime.PYTHON_3_12,
      handler="handler.lambda_handler",
      code=lambda_.Code.from_asset(str(API_DIR), exclude=["__pycache__", "*.pyc"]),
      environment={
        "TABLE_NAME": self.table.table_name,
        "COUNTER_KEY": counter_key,
        "STORE_TIMEOUT_SECONDS": str(timeout_seconds),
      },
      # Leave room for the store call to time out and the error response to go out
      timeout=Duration.seconds(timeout_seconds + 5),
    )

    # Only the atomic increment is needed
    self.table.grant(self.handler, "dynamodb:UpdateItem")

    self.function_url = self.handler.add_function_url(
      auth_type=lambda_.FunctionUrlAuthType.NONE,
      cors=lambda_.FunctionUrlCorsOptions(
        allowed_origins=["*"],
        allowed_methods=[lambda_.HttpMethod.GET],
      ),
    )
