#!/usr/bin/env python3
"""Print the current visit count stored in DynamoDB."""

import argparse
import json
import sys

import boto3


def read_count(table_name: str, key: str = "visits", region: str = "us-east-1") -> int:
  """Read the counter without modifying it.

  Args:
    table_name: DynamoDB table holding the counter
    key: Partition key of the counter record (default: visits)
    region: AWS region (default: us-east-1)

  Returns:
    The stored count, or 0 if no visit has been recorded yet
  """
  dynamodb = boto3.client("dynamodb", region_name=region)
  response = dynamodb.get_item(
    TableName=table_name,
    Key={"id": {"S": key}},
    ProjectionExpression="#count",
    ExpressionAttributeNames={"#count": "count"},
    ConsistentRead=True,
  )
  item = response.get("Item")
  if not item or "count" not in item:
    return 0
  return int(item["count"]["N"])


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(description="Print the current visit count")
  parser.add_argument(
    "table_name",
    help="DynamoDB table name (see the CounterTableName stack output)",
  )
  parser.add_argument(
    "--key",
    default="visits",
    help="Counter record key (default: visits)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--format",
    choices=["text", "json"],
    default="text",
    help="Output format (default: text)",
  )
  args = parser.parse_args()

  try:
    count = read_count(args.table_name, args.key, args.region)
  except Exception as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

  if args.format == "json":
    print(json.dumps({"count": count}))
  else:
    print(count)


if __name__ == "__main__":
  main()
