#!/usr/bin/env python3
"""
Publish sample messages to the exam topic.

Each message carries the address.country attribute and, for some, an email
attribute, so that together they hit every subscription filter:
  - queue A        <- Ireland / China
  - queue B        <- Ireland / China with email
  - Lambda Y       <- any other country with email

Usage:
  python scripts/publish_messages.py --topic-arn <TopicArn output> [--region eu-west-1]
"""

import sys
import json
import logging
import argparse

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

SAMPLE_MESSAGES = [
    {"name": "Aoife Murphy", "address": {"country": "Ireland"}, "email": "aoife@example.com"},
    {"name": "Sean Doyle", "address": {"country": "Ireland"}},
    {"name": "Li Wei", "address": {"country": "China"}, "email": "li.wei@example.com"},
    {"name": "Jane Smith", "address": {"country": "England"}, "email": "jane@example.com"},
    {"name": "Hans Becker", "address": {"country": "Germany"}},
]


def build_attributes(country: str, email: str | None = None) -> dict:
    """SNS message attributes the subscription filter policies match on."""
    attributes = {
        "address.country": {"DataType": "String", "StringValue": country},
    }
    if email:
        attributes["email"] = {"DataType": "String", "StringValue": email}
    return attributes


def publish_message(sns_client, topic_arn: str, payload: dict) -> str:
    """Publish one payload and return its MessageId."""
    response = sns_client.publish(
        TopicArn=topic_arn,
        Message=json.dumps(payload),
        MessageAttributes=build_attributes(
            payload["address"]["country"],
            payload.get("email"),
        ),
    )
    return response["MessageId"]


def parse_args(argv):
    parser = argparse.ArgumentParser(description="Publish sample messages to the exam topic")
    parser.add_argument("--topic-arn", required=True, help="ARN of the exam SNS topic")
    parser.add_argument("--region", default="eu-west-1", help="AWS region (default: eu-west-1)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    sns_client = boto3.client("sns", region_name=args.region)

    try:
        for payload in SAMPLE_MESSAGES:
            message_id = publish_message(sns_client, args.topic_arn, payload)
            logger.info(
                f"Published {message_id}: {payload['name']} "
                f"({payload['address']['country']}, email={'email' in payload})"
            )
    except ClientError as e:
        logger.error(f"Publish failed: {e}")
        return 1

    logger.info(f"Published {len(SAMPLE_MESSAGES)} message(s) to {args.topic_arn}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    sys.exit(main())
