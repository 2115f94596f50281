"""
Lambda Y
Subscribed directly to the topic. SNS only delivers messages whose
address.country attribute is outside the allowlisted countries and which
carry an email attribute.
"""

import os
import json
import logging

logger = logging.getLogger()
logger.setLevel(logging.INFO)

REGION = os.environ.get("REGION")


def attribute_value(attributes: dict, name: str) -> str | None:
    """SNS event attributes look like {"email": {"Type": "String", "Value": "..."}}."""
    attribute = attributes.get(name)
    return attribute.get("Value") if attribute else None


def main(event, context):
    """Lambda entry point."""
    records = event.get("Records", [])
    logger.info(f"Lambda Y received {len(records)} record(s) in {REGION}")

    processed = 0
    skipped = 0

    for record in records:
        sns = record.get("Sns", {})
        message_id = sns.get("MessageId")
        attributes = sns.get("MessageAttributes") or {}

        try:
            payload = json.loads(sns["Message"])
            if not isinstance(payload, dict):
                raise ValueError(f"payload is not a JSON object: {payload!r}")
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"{message_id}: Malformed message, skipping: {e}")
            skipped += 1
            continue

        logger.info(
            f"{message_id}: name={payload.get('name')} "
            f"country={attribute_value(attributes, 'address.country')} "
            f"email={attribute_value(attributes, 'email')}"
        )
        processed += 1

    return {"processed": processed, "skipped": skipped}
