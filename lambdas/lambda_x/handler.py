"""
Lambda X
Triggered by SQS: queue A, which receives the topic's Irish and Chinese messages.

Raw message delivery is off, so every SQS body is an SNS envelope whose
"Message" field carries the published JSON payload.

Error handling:
  - Malformed records are logged and skipped; the rest of the batch continues
"""

import os
import json
import logging

logger = logging.getLogger()
logger.setLevel(logging.INFO)

# ── Config ────────────────────────────────────────────────────────────────────
REGION = os.environ.get("REGION")


# ── Helpers ───────────────────────────────────────────────────────────────────

def extract_payload(record: dict) -> dict:
    """Unwrap SQS body -> SNS envelope -> published payload."""
    envelope = json.loads(record["body"])
    payload = json.loads(envelope["Message"])
    if not isinstance(payload, dict):
        raise ValueError(f"payload is not a JSON object: {payload!r}")
    return payload


def describe(payload: dict) -> str:
    country = (payload.get("address") or {}).get("country")
    return f"name={payload.get('name')} country={country} email={payload.get('email')}"


# ── Handler ───────────────────────────────────────────────────────────────────

def main(event, context):
    """Lambda entry point."""
    records = event.get("Records", [])
    logger.info(f"Lambda X received {len(records)} record(s) in {REGION}")

    processed = 0
    skipped = 0

    for record in records:
        message_id = record.get("messageId")
        try:
            payload = extract_payload(record)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"{message_id}: Malformed record, skipping: {e}")
            skipped += 1
            continue

        logger.info(f"{message_id}: {describe(payload)}")
        processed += 1

    if skipped:
        logger.warning(f"Skipped {skipped} malformed record(s)")

    return {"processed": processed, "skipped": skipped}
