"""
Question1 Lambda
Triggered by API Gateway: GET /crew/movies/{movieId}?role=<role>

Responsibilities:
  - Validate the movieId path parameter
  - Query ExamTable for the movie's crew, narrowed to one role when given
  - Return the crew records as JSON with the API's CORS headers
"""

import os
import re
import json
import logging
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

logger = logging.getLogger()
logger.setLevel(logging.INFO)

# ── Config ────────────────────────────────────────────────────────────────────
TABLE_NAME = os.environ["TABLE_NAME"]
REGION = os.environ.get("REGION")

# ── AWS client ────────────────────────────────────────────────────────────────
dynamodb = boto3.resource("dynamodb", region_name=REGION)
table = dynamodb.Table(TABLE_NAME)

# ── CORS headers (mirror the API's preflight configuration) ───────────────────
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date",
    "Access-Control-Allow-Methods": "OPTIONS,GET,POST,PUT,PATCH,DELETE",
    "Content-Type": "application/json",
}


# ── Helpers ───────────────────────────────────────────────────────────────────

class DecimalEncoder(json.JSONEncoder):
    """Handle Decimal types returned by DynamoDB."""
    def default(self, obj):
        if isinstance(obj, Decimal):
            return int(obj) if obj == obj.to_integral_value() else float(obj)
        return super().default(obj)


def respond(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": CORS_HEADERS,
        "body": json.dumps(body, cls=DecimalEncoder),
    }


def parse_movie_id(event: dict) -> int | None:
    """Return the movieId path parameter as an int, or None if absent/invalid."""
    raw = (event.get("pathParameters") or {}).get("movieId")
    if raw is None or not re.fullmatch(r"-?[0-9]+", raw):
        return None
    return int(raw)


def query_crew(movie_id: int, role: str | None = None) -> list[dict]:
    """
    Fetch crew records for a movie.
    With a role the sort key is matched too, so at most one item comes back.
    """
    condition = Key("movieId").eq(movie_id)
    if role:
        condition = condition & Key("role").eq(role)

    try:
        items = []
        kwargs = {"KeyConditionExpression": condition}
        while True:
            response = table.query(**kwargs)
            items.extend(response.get("Items", []))
            if "LastEvaluatedKey" not in response:
                return items
            kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]

    except ClientError as e:
        logger.error(f"DynamoDB query failed: {e}")
        raise


# ── Handler ───────────────────────────────────────────────────────────────────

def main(event, context):
    """Lambda entry point for GET /crew/movies/{movieId}."""
    logger.info(f"Crew request received: {json.dumps(event)}")

    if event.get("httpMethod") == "OPTIONS":
        return {"statusCode": 200, "headers": CORS_HEADERS, "body": ""}

    movie_id = parse_movie_id(event)
    if movie_id is None:
        logger.warning(f"Rejected request, bad movieId: {event.get('pathParameters')}")
        return respond(400, {"error": "Missing or invalid movieId"})

    # an empty ?role= means no role filter
    role = (event.get("queryStringParameters") or {}).get("role") or None

    try:
        items = query_crew(movie_id, role)
        logger.info(f"Found {len(items)} crew records for movie {movie_id} (role={role})")

        if not items:
            return respond(404, {"error": "No crew found", "movieId": movie_id, "role": role})

        return respond(200, {"data": items, "count": len(items)})

    except Exception as e:
        logger.error(f"Unhandled error in question1 handler: {e}", exc_info=True)
        return respond(500, {"error": "Internal server error", "message": str(e)})
