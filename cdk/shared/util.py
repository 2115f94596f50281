from boto3.dynamodb.types import TypeSerializer

# DynamoDB rejects BatchWriteItem requests above this size
MAX_BATCH_SIZE = 25

serializer = TypeSerializer()


def marshall(entity: dict) -> dict:
    """Convert a plain dict into DynamoDB JSON ({"movieId": {"N": "1234"}, ...})."""
    return {key: serializer.serialize(value) for key, value in entity.items()}


def generate_item(entity: dict) -> dict:
    return {"PutRequest": {"Item": marshall(entity)}}


def generate_batch(data: list[dict]) -> list[dict]:
    """Build the put requests for a single BatchWriteItem call."""
    if len(data) > MAX_BATCH_SIZE:
        raise ValueError(
            f"BatchWriteItem accepts at most {MAX_BATCH_SIZE} items, got {len(data)}"
        )
    return [generate_item(entity) for entity in data]
