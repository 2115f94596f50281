"""Shared fixtures: fake AWS credentials, a moto-backed ExamTable, handler loading."""
import importlib.util
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

from seed.movies import MOVIE_CREW

LAMBDAS_DIR = Path(__file__).resolve().parent.parent / "lambdas"
REGION = "eu-west-1"


def load_handler(name: str):
    """Import lambdas/<name>/handler.py under a unique module name.

    Every function ships its own handler.py, so they cannot share the plain
    "handler" module name inside one test session.
    """
    path = LAMBDAS_DIR / name / "handler.py"
    spec = importlib.util.spec_from_file_location(f"{name}_handler", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Keep boto3 away from real credentials and pin the region."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.setenv("REGION", REGION)


@pytest.fixture
def exam_table():
    """Create ExamTable in moto and load the seed crew."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name=REGION)
        table = dynamodb.create_table(
            TableName="ExamTable",
            KeySchema=[
                {"AttributeName": "movieId", "KeyType": "HASH"},
                {"AttributeName": "role", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "movieId", "AttributeType": "N"},
                {"AttributeName": "role", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        with table.batch_writer() as batch:
            for item in MOVIE_CREW:
                batch.put_item(Item=item)
        yield table


@pytest.fixture
def question1(exam_table, monkeypatch):
    monkeypatch.setenv("TABLE_NAME", exam_table.name)
    return load_handler("question1")


@pytest.fixture
def lambda_x():
    return load_handler("lambda_x")


@pytest.fixture
def lambda_y():
    return load_handler("lambda_y")
