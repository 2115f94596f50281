#!/usr/bin/env python3
import aws_cdk as cdk
from stacks.exam_stack import ExamStack

app = cdk.App()

ExamStack(
    app,
    "ExamStack",
    description="Exam stack: API Gateway, Lambda, DynamoDB, S3, SNS, SQS",
    env=cdk.Environment(
        account=app.node.try_get_context("account"),
        region=app.node.try_get_context("region") or "eu-west-1",
    ),
)

app.synth()
