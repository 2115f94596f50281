from aws_cdk import (
    Stack,
    Duration,
    RemovalPolicy,
    CfnOutput,
    aws_dynamodb as dynamodb,
    aws_lambda as lambda_,
    aws_lambda_event_sources as event_sources,
    aws_apigateway as apigw,
    aws_s3 as s3,
    aws_sns as sns,
    aws_sns_subscriptions as subscriptions,
    aws_sqs as sqs,
    custom_resources as cr,
)
from constructs import Construct
import os

from seed.movies import MOVIE_CREW
from shared.util import generate_batch

LAMBDAS_DIR = os.path.join(os.path.dirname(__file__), "../../lambdas")
REGION = "eu-west-1"
FILTERED_COUNTRIES = ["Ireland", "China"]


class ExamStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # ─────────────────────────────────────────────
        # 1. DynamoDB Table
        #    Partition key: movieId (Number), sort key: role (String)
        # ─────────────────────────────────────────────
        self.table = dynamodb.Table(
            self,
            "MoviesTable",
            table_name="ExamTable",
            partition_key=dynamodb.Attribute(
                name="movieId",
                type=dynamodb.AttributeType.NUMBER,
            ),
            sort_key=dynamodb.Attribute(
                name="role",
                type=dynamodb.AttributeType.STRING,
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # ─────────────────────────────────────────────
        # 2. Seed the table once, on stack creation
        # ─────────────────────────────────────────────
        cr.AwsCustomResource(
            self,
            "moviesddbInitData",
            on_create=cr.AwsSdkCall(
                service="DynamoDB",
                action="batchWriteItem",
                parameters={
                    "RequestItems": {
                        self.table.table_name: generate_batch(MOVIE_CREW),
                    },
                },
                physical_resource_id=cr.PhysicalResourceId.of("moviesddbInitData"),
            ),
            policy=cr.AwsCustomResourcePolicy.from_sdk_calls(
                resources=[self.table.table_arn],
            ),
        )

        # ─────────────────────────────────────────────
        # 3. Question1 Lambda
        #    Serves GET /crew/movies/{movieId}
        # ─────────────────────────────────────────────
        self.question1_fn = self._function(
            "Question1Fn",
            "question1",
            environment={
                "TABLE_NAME": self.table.table_name,
                "REGION": REGION,
            },
        )

        # Read-only on DynamoDB
        self.table.grant_read_data(self.question1_fn)

        # ─────────────────────────────────────────────
        # 4. API Gateway REST API
        # ─────────────────────────────────────────────
        self.api = apigw.RestApi(
            self,
            "ExamAPI",
            description="Exam api",
            deploy_options=apigw.StageOptions(stage_name="dev"),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_headers=["Content-Type", "X-Amz-Date"],
                allow_methods=["OPTIONS", "GET", "POST", "PUT", "PATCH", "DELETE"],
                allow_credentials=True,
                allow_origins=["*"],
            ),
        )

        crew_resource = self.api.root.add_resource("crew")
        movies_resource = crew_resource.add_resource("movies")
        movie_resource = movies_resource.add_resource("{movieId}")

        # role is optional: without it every crew role of the movie is returned
        movie_resource.add_method(
            "GET",
            apigw.LambdaIntegration(self.question1_fn, proxy=True),
            request_parameters={
                "method.request.querystring.role": False,
            },
        )

        self.api.root.add_resource("patha")

        # ─────────────────────────────────────────────
        # 5. S3 Bucket (private, emptied on teardown)
        # ─────────────────────────────────────────────
        self.bucket = s3.Bucket(
            self,
            "exam-bucket",
            public_read_access=False,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
        )

        # ─────────────────────────────────────────────
        # 6. SNS Topic and SQS Queues
        # ─────────────────────────────────────────────
        self.topic = sns.Topic(
            self,
            "Topic1",
            display_name="Exam topic",
        )

        self.queue_b = sqs.Queue(
            self,
            "QueueB",
            receive_message_wait_time=Duration.seconds(5),
        )

        self.queue_a = sqs.Queue(
            self,
            "queueA",
            receive_message_wait_time=Duration.seconds(5),
        )

        # ─────────────────────────────────────────────
        # 7. Event-driven Lambdas
        # ─────────────────────────────────────────────
        self.lambda_x_fn = self._function(
            "LambdaXFn",
            "lambda_x",
            environment={"REGION": REGION},
        )

        self.lambda_y_fn = self._function(
            "LambdaYFn",
            "lambda_y",
            environment={"REGION": REGION},
        )

        # ─────────────────────────────────────────────
        # 8. Fan-out wiring
        #    Filter policies are evaluated by SNS against message attributes
        # ─────────────────────────────────────────────

        # Topic -> Queue A: Irish and Chinese addresses
        self.topic.add_subscription(
            subscriptions.SqsSubscription(
                self.queue_a,
                filter_policy={
                    "address.country": sns.SubscriptionFilter.string_filter(
                        allowlist=FILTERED_COUNTRIES,
                    ),
                },
            )
        )

        # Topic -> Lambda Y: every other country, email required
        self.topic.add_subscription(
            subscriptions.LambdaSubscription(
                self.lambda_y_fn,
                filter_policy={
                    "address.country": sns.SubscriptionFilter.string_filter(
                        denylist=FILTERED_COUNTRIES,
                    ),
                    "email": sns.SubscriptionFilter.exists_filter(),
                },
            )
        )

        # Queue A -> Lambda X
        self.lambda_x_fn.add_event_source(event_sources.SqsEventSource(self.queue_a))

        # Topic -> Queue B: Irish and Chinese addresses, email required
        self.topic.add_subscription(
            subscriptions.SqsSubscription(
                self.queue_b,
                filter_policy={
                    "address.country": sns.SubscriptionFilter.string_filter(
                        allowlist=FILTERED_COUNTRIES,
                    ),
                    "email": sns.SubscriptionFilter.exists_filter(),
                },
            )
        )

        # ─────────────────────────────────────────────
        # 9. Outputs
        # ─────────────────────────────────────────────
        CfnOutput(
            self,
            "ApiUrl",
            value=self.api.url,
            description="API Gateway base URL",
        )

        CfnOutput(
            self,
            "TableName",
            value=self.table.table_name,
            description="DynamoDB table name",
        )

        CfnOutput(
            self,
            "BucketName",
            value=self.bucket.bucket_name,
            description="S3 bucket name",
        )

        CfnOutput(
            self,
            "TopicArn",
            value=self.topic.topic_arn,
            description="SNS topic ARN, used by scripts/publish_messages.py",
        )

        CfnOutput(
            self,
            "QueueAUrl",
            value=self.queue_a.queue_url,
            description="Queue A URL",
        )

        CfnOutput(
            self,
            "QueueBUrl",
            value=self.queue_b.queue_url,
            description="Queue B URL",
        )

    def _function(self, construct_id: str, asset: str, environment: dict) -> lambda_.Function:
        """All exam functions share runtime, sizing and the handler.main entry point."""
        return lambda_.Function(
            self,
            construct_id,
            architecture=lambda_.Architecture.ARM_64,
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="handler.main",
            code=lambda_.Code.from_asset(os.path.join(LAMBDAS_DIR, asset)),
            timeout=Duration.seconds(10),
            memory_size=128,
            environment=environment,
        )
