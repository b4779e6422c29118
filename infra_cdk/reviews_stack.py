# infra_cdk/reviews_stack.py
from aws_cdk import (
    Stack,
    Duration,
    RemovalPolicy,
    aws_events as events,
    aws_events_targets as targets,
    aws_lambda as _lambda,
    aws_s3 as s3,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as apigw_integrations,
    CfnOutput
)
from constructs import Construct

DEFAULT_PRODUCT_IDS = "product-a,product-b"


class ReviewsFragmentsStack(Stack):
    '''
    CDK stack for the customer reviews fragments.
    An hourly EventBridge rule triggers the fetch_reviews Lambda, which reads the
    reviews API (the mock API deployed here by default) and writes one HTML
    fragment per product into the output bucket for ESI composition at the CDN.
    '''

    def __init__(self, scope: Construct, construct_id: str, product_ids: str = DEFAULT_PRODUCT_IDS,
                 api_base_url: str | None = None, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # === Output bucket for fragments and the main page ===
        output_bucket = s3.Bucket(self, "ReviewsOutputBucket",
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
            encryption=s3.BucketEncryption.S3_MANAGED,
            # The CDN fetches the fragments over their public S3 URL
            block_public_access=s3.BlockPublicAccess(
                block_public_acls=True,
                ignore_public_acls=True,
                block_public_policy=False,
                restrict_public_buckets=False,
            ),
        )
        output_bucket.grant_public_access("reviews/*", "s3:GetObject")
        output_bucket.grant_public_access("index.html", "s3:GetObject")

        # === Shared layer with requests and pydantic ===
        common_layer = _lambda.LayerVersion(self, "CommonLayer",
            code=_lambda.Code.from_asset("lambda_layer"),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_12],
            description="Third-party dependencies shared by the review lambdas"
        )

        # === Mock reviews API ===
        mock_api_function = _lambda.Function(self, "MockApiFunction",
            runtime=_lambda.Runtime.PYTHON_3_12,
            code=_lambda.Code.from_asset("lambdas", exclude=["**/__pycache__"]),
            handler="mock_api.app.handler",
            timeout=Duration.seconds(10),
            memory_size=256,
        )

        http_api = apigw.HttpApi(self, "MockReviewsApi",
            default_integration=apigw_integrations.HttpLambdaIntegration("MockApiIntegration", handler=mock_api_function),
        )

        # === Fetch reviews and write fragments ===
        fetch_reviews_function = _lambda.Function(self, "FetchReviewsFunction",
            runtime=_lambda.Runtime.PYTHON_3_12,
            code=_lambda.Code.from_asset("lambdas", exclude=["**/__pycache__"]),
            handler="fetch_reviews.app.handler",
            timeout=Duration.minutes(1),
            memory_size=256,
            environment={
                "API_BASE_URL": api_base_url or http_api.api_endpoint,
                "PRODUCT_IDS": product_ids,
                "OUTPUT_BUCKET": output_bucket.bucket_name,
            },
            layers=[common_layer]
        )
        output_bucket.grant_put(fetch_reviews_function)

        schedule_rule = events.Rule(self, "FetchReviewsSchedule",
            schedule=events.Schedule.rate(Duration.hours(1)),
        )
        schedule_rule.add_target(targets.LambdaFunction(fetch_reviews_function))

        # === Outputs ===
        CfnOutput(self, "MockApiUrl", value=http_api.api_endpoint, description="Base URL of the mock reviews API.")
        CfnOutput(self, "OutputBucketName", value=output_bucket.bucket_name)
        CfnOutput(self, "FetchReviewsFunctionName", value=fetch_reviews_function.function_name)
        CfnOutput(self, "MainPageUrl",
            value=f"https://{output_bucket.bucket_regional_domain_name}/index.html",
            description="Point the CDN origin here once the main page is published."
        )
