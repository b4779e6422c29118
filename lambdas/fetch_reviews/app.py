# lambdas/fetch_reviews/app.py
import json
import os

import boto3

from .models import get_settings
from .pipeline import ReviewsPipeline
from .storage import ReviewFragmentStore

# Initialize the S3 client outside the handler so warm invocations reuse it.
S3_CLIENT = boto3.client('s3', region_name=os.environ.get('AWS_REGION', 'us-east-1'))


def build_response(status_code: int, body: dict) -> dict:
    """Helper function to build the JSON response."""
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body),
    }


def handler(event, context):
    """
    Triggered by the EventBridge schedule. Refreshes the review fragment of
    every configured product and reports a summary.
    """
    print(f"Received event: {json.dumps(event, default=str)}")

    try:
        settings = get_settings()
        store = ReviewFragmentStore(S3_CLIENT, cache_control=settings.fragment_cache_control)
        result = ReviewsPipeline(settings, store).run()
    except Exception as e:
        print(f"❌ Handler error: {e}")
        return build_response(500, {'error': str(e)})

    response = build_response(200, result.to_body())
    # Printed so the outcome shows up in CloudWatch Logs for scheduled runs
    print(f"Lambda execution completed successfully: {json.dumps(response, indent=2)}")
    return response
