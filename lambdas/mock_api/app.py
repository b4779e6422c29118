# lambdas/mock_api/app.py
import json

from .router import route_request


def extract_path(event: dict) -> str:
    """
    Normalizes the request path of API Gateway REST (v1) and HTTP (v2) events,
    as well as direct invocations that only carry a "path".
    """
    request_context = event.get('requestContext') or {}
    return (
        event.get('path')
        or event.get('rawPath')
        or request_context.get('path')
        or (request_context.get('http') or {}).get('path')
        or ''
    )


def build_response(status_code: int, body: dict) -> dict:
    """Helper function to build the API Gateway proxy response."""
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body),
    }


def handler(event: dict, context: object) -> dict:
    """
    API Gateway handler that serves fixture reviews, standing in for the real reviews API.
    """
    print(f"Mock API received: {json.dumps(event, default=str)}")

    path = extract_path(event or {})
    status_code, body = route_request(path)
    if status_code != 200:
        print(f"⚠️ {status_code} for path '{path}'")
    return build_response(status_code, body)
