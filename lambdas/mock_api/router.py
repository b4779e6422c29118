# lambdas/mock_api/router.py
import re
from typing import Tuple

from .mock_data import AVAILABLE_ENDPOINTS, MOCK_PRODUCTS

# An optional leading segment covers stage-prefixed REST API paths such as /prod/products/x/reviews
REVIEWS_PATH_PATTERN = re.compile(r"^(?:/[^/]+)?/products/([^/]+)/reviews/?$")


def route_request(path: str) -> Tuple[int, dict]:
    """
    Resolves a request path of the mock reviews API.

    Returns:
        A tuple of (status_code, body).
    """
    if path in ("", "/"):
        return 200, {
            "message": "Customer Reviews Mock API",
            "endpoints": AVAILABLE_ENDPOINTS,
        }

    match = REVIEWS_PATH_PATTERN.match(path)
    if not match:
        return 400, {
            "error": "Invalid path. Use /products/{productId}/reviews",
            "availableEndpoints": AVAILABLE_ENDPOINTS,
        }

    product = MOCK_PRODUCTS.get(match.group(1))
    if product is None:
        return 404, {"error": "Product not found"}
    return 200, product
