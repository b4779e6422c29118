# lambdas/fetch_reviews/fetcher.py
from typing import Optional

import requests
from pydantic import ValidationError

from .models import MAX_REVIEWS, ProductReviewsPayload, Review, ReviewsApiResponse

DEFAULT_TIMEOUT_SECONDS = 10


class FetchError(Exception):
    """Raised when the reviews of a product could not be fetched from the upstream API."""

    def __init__(self, product_id: str, status_code: Optional[int] = None, message: Optional[str] = None):
        self.product_id = product_id
        self.status_code = status_code
        if message is None:
            message = f"Failed to fetch reviews for {product_id}: {status_code}"
        super().__init__(message)


def build_reviews_url(api_base_url: str, product_id: str) -> str:
    base_url = api_base_url[:-1] if api_base_url.endswith("/") else api_base_url
    return f"{base_url}/products/{product_id}/reviews"


def fetch_product_reviews(api_base_url: str, product_id: str, session=None,
                          timeout: float = DEFAULT_TIMEOUT_SECONDS) -> ProductReviewsPayload:
    """
    Fetches the reviews of one product and normalizes them for rendering.

    Args:
        api_base_url: Base URL of the reviews API, with or without a trailing slash.
        product_id: The product to fetch.
        session: Anything with a requests-compatible get(). Defaults to the requests module.
        timeout: Seconds to wait for the upstream API.

    Returns:
        The payload with at most MAX_REVIEWS reviews, in upstream order.

    Raises:
        FetchError: On a network failure, a non-2xx status or a malformed body.
    """
    http = session or requests
    url = build_reviews_url(api_base_url, product_id)

    try:
        response = http.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise FetchError(product_id, message=f"Failed to fetch reviews for {product_id}: {e}") from e

    if not 200 <= response.status_code < 300:
        raise FetchError(product_id, response.status_code)

    try:
        body = ReviewsApiResponse.model_validate(response.json())
        # Entries past the cutoff are dropped without being looked at
        reviews = [Review.model_validate(review) for review in (body.reviews or [])[:MAX_REVIEWS]]
    except (ValueError, ValidationError) as e:
        raise FetchError(
            product_id,
            response.status_code,
            message=f"Malformed reviews response for {product_id}: {e}",
        ) from e

    return ProductReviewsPayload(
        id=body.product_id,
        name=body.product_name,
        reviews=reviews,
    )
