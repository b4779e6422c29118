# lambdas/fetch_reviews/models.py
"""
Pydantic models and the settings class for the reviews fragment pipeline.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Only the newest reviews are rendered into a fragment.
MAX_REVIEWS = 10


class ConfigurationError(ValueError):
    """Raised when the settings cannot drive a pipeline run."""
    pass


class AppSettings(BaseSettings):
    """
    Manages env vars using Pydantic BaseSettings.
    It also reads a local .env file, which is handy for running the CLI tools.
    """
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore', populate_by_name=True)

    api_base_url: str = Field("https://api.example.com", alias='API_BASE_URL')
    # Comma-separated, e.g. "product-a,product-b"
    product_ids_csv: str = Field("product-a,product-b", alias='PRODUCT_IDS')
    output_bucket: str = Field("customer-reviews-demo", alias='OUTPUT_BUCKET')
    aws_region: str = Field("us-east-1", alias='AWS_REGION')
    request_timeout_seconds: float = Field(10.0, alias='REQUEST_TIMEOUT_SECONDS')
    fragment_cache_control: str = Field("max-age=60", alias='FRAGMENT_CACHE_CONTROL')

    @property
    def product_ids(self) -> List[str]:
        """Configured product ids in order. Duplicates are kept, blank entries are dropped."""
        ids = [product_id.strip() for product_id in self.product_ids_csv.split(",")]
        product_ids = [product_id for product_id in ids if product_id]
        if len(product_ids) != len(ids):
            print(f"⚠️ Warning: Ignoring {len(ids) - len(product_ids)} blank entry(s) in PRODUCT_IDS='{self.product_ids_csv}'")
        return product_ids


def get_settings() -> AppSettings:
    return AppSettings()


# Data models
class Review(BaseModel):
    """
    A single customer review. Text fields are untrusted and only escaped at render time.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    author: str
    rating: float
    comment: str
    # ISO 8601 string, passed through without parsing
    created_at: str = Field(alias="createdAt")


class ProductReviewsPayload(BaseModel):
    """
    The normalized reviews of one product, used to drive rendering.
    """
    id: str
    name: str
    reviews: List[Review] = Field(default_factory=list)


class ReviewsApiResponse(BaseModel):
    """
    The body returned by GET /products/{productId}/reviews.
    """
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    product_name: str = Field(alias="productName")
    # Raw entries; only the first MAX_REVIEWS are validated as Review
    reviews: Optional[List[Any]] = None
