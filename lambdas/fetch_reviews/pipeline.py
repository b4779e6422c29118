# lambdas/fetch_reviews/pipeline.py
from dataclasses import asdict, dataclass, field
from typing import List

from .fetcher import fetch_product_reviews
from .models import AppSettings, ConfigurationError
from .renderer import render_product_reviews_html
from .storage import ReviewFragmentStore


def fragment_key(product_id: str) -> str:
    return f"reviews/{product_id}.html"


@dataclass
class ProductResult:
    productId: str
    key: str
    status: str = "saved"


@dataclass
class PipelineResult:
    results: List[ProductResult] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.results)

    def to_body(self) -> dict:
        return {
            "message": f"Successfully processed {self.count} product(s)",
            "count": self.count,
            "results": [asdict(r) for r in self.results],
        }


class ReviewsPipeline:
    """
    Fetches, renders and stores the review fragment of every configured product.
    Products run one after another and the first failure aborts the whole run.
    """

    def __init__(self, settings: AppSettings, store: ReviewFragmentStore, session=None):
        self.settings = settings
        self.store = store
        self.session = session

    def run(self) -> PipelineResult:
        product_ids = self.settings.product_ids
        if not product_ids:
            raise ConfigurationError("PRODUCT_IDS must list at least one product id.")

        result = PipelineResult()
        for product_id in product_ids:
            print(f"Processing product: {product_id}")

            # Step 1: Fetch reviews for this product
            payload = fetch_product_reviews(
                self.settings.api_base_url,
                product_id,
                session=self.session,
                timeout=self.settings.request_timeout_seconds,
            )

            # Step 2: Render the HTML fragment
            html = render_product_reviews_html(payload)

            # Step 3: Save it to S3
            key = fragment_key(product_id)
            self.store.save_fragment(self.settings.output_bucket, key, html)

            result.results.append(ProductResult(productId=product_id, key=key))
            print(f"✅ Saved fragment: s3://{self.settings.output_bucket}/{key}")

        return result
