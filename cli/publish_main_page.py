# cli/publish_main_page.py
import argparse

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from dotenv import load_dotenv

from lambdas.fetch_reviews.main_page import render_main_page_with_esi
from lambdas.fetch_reviews.models import get_settings
from lambdas.fetch_reviews.storage import ReviewFragmentStore, StorageError

# Load environment variables from a .env file for local runs
load_dotenv()

MAIN_PAGE_KEY = "index.html"


def publish_main_page(s3_client, bucket: str, product_ids: list[str], region: str, dry_run: bool = False) -> str:
    """
    Renders the ESI main page and uploads it next to the review fragments.

    Returns:
        The rendered HTML.
    """
    html = render_main_page_with_esi(product_ids, bucket, bucket_region=region)
    if dry_run:
        print(html)
        return html

    # The main page changes only when the product list does, so it can be cached longer
    store = ReviewFragmentStore(s3_client, cache_control="max-age=300")
    store.save_fragment(bucket, MAIN_PAGE_KEY, html)
    print(f"✅ Main page published to s3://{bucket}/{MAIN_PAGE_KEY}")
    return html


def main(argv=None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Render and upload the ESI main page for the review fragments.")
    parser.add_argument("--bucket", default=settings.output_bucket, help="Bucket holding the fragments.")
    parser.add_argument("--region", default=settings.aws_region, help="Region of the bucket.")
    parser.add_argument("--product-ids", default=",".join(settings.product_ids),
                        help="Comma-separated product ids to include.")
    parser.add_argument("--dry-run", action="store_true", help="Print the page instead of uploading it.")
    args = parser.parse_args(argv)

    product_ids = [p.strip() for p in args.product_ids.split(",") if p.strip()]
    if not product_ids:
        print("❌ ERROR: No product ids given.")
        return 1

    try:
        s3_client = None if args.dry_run else boto3.client('s3', region_name=args.region)
        publish_main_page(s3_client, args.bucket, product_ids, args.region, dry_run=args.dry_run)
    except (StorageError, BotoCoreError, ClientError) as e:
        print(f"❌ Failed to publish the main page: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
