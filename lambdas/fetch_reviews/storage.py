# lambdas/fetch_reviews/storage.py
from botocore.exceptions import BotoCoreError, ClientError

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
DEFAULT_CACHE_CONTROL = "max-age=60"


class StorageError(Exception):
    """Raised when a rendered fragment could not be written to S3."""
    pass


class ReviewFragmentStore:
    """
    Thin wrapper around S3 uploads for storing rendered HTML.
    The boto3 S3 client is passed in so tests can swap it for a mock.
    """

    def __init__(self, s3_client, cache_control: str = DEFAULT_CACHE_CONTROL):
        self.s3_client = s3_client
        self.cache_control = cache_control

    def save_fragment(self, bucket: str, key: str, html: str) -> None:
        """
        Creates or overwrites s3://bucket/key with the given HTML.

        Raises:
            StorageError: If the boto3 call to S3 fails.
        """
        try:
            self.s3_client.put_object(
                Bucket=bucket,
                Key=key,
                Body=html.encode("utf-8"),
                ContentType=HTML_CONTENT_TYPE,
                CacheControl=self.cache_control,
            )
        except (BotoCoreError, ClientError) as e:
            print(f"❌ Error saving s3://{bucket}/{key}: {e}")
            # Same message as the botocore error so the run result reports it unchanged
            raise StorageError(str(e)) from e
