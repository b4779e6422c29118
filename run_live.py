# run_live.py
import json

from dotenv import load_dotenv

# Settings are read when the handler runs, so the .env file must be loaded first
load_dotenv()

from lambdas.fetch_reviews.app import handler
from lambdas.fetch_reviews.models import get_settings


def run_live():
    """Executes the fetch_reviews Lambda handler using your live AWS credentials."""
    settings = get_settings()
    print("--- Starting LIVE Run of fetch_reviews Lambda ---")
    print(f"API: {settings.api_base_url} | Products: {settings.product_ids} | Bucket: {settings.output_bucket}")

    # Mimics the event EventBridge sends for a scheduled rule
    scheduled_event = {
        "source": "aws.events",
        "detail-type": "Scheduled Event",
        "detail": {},
    }

    print("\n--- Invoking Lambda handler (this will call the reviews API and S3) ---")
    result = handler(scheduled_event, {})
    print("--- Lambda handler execution finished ---")

    print("\n--- Final JSON Output from Lambda: ---")
    print(json.dumps(json.loads(result['body']), indent=2))

    if result['statusCode'] != 200:
        print("\n The run failed, see the error above.")
    else:
        print(f"\n Success! Fragments were saved to the '{settings.output_bucket}' bucket.")


if __name__ == "__main__":
    run_live()
