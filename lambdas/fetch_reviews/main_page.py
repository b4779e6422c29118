# lambdas/fetch_reviews/main_page.py
"""
Builds the static page that composes the stored review fragments with ESI
(Edge Side Includes). The CDN serving this page resolves every <esi:include>
by fetching the fragment from S3, so visitors get one fully composed page.
"""
from html import escape
from typing import List

from .pipeline import fragment_key


def _build_page_styles() -> str:
    """Returns the CSS styles for the main page."""
    return """
    <style>
        body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Oxygen, Ubuntu, Cantarell, sans-serif; max-width: 1200px; margin: 0 auto; padding: 20px; background-color: #f5f5f5; }
        header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 30px; border-radius: 8px; margin-bottom: 30px; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); }
        h1 { margin: 0; font-size: 2.5em; }
        .subtitle { margin-top: 10px; opacity: 0.9; font-size: 1.1em; }
        .reviews-container { display: grid; gap: 30px; }
        section { background: white; padding: 25px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1); }
        section h2 { color: #333; border-bottom: 2px solid #667eea; padding-bottom: 10px; margin-bottom: 20px; }
        article { border-left: 4px solid #667eea; padding: 15px; margin-bottom: 15px; background: #f9f9f9; border-radius: 4px; }
        article header { display: flex; justify-content: space-between; align-items: center; margin-bottom: 10px; background: none; padding: 0; box-shadow: none; }
        article strong { color: #333; font-size: 1.1em; }
        article time { color: #666; font-size: 0.9em; }
        footer { text-align: center; margin-top: 40px; padding: 20px; color: #666; font-size: 0.9em; }
        .esi-fallback { color: #999; font-style: italic; padding: 20px; text-align: center; }
    </style>
    """


def fragment_url(bucket_name: str, product_id: str, bucket_region: str = "us-east-1") -> str:
    return f"https://{bucket_name}.s3.{bucket_region}.amazonaws.com/{fragment_key(product_id)}"


def render_main_page_with_esi(product_ids: List[str], bucket_name: str, bucket_region: str = "us-east-1") -> str:
    esi_includes = "".join(
        f"""
        <!-- ESI include for {escape(product_id)} reviews -->
        <esi:include src="{escape(fragment_url(bucket_name, product_id, bucket_region))}" />
"""
        for product_id in product_ids
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Customer Reviews - All Products</title>
    {_build_page_styles()}
</head>
<body>
    <header>
        <h1>🌟 Customer Reviews</h1>
        <p class="subtitle">Real customer feedback for our products</p>
    </header>

    <main class="reviews-container">
        {esi_includes}
        <!-- Only shown when the CDN does not process ESI -->
        <esi:remove>
            <div class="esi-fallback">
                <p>Note: This page uses ESI (Edge Side Includes) to compose reviews from multiple sources.</p>
                <p>If you see this message, ESI processing may not be enabled in your CDN.</p>
            </div>
        </esi:remove>
    </main>

    <footer>
        <p>Last updated: <time id="last-update">Loading...</time></p>
        <p>Reviews are updated every hour via AWS EventBridge and Lambda</p>
    </footer>

    <script>
        document.getElementById('last-update').textContent = new Date().toLocaleString();
    </script>
</body>
</html>"""
