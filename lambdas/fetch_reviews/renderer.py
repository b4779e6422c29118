# lambdas/fetch_reviews/renderer.py
"""
Pure renderer that turns a product's reviews into an ESI-friendly HTML fragment.
"""
from html import escape

from .models import MAX_REVIEWS, ProductReviewsPayload, Review


def escape_html(value: str) -> str:
    """
    Escapes & < > " ' in a single pass. Already escaped text is escaped again,
    so "&amp;" becomes "&amp;amp;".
    """
    return escape(value, quote=True)


def format_rating(rating: float) -> str:
    """Always one fractional digit, rounded half to even: 5 -> "5.0", 4.25 -> "4.2"."""
    return f"{rating:.1f}"


def _render_review(review: Review) -> str:
    created_at = escape_html(review.created_at)
    return f"""
    <article data-review-id="{escape_html(review.id)}">
      <header>
        <strong>{escape_html(review.author)}</strong>
        <span aria-label="Rating">{format_rating(review.rating)}⭐</span>
        <time datetime="{created_at}">{created_at}</time>
      </header>
      <p>{escape_html(review.comment)}</p>
    </article>"""


def render_product_reviews_html(payload: ProductReviewsPayload) -> str:
    top_reviews = payload.reviews[:MAX_REVIEWS]
    articles = "\n".join(_render_review(review) for review in top_reviews)
    name = escape_html(payload.name)

    return f"""<section data-product-id="{escape_html(payload.id)}" aria-label="Top reviews for {name}">
  <h2>{name} – Latest Reviews</h2>
  {articles}
</section>"""
