# tests/conftest.py
import json
from html.parser import HTMLParser
from urllib.parse import urlparse

import pytest

from lambdas.fetch_reviews.models import ProductReviewsPayload, Review
from lambdas.mock_api.app import handler as mock_api_handler

# Elements that never get a closing tag
VOID_TAGS = {"meta", "br", "img", "link", "input", "hr"}


class FragmentParser(HTMLParser):
    """
    Collects what the tests need from a rendered fragment and checks that every
    opened tag is closed in the right order.
    """

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.open_tags = []
        self.errors = []
        self.articles = []  # data-review-id of every <article>
        self.sections = []  # attribute dicts of every <section>
        self.text_by_tag = {}

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        if tag == "article":
            self.articles.append(attrs.get("data-review-id"))
        if tag == "section":
            self.sections.append(attrs)
        if tag == "time":
            self.text_by_tag.setdefault("time@datetime", []).append(attrs.get("datetime"))
        if tag not in VOID_TAGS:
            self.open_tags.append(tag)

    def handle_endtag(self, tag):
        if not self.open_tags or self.open_tags[-1] != tag:
            self.errors.append(f"unexpected </{tag}>")
            return
        self.open_tags.pop()

    def handle_data(self, data):
        if self.open_tags and data.strip():
            self.text_by_tag.setdefault(self.open_tags[-1], []).append(data.strip())


def parse_fragment(html: str) -> FragmentParser:
    parser = FragmentParser()
    parser.feed(html)
    parser.close()
    return parser


def make_review(index: int, **overrides) -> Review:
    fields = {
        "id": f"rev-{index}",
        "author": f"Author {index}",
        "rating": 4,
        "comment": f"Comment number {index}",
        "createdAt": f"2024-11-{index:02d}T10:00:00Z",
    }
    fields.update(overrides)
    return Review.model_validate(fields)


@pytest.fixture
def make_payload():
    """Factory for payloads with `count` generated reviews."""
    def _make_payload(count: int = 3, product_id: str = "product-a", name: str = "Wireless Headphones"):
        return ProductReviewsPayload(
            id=product_id,
            name=name,
            reviews=[make_review(i) for i in range(1, count + 1)],
        )
    return _make_payload


class MockApiResponse:
    """The subset of requests.Response the fetcher relies on."""

    def __init__(self, proxy_response: dict):
        self.status_code = proxy_response["statusCode"]
        self.text = proxy_response["body"]

    def json(self):
        return json.loads(self.text)


class MockApiSession:
    """
    A requests-compatible session that answers through the mock API Lambda handler
    instead of the network, recording every requested URL.
    """

    def __init__(self):
        self.requested_urls = []

    def get(self, url, timeout=None):
        self.requested_urls.append(url)
        return MockApiResponse(mock_api_handler({"path": urlparse(url).path}, None))


@pytest.fixture
def mock_api_session() -> MockApiSession:
    return MockApiSession()
