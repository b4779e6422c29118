# tests/test_fetch_reviews_handler.py
import json
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from lambdas.fetch_reviews import app as fetch_reviews_app

SCHEDULED_EVENT = {"source": "aws.events", "detail-type": "Scheduled Event", "detail": {}}


@pytest.fixture
def lambda_env(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://mock.test")
    monkeypatch.setenv("PRODUCT_IDS", "product-a,product-b")
    monkeypatch.setenv("OUTPUT_BUCKET", "test-bucket")


@pytest.fixture
def s3_client():
    mock_s3 = MagicMock()
    with patch("lambdas.fetch_reviews.app.S3_CLIENT", mock_s3):
        yield mock_s3


def test_handler_returns_summary(lambda_env, s3_client, mock_api_session):
    with patch("lambdas.fetch_reviews.fetcher.requests.get", side_effect=mock_api_session.get):
        response = fetch_reviews_app.handler(SCHEDULED_EVENT, None)

    assert response["statusCode"] == 200
    assert response["headers"] == {"Content-Type": "application/json"}
    body = json.loads(response["body"])
    assert body["message"] == "Successfully processed 2 product(s)"
    assert body["count"] == 2
    assert [r["key"] for r in body["results"]] == ["reviews/product-a.html", "reviews/product-b.html"]

    put_kwargs = s3_client.put_object.call_args.kwargs
    assert put_kwargs["Bucket"] == "test-bucket"
    assert put_kwargs["ContentType"] == "text/html; charset=utf-8"
    assert put_kwargs["CacheControl"] == "max-age=60"


def test_handler_returns_error_result_on_fetch_failure(lambda_env, monkeypatch, s3_client):
    monkeypatch.setenv("PRODUCT_IDS", "product-x,product-a")

    failing = MagicMock(status_code=500)
    with patch("lambdas.fetch_reviews.fetcher.requests.get", return_value=failing):
        response = fetch_reviews_app.handler(SCHEDULED_EVENT, None)

    assert response["statusCode"] == 500
    assert json.loads(response["body"]) == {"error": "Failed to fetch reviews for product-x: 500"}
    s3_client.put_object.assert_not_called()


def test_handler_returns_error_result_on_storage_failure(lambda_env, s3_client, mock_api_session):
    error = ClientError(
        {"Error": {"Code": "NoSuchBucket", "Message": "The specified bucket does not exist"}}, "PutObject"
    )
    s3_client.put_object.side_effect = error

    with patch("lambdas.fetch_reviews.fetcher.requests.get", side_effect=mock_api_session.get):
        response = fetch_reviews_app.handler(SCHEDULED_EVENT, None)

    assert response["statusCode"] == 500
    assert json.loads(response["body"])["error"] == str(error)
    # no partial results are reported
    assert "results" not in json.loads(response["body"])


def test_handler_reports_empty_product_list(monkeypatch, s3_client):
    monkeypatch.setenv("PRODUCT_IDS", " ")

    response = fetch_reviews_app.handler(SCHEDULED_EVENT, None)

    assert response["statusCode"] == 500
    assert "PRODUCT_IDS" in json.loads(response["body"])["error"]
