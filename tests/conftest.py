# tests/conftest.py
import json
import os
from unittest.mock import MagicMock

import pytest
import yaml

# The handler modules read their settings at import time.
os.environ.setdefault("TABLE_NAME", "test-news")
os.environ.setdefault("AWS_REGION", "eu-west-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "news-api-tests")

from lambdas.news_common.news_store import NewsStore

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))


class FakeNewsTable:
    """
    In-memory stand-in for a boto3 DynamoDB Table keyed on (title, date).
    scan() pages through items like DynamoDB does when page_size is set.
    """

    def __init__(self, page_size=None):
        self.items = {}
        self.page_size = page_size
        self.scan_calls = []
        self.put_calls = []

    def put_item(self, Item):
        self.put_calls.append(Item)
        self.items[(Item["title"], Item["date"])] = dict(Item)
        return {}

    def scan(self, **kwargs):
        self.scan_calls.append(kwargs)
        keys = sorted(self.items)
        start = 0
        if "ExclusiveStartKey" in kwargs:
            last = kwargs["ExclusiveStartKey"]
            start = keys.index((last["title"], last["date"])) + 1
        end = len(keys) if not self.page_size else min(start + self.page_size, len(keys))

        page = [dict(self.items[k]) for k in keys[start:end]]
        response = {"Items": page, "Count": len(page)}
        if end < len(keys):
            title, date = keys[end - 1]
            response["LastEvaluatedKey"] = {"title": title, "date": date}
        return response


@pytest.fixture
def fake_table_factory():
    return FakeNewsTable


@pytest.fixture
def fake_table() -> FakeNewsTable:
    return FakeNewsTable()


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def store(fake_table, mock_logger) -> NewsStore:
    return NewsStore(fake_table, "test-news", mock_logger)


@pytest.fixture(scope="session")
def sample_news() -> list:
    """Loads the seed news items from sample_news.yml."""
    with open(os.path.join(TESTS_DIR, "sample_news.yml"), "r") as f:
        return yaml.safe_load(f)["news"]


def _make_event(method="GET", path="/news", body=None, raw_body=None, query=None,
                request_id="req-123", source_ip="203.0.113.7", user_agent="pytest"):
    event = {
        "httpMethod": method,
        "path": path,
        "queryStringParameters": query,
        "body": raw_body if raw_body is not None else (json.dumps(body) if body is not None else None),
        "isBase64Encoded": False,
        "requestContext": {
            "requestId": request_id,
            "identity": {"sourceIp": source_ip, "userAgent": user_agent},
        },
    }
    return event


@pytest.fixture
def make_event():
    """Factory for API Gateway REST proxy events."""
    return _make_event
