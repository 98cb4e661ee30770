import pytest
import httpx

from allnewsapi import NewsAPI


TEST_API_KEY = "21438009-686f-4ebc-988f-146e70c4792b"
TEST_BASE_URL = "http://localhost:8080"


@pytest.fixture
def api_key():
    return TEST_API_KEY


@pytest.fixture
def base_url():
    return TEST_BASE_URL


@pytest.fixture
def captured_requests():
    return []


@pytest.fixture
def mock_transport(captured_requests):
    """Build an httpx.MockTransport that records requests and answers with the given response."""

    def inner(response=None, status_code=200, json=None, content=None, exc=None):

        def handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            if exc is not None:
                raise exc
            if response is not None:
                return response
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, content=content or b"")

        return httpx.MockTransport(handler)

    return inner


@pytest.fixture
def make_client(api_key, base_url):

    def inner(transport=None):
        return NewsAPI(api_key, base_url, transport=transport)

    return inner


@pytest.fixture
def sample_articles():
    return {
        "totalArticles": 2,
        "articles": [
            {
                "title": "Google unveils new search features",
                "description": "The company announced updates at its annual event.",
                "url": "https://example.com/google-search",
                "publishedAt": "2024-05-01T08:30:00Z",
                "source": {"name": "Example News", "url": "https://example.com"}
            },
            {
                "title": "Google Cloud revenue grows",
                "description": "Quarterly results beat expectations.",
                "url": "https://example.com/google-cloud",
                "publishedAt": "2024-05-02T10:00:00Z",
                "source": {"name": "Example News", "url": "https://example.com"}
            }
        ]
    }
