# Test Configuration
"""Pytest fixtures for content search tests."""

import pytest
from content_search.config import settings
from content_search.main import app
from fastapi.testclient import TestClient

# Ensure auth is enforced during tests (non-empty = auth required)
_TEST_SERVICE_API_KEY = "test-service-key"
settings.service_api_key = _TEST_SERVICE_API_KEY


@pytest.fixture
def client():
    """Test client (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {_TEST_SERVICE_API_KEY}"}


def rich_text(*paragraphs):
    """Build a Contentful rich-text document with one paragraph per string."""
    return {
        "nodeType": "document",
        "data": {},
        "content": [
            {
                "nodeType": "paragraph",
                "data": {},
                "content": [
                    {"nodeType": "text", "value": text, "marks": [], "data": {}},
                ],
            }
            for text in paragraphs
        ],
    }


@pytest.fixture
def make_rich_text():
    """Factory for rich-text documents."""
    return rich_text


@pytest.fixture
def sample_posts():
    """Raw Ghost posts as returned by the Content API."""
    return [
        {
            "id": "post-1",
            "title": "Energy outlook 2025",
            "slug": "energy-outlook-2025",
            "excerpt": "We explore renewable energy trends",
            "html": "<p>Grid operators are <strong>changing</strong> fast.</p>",
            "published_at": "2025-01-15T10:00:00.000Z",
            "tags": [{"name": "Energy", "slug": "energy"}, {"name": "Trends", "slug": "trends"}],
        },
        {
            "id": "post-2",
            "title": "Hiring update",
            "slug": "hiring-update",
            "excerpt": "We are growing the team",
            "html": "<p>Join us to build <em>renewable</em> infrastructure.</p>",
            "published_at": "2025-02-01T10:00:00.000Z",
            "tags": [],
        },
        {
            "id": "post-3",
            "title": "Company retreat",
            "slug": "company-retreat",
            "excerpt": "Photos from the mountains",
            "html": "<p>We hiked.</p>",
            "published_at": "2025-03-01T10:00:00.000Z",
        },
    ]


@pytest.fixture
def sample_events():
    """Raw Contentful event collections."""
    return {
        "internal_events": [
            {
                "heroTitle": "Data Summit",
                "metaDescription": "Our yearly conference",
                "url": "data-summit",
                "eventDate": "2025-06-01",
                "additionalEventDetails": {"json": rich_text("Held in Berlin.")},
                "agenda": {"json": rich_text("09:00 Keynote", "11:00 Streaming pipelines workshop")},
            },
        ],
        "event_cards": [
            {
                "title": "Streaming meetup",
                "description": "Community meetup on streaming",
                "link": "https://meetup.example.com/streaming",
                "date": "2025-07-10",
            },
            {
                "title": "Webinar",
                "description": "Quarterly product update",
                "link": "https://example.com/webinar",
                "date": "2025-08-01",
            },
        ],
    }
