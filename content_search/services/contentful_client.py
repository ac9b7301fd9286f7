# Contentful Client Service
"""HTTP client for the Contentful GraphQL Content API."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from content_search.config import settings
from content_search.middleware.correlation import get_correlation_id
from content_search.services.errors import ContentSourceError

logger = logging.getLogger("content_search.services.contentful_client")

SOURCE_NAME = "Contentful"

LEARN_PAGES_QUERY = """query {
  learnPageCollection(limit: 999) {
    items {
      title
      url
      section {
        title
        url
      }
      subSection
      metaTitle
      metaDescription
      content {
        json
      }
    }
  }
}"""

CASE_STUDIES_QUERY = """query {
  successStoriesCompanyCollection(limit: 300) {
    items {
      name
      slug
      externalLink
      overview
      category
      useCase
      impact
      quoteText
      metaTitle
      metaDescription
      content {
        json
      }
    }
  }
}"""

EVENTS_QUERY = """query {
  internalEventPageCollection(limit: 300) {
    items {
      heroTitle
      metaDescription
      url
      eventDate
      additionalEventDetails {
        json
      }
      agenda {
        json
      }
    }
  }
  eventsCardCollection(limit: 300) {
    items {
      title
      description
      link
      date
    }
  }
}"""


def collection_items(data: Dict[str, Any], collection: str) -> List[Dict[str, Any]]:
    """Return the items of a GraphQL collection, or [] when it is missing."""
    items = (data.get(collection) or {}).get("items")
    return [item for item in items or [] if item is not None]


class ContentfulClient:
    """Client for Contentful's GraphQL Content API."""

    def __init__(
        self,
        space_id: Optional[str] = None,
        access_token: Optional[str] = None,
        graphql_url: Optional[str] = None,
        timeout: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.space_id = space_id if space_id is not None else settings.contentful_space_id
        self.access_token = (
            access_token if access_token is not None else settings.contentful_access_token
        )
        self.graphql_url = graphql_url or settings.contentful_graphql_url
        self.timeout = timeout or settings.request_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def endpoint(self) -> str:
        """GraphQL endpoint for the configured space."""
        return f"{self.graphql_url.rstrip('/')}/{self.space_id}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if not self.space_id:
            raise ContentSourceError(SOURCE_NAME, "space ID is not configured")
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _build_headers(self) -> Dict[str, str]:
        """Build request headers."""
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.access_token}",
        }
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-ID"] = correlation_id
        return headers

    async def query(self, graphql: str) -> Dict[str, Any]:
        """
        Run a GraphQL query.

        Args:
            graphql: GraphQL query document

        Returns:
            The ``data`` object of the response

        Raises:
            ContentSourceError: On transport failure, non-2xx status, invalid
                JSON, or GraphQL errors without any data
        """
        client = await self._get_client()

        try:
            response = await client.post(
                self.endpoint,
                headers=self._build_headers(),
                json={"query": graphql},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"GraphQL request failed: {e.response.status_code}")
            raise ContentSourceError(SOURCE_NAME, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Error calling GraphQL endpoint: {e}")
            raise ContentSourceError(SOURCE_NAME, f"request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from GraphQL endpoint: {e}")
            raise ContentSourceError(SOURCE_NAME, "invalid JSON response") from e

        if not isinstance(payload, dict):
            raise ContentSourceError(SOURCE_NAME, "unexpected response payload")

        errors = payload.get("errors") or []
        data = payload.get("data")
        if errors:
            messages = "; ".join(str(err.get("message", err)) for err in errors if err)
            if not data:
                logger.error(f"GraphQL query failed: {messages}")
                raise ContentSourceError(SOURCE_NAME, f"GraphQL errors: {messages}")
            # Contentful returns partial data when some entries fail to resolve
            logger.warning(f"GraphQL query returned partial data: {messages}")

        return data or {}

    async def fetch_learn_pages(self) -> List[Dict[str, Any]]:
        """Fetch learn pages with section and rich-text body."""
        data = await self.query(LEARN_PAGES_QUERY)
        items = collection_items(data, "learnPageCollection")
        logger.info(f"Fetched {len(items)} learn pages from Contentful")
        return items

    async def fetch_case_studies(self) -> List[Dict[str, Any]]:
        """Fetch success story (case study) entries."""
        data = await self.query(CASE_STUDIES_QUERY)
        items = collection_items(data, "successStoriesCompanyCollection")
        logger.info(f"Fetched {len(items)} case studies from Contentful")
        return items

    async def fetch_events(self) -> Dict[str, List[Dict[str, Any]]]:
        """
        Fetch internal event pages and event cards in one query.

        Returns:
            Dict with ``internal_events`` and ``event_cards`` item lists
        """
        data = await self.query(EVENTS_QUERY)
        events = {
            "internal_events": collection_items(data, "internalEventPageCollection"),
            "event_cards": collection_items(data, "eventsCardCollection"),
        }
        logger.info(
            f"Fetched {len(events['internal_events'])} event pages and "
            f"{len(events['event_cards'])} event cards from Contentful"
        )
        return events


# Global client instance
contentful_client = ContentfulClient()
