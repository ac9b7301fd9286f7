# Ghost Client Service
"""HTTP client for the Ghost Content API."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from content_search.config import settings
from content_search.middleware.correlation import get_correlation_id
from content_search.services.errors import ContentSourceError

logger = logging.getLogger("content_search.services.ghost_client")

SOURCE_NAME = "Ghost"


class GhostClient:
    """
    Paginating client for Ghost posts and pages.

    Only public content is requested, with the HTML body format so that
    post and page bodies can be searched.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        page_size: Optional[int] = None,
        timeout: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url if base_url is not None else settings.ghost_content_endpoint
        self.api_key = api_key if api_key is not None else settings.ghost_api_key
        self.page_size = page_size or settings.ghost_page_size
        self.timeout = timeout or settings.request_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if not self.base_url:
            raise ContentSourceError(SOURCE_NAME, "content endpoint is not configured")
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
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
        headers = {"Accept": "application/json"}
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-ID"] = correlation_id
        return headers

    def _build_params(self, page: int, include: Optional[str] = None) -> Dict[str, Any]:
        """Build query parameters for one page."""
        params: Dict[str, Any] = {
            "key": self.api_key,
            "filter": "visibility:public",
            "limit": self.page_size,
            "page": page,
            "formats": "html",
        }
        if include:
            params["include"] = include
        return params

    async def _get_page(
        self,
        resource: str,
        page: int,
        include: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Fetch one page of a resource."""
        client = await self._get_client()

        try:
            response = await client.get(
                f"/{resource}/",
                headers=self._build_headers(),
                params=self._build_params(page, include),
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to fetch {resource} page {page}: {e.response.status_code}")
            raise ContentSourceError(
                SOURCE_NAME, f"HTTP {e.response.status_code} fetching {resource}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Error fetching {resource} page {page}: {e}")
            raise ContentSourceError(SOURCE_NAME, f"request for {resource} failed: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON in {resource} page {page}: {e}")
            raise ContentSourceError(SOURCE_NAME, f"invalid JSON for {resource}") from e

        if not isinstance(payload, dict):
            raise ContentSourceError(SOURCE_NAME, f"unexpected payload for {resource}")
        return payload

    async def fetch_all(
        self,
        resource: str,
        data_key: str,
        include: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch every record of a resource, following pagination.

        Args:
            resource: API resource path (e.g. "posts")
            data_key: Payload key holding the records (e.g. "posts")
            include: Related data to embed (e.g. "tags")

        Returns:
            All records in API order
        """
        records: List[Dict[str, Any]] = []
        page = 1

        while True:
            payload = await self._get_page(resource, page, include)
            batch = payload.get(data_key)
            if batch is None:
                # No data key means there is nothing (more) to read
                break

            records.extend(batch)
            pagination = (payload.get("meta") or {}).get("pagination") or {}
            logger.debug(f"Fetched {resource} page {page}: {len(batch)} records")
            if not pagination.get("next"):
                break
            page += 1

        logger.info(f"Fetched {len(records)} {resource} from Ghost")
        return records

    async def fetch_posts(self) -> List[Dict[str, Any]]:
        """Fetch all public posts with their tags."""
        return await self.fetch_all("posts", "posts", include="tags")

    async def fetch_pages(self) -> List[Dict[str, Any]]:
        """Fetch all public pages."""
        return await self.fetch_all("pages", "pages")


# Global client instance
ghost_client = GhostClient()
