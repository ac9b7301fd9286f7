# Search Service
"""
Search operations behind the MCP tools.

Each operation fetches the full record set from its content source,
validates the raw records into typed models (skipping malformed ones) and
filters them by query.
Nothing is cached between calls.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from content_search.models.content import (
    BlogPage,
    BlogPost,
    CaseStudy,
    EventCard,
    InternalEventPage,
    LearnPage,
)
from content_search.models.results import (
    BlogPageResult,
    BlogPostResult,
    CaseStudyResult,
    EventResult,
    LearnPageResult,
)
from content_search.services.content_matchers import (
    match_blog_pages,
    match_blog_posts,
    match_case_studies,
    match_event_cards,
    match_internal_events,
    match_learn_pages,
)
from content_search.services.contentful_client import ContentfulClient, contentful_client
from content_search.services.ghost_client import GhostClient, ghost_client

logger = logging.getLogger("content_search.services.search_service")

RecordT = TypeVar("RecordT", bound=BaseModel)


def _validate_records(model: Type[RecordT], raw: List[Dict[str, Any]]) -> List[RecordT]:
    """Validate raw records one by one, skipping any that do not fit the model."""
    records = []
    for index, item in enumerate(raw):
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning(
                f"Skipping malformed {model.__name__} record #{index}: "
                f"{e.error_count()} validation error(s)"
            )
    return records


class SearchService:
    """Query-time search over Ghost and Contentful content."""

    def __init__(
        self,
        ghost: Optional[GhostClient] = None,
        contentful: Optional[ContentfulClient] = None,
    ):
        self.ghost = ghost or ghost_client
        self.contentful = contentful or contentful_client

    async def search_blog_posts(self, query: str) -> List[BlogPostResult]:
        """Search Ghost posts by title, excerpt and body."""
        raw = await self.ghost.fetch_posts()
        posts = _validate_records(BlogPost, raw)
        results = match_blog_posts(posts, query)
        logger.info(f"search_blog_posts: {len(results)} of {len(posts)} posts match")
        return results

    async def search_blog_pages(self, query: str) -> List[BlogPageResult]:
        """Search Ghost pages by title and body."""
        raw = await self.ghost.fetch_pages()
        pages = _validate_records(BlogPage, raw)
        results = match_blog_pages(pages, query)
        logger.info(f"search_blog_pages: {len(results)} of {len(pages)} pages match")
        return results

    async def search_learn_pages(self, query: str) -> List[LearnPageResult]:
        """Search Contentful learn pages by title, meta fields and body."""
        raw = await self.contentful.fetch_learn_pages()
        pages = _validate_records(LearnPage, raw)
        results = match_learn_pages(pages, query)
        logger.info(f"search_learn_pages: {len(results)} of {len(pages)} pages match")
        return results

    async def search_case_studies(self, query: str) -> List[CaseStudyResult]:
        """Search Contentful case studies across their descriptive fields and body."""
        raw = await self.contentful.fetch_case_studies()
        studies = _validate_records(CaseStudy, raw)
        results = match_case_studies(studies, query)
        logger.info(f"search_case_studies: {len(results)} of {len(studies)} case studies match")
        return results

    async def search_events(self, query: str) -> List[EventResult]:
        """Search internal event pages, then event cards; pages are listed first."""
        raw = await self.contentful.fetch_events()
        events = _validate_records(InternalEventPage, raw["internal_events"])
        cards = _validate_records(EventCard, raw["event_cards"])

        results = match_internal_events(events, query) + match_event_cards(cards, query)
        logger.info(
            f"search_events: {len(results)} of {len(events) + len(cards)} events match"
        )
        return results


# Global service instance
search_service = SearchService()
