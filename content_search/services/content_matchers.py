# Content Matchers
"""
Field priority lists and result builders for each content shape.

Field order matters: all fields decide whether a record matches, and the
first one yielding a snippet is the one displayed.
"""

from typing import List, Optional, Sequence

from content_search.models.content import (
    BlogPage,
    BlogPost,
    CaseStudy,
    EventCard,
    InternalEventPage,
    LearnPage,
    rich_text_document,
)
from content_search.models.results import (
    BlogPageResult,
    BlogPostResult,
    CaseStudyResult,
    EventResult,
    LearnPageResult,
)
from content_search.services.record_matcher import FieldKind, FieldSpec, match_records

# Ghost excerpts are cut to this length in results
EXCERPT_MAX_CHARS = 200


# =============================================================================
# Field priority lists
# =============================================================================

BLOG_POST_FIELDS = (
    FieldSpec("title", lambda r: r.title),
    FieldSpec("excerpt", lambda r: r.excerpt),
    FieldSpec("html", lambda r: r.html, FieldKind.MARKUP),
)

BLOG_PAGE_FIELDS = (
    FieldSpec("title", lambda r: r.title),
    FieldSpec("html", lambda r: r.html, FieldKind.MARKUP),
)

LEARN_PAGE_FIELDS = (
    FieldSpec("title", lambda r: r.title),
    FieldSpec("metaTitle", lambda r: r.metaTitle),
    FieldSpec("metaDescription", lambda r: r.metaDescription),
    FieldSpec("content", lambda r: rich_text_document(r.content), FieldKind.RICH),
)

CASE_STUDY_FIELDS = (
    FieldSpec("name", lambda r: r.name),
    FieldSpec("metaTitle", lambda r: r.metaTitle),
    FieldSpec("metaDescription", lambda r: r.metaDescription),
    FieldSpec("overview", lambda r: r.overview),
    FieldSpec("quoteText", lambda r: r.quoteText),
    FieldSpec("useCase", lambda r: r.useCase),
    FieldSpec("impact", lambda r: r.impact),
    FieldSpec("content", lambda r: rich_text_document(r.content), FieldKind.RICH),
)

INTERNAL_EVENT_FIELDS = (
    FieldSpec("heroTitle", lambda r: r.heroTitle),
    FieldSpec("metaDescription", lambda r: r.metaDescription),
    FieldSpec(
        "additionalEventDetails",
        lambda r: rich_text_document(r.additionalEventDetails),
        FieldKind.RICH,
    ),
    FieldSpec("agenda", lambda r: rich_text_document(r.agenda), FieldKind.RICH),
)

EVENT_CARD_FIELDS = (
    FieldSpec("title", lambda r: r.title),
    FieldSpec("description", lambda r: r.description),
)


# =============================================================================
# URL derivation
# =============================================================================


def blog_url(slug: Optional[str]) -> str:
    return f"/blog/{slug}"


def learn_page_url(page: LearnPage) -> str:
    """Learn pages nest under their section when the section has a url."""
    if page.section and page.section.url:
        return f"/learn/{page.section.url}/{page.url}"
    return f"/learn/{page.url}"


def case_study_url(study: CaseStudy) -> str:
    """Case studies hosted elsewhere link out; the rest live under /case-studies."""
    return study.externalLink or f"/case-studies/{study.slug}"


def event_page_url(event: InternalEventPage) -> str:
    return f"/events/{event.url}"


# =============================================================================
# Result builders
# =============================================================================


def _blog_post_result(post: BlogPost, snippet: Optional[str]) -> BlogPostResult:
    return BlogPostResult(
        title=post.title,
        slug=post.slug,
        url=blog_url(post.slug),
        excerpt=post.excerpt[:EXCERPT_MAX_CHARS] if post.excerpt is not None else None,
        published_at=post.published_at,
        tags=[tag.name for tag in post.tags] if post.tags is not None else None,
        matched_snippet=snippet,
    )


def _blog_page_result(page: BlogPage, snippet: Optional[str]) -> BlogPageResult:
    return BlogPageResult(
        title=page.title,
        slug=page.slug,
        url=blog_url(page.slug),
        matched_snippet=snippet,
    )


def _learn_page_result(page: LearnPage, snippet: Optional[str]) -> LearnPageResult:
    return LearnPageResult(
        title=page.title,
        url=learn_page_url(page),
        section=page.section.title if page.section else None,
        subSection=page.subSection,
        metaDescription=page.metaDescription,
        matched_snippet=snippet,
    )


def _case_study_result(study: CaseStudy, snippet: Optional[str]) -> CaseStudyResult:
    return CaseStudyResult(
        name=study.name,
        slug=study.slug,
        url=case_study_url(study),
        overview=study.overview,
        category=study.category,
        useCase=study.useCase,
        impact=study.impact,
        matched_snippet=snippet,
    )


def _internal_event_result(event: InternalEventPage, snippet: Optional[str]) -> EventResult:
    return EventResult(
        type="internal_event",
        title=event.heroTitle,
        description=event.metaDescription,
        url=event_page_url(event),
        date=event.eventDate,
        matched_snippet=snippet,
    )


def _event_card_result(card: EventCard, snippet: Optional[str]) -> EventResult:
    return EventResult(
        type="event_card",
        title=card.title,
        description=card.description,
        url=card.link,
        date=card.date,
        matched_snippet=snippet,
    )


# =============================================================================
# Matchers
# =============================================================================


def match_blog_posts(posts: Sequence[BlogPost], query: str) -> List[BlogPostResult]:
    return match_records(posts, query, BLOG_POST_FIELDS, _blog_post_result)


def match_blog_pages(pages: Sequence[BlogPage], query: str) -> List[BlogPageResult]:
    return match_records(pages, query, BLOG_PAGE_FIELDS, _blog_page_result)


def match_learn_pages(pages: Sequence[LearnPage], query: str) -> List[LearnPageResult]:
    return match_records(pages, query, LEARN_PAGE_FIELDS, _learn_page_result)


def match_case_studies(studies: Sequence[CaseStudy], query: str) -> List[CaseStudyResult]:
    return match_records(studies, query, CASE_STUDY_FIELDS, _case_study_result)


def match_internal_events(
    events: Sequence[InternalEventPage],
    query: str,
) -> List[EventResult]:
    return match_records(events, query, INTERNAL_EVENT_FIELDS, _internal_event_result)


def match_event_cards(cards: Sequence[EventCard], query: str) -> List[EventResult]:
    return match_records(cards, query, EVENT_CARD_FIELDS, _event_card_result)
