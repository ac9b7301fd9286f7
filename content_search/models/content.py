# Content Record Models
"""
Pydantic models for records fetched from the content sources.

Field names follow the source APIs (snake_case for Ghost, camelCase for
Contentful GraphQL). Every field is optional: CMS content is often partial,
and a missing field simply never matches. Unknown keys are ignored.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# Ghost
# =============================================================================


class GhostTag(BaseModel):
    """Tag attached to a Ghost post."""

    name: Optional[str] = None
    slug: Optional[str] = None


class BlogPost(BaseModel):
    """Ghost post (requested with formats=html, include=tags)."""

    title: Optional[str] = None
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    html: Optional[str] = None
    published_at: Optional[str] = None
    tags: Optional[List[GhostTag]] = None


class BlogPage(BaseModel):
    """Ghost page (requested with formats=html)."""

    title: Optional[str] = None
    slug: Optional[str] = None
    html: Optional[str] = None


# =============================================================================
# Contentful
# =============================================================================


class RichTextField(BaseModel):
    """Contentful rich-text field; the document tree sits under ``json``."""

    document: Optional[Dict[str, Any]] = Field(default=None, alias="json")


class LearnSection(BaseModel):
    """Parent section of a learn page."""

    title: Optional[str] = None
    url: Optional[str] = None


class LearnPage(BaseModel):
    """Contentful ``learnPage`` entry."""

    title: Optional[str] = None
    url: Optional[str] = None
    section: Optional[LearnSection] = None
    subSection: Optional[str] = None
    metaTitle: Optional[str] = None
    metaDescription: Optional[str] = None
    content: Optional[RichTextField] = None


class CaseStudy(BaseModel):
    """Contentful ``successStoriesCompany`` entry."""

    name: Optional[str] = None
    slug: Optional[str] = None
    externalLink: Optional[str] = None
    overview: Optional[str] = None
    category: Optional[Union[str, List[str]]] = None
    useCase: Optional[str] = None
    impact: Optional[str] = None
    quoteText: Optional[str] = None
    metaTitle: Optional[str] = None
    metaDescription: Optional[str] = None
    content: Optional[RichTextField] = None


class InternalEventPage(BaseModel):
    """Contentful ``internalEventPage`` entry."""

    heroTitle: Optional[str] = None
    metaDescription: Optional[str] = None
    url: Optional[str] = None
    eventDate: Optional[str] = None
    additionalEventDetails: Optional[RichTextField] = None
    agenda: Optional[RichTextField] = None


class EventCard(BaseModel):
    """Contentful ``eventsCard`` entry (usually links to an external event)."""

    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    date: Optional[str] = None


def rich_text_document(field: Optional[RichTextField]) -> Optional[Dict[str, Any]]:
    """Return the document tree of a rich-text field, if any."""
    return field.document if field else None
