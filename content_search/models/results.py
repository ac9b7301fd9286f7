# Search Result Models
"""
Pydantic models for search results returned to the calling agent.

Each result carries a few display fields copied from the source record and
``matched_snippet``: the text around the first match in the highest-priority
matching field.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel


class BlogPostResult(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    url: str
    excerpt: Optional[str] = None
    published_at: Optional[str] = None
    tags: Optional[List[Optional[str]]] = None
    matched_snippet: Optional[str] = None


class BlogPageResult(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    url: str
    matched_snippet: Optional[str] = None


class LearnPageResult(BaseModel):
    title: Optional[str] = None
    url: str
    section: Optional[str] = None
    subSection: Optional[str] = None
    metaDescription: Optional[str] = None
    matched_snippet: Optional[str] = None


class CaseStudyResult(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    url: str
    overview: Optional[str] = None
    category: Optional[Union[str, List[str]]] = None
    useCase: Optional[str] = None
    impact: Optional[str] = None
    matched_snippet: Optional[str] = None


class EventResult(BaseModel):
    """Internal event page or event card."""

    type: Literal["internal_event", "event_card"]
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    date: Optional[str] = None
    matched_snippet: Optional[str] = None
