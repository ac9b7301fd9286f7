# Record Matcher
"""
Generic record filtering with per-field priority.

A content shape is described by an ordered tuple of ``FieldSpec`` entries.
Every field takes part in deciding whether a record matches; the first field
(in declared order) that yields a snippet decides what is displayed.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from content_search.services.text_match import (
    extract_snippet,
    flatten_rich_text,
    matches_query,
    strip_html,
)

logger = logging.getLogger("content_search.services.record_matcher")

R = TypeVar("R")
T = TypeVar("T")


class FieldKind(str, Enum):
    """How a field value is turned into plain text."""

    PLAIN = "plain"    # already a string
    MARKUP = "markup"  # HTML, tags stripped
    RICH = "rich"      # rich-text document, flattened


@dataclass(frozen=True)
class FieldSpec:
    """One searchable field of a content shape."""

    name: str
    accessor: Callable[[Any], Any]
    kind: FieldKind = FieldKind.PLAIN

    def resolve(self, record: Any) -> Optional[str]:
        """Read the field from a record and reduce it to plain text."""
        value = self.accessor(record)
        if self.kind == FieldKind.MARKUP:
            return strip_html(value)
        if self.kind == FieldKind.RICH:
            return flatten_rich_text(value)
        return value


def select_snippet(values: Sequence[Optional[str]], query: str) -> Optional[str]:
    """Return the snippet from the first value that yields one."""
    for value in values:
        snippet = extract_snippet(value, query)
        if snippet is not None:
            return snippet
    return None


def match_records(
    records: Sequence[R],
    query: str,
    fields: Sequence[FieldSpec],
    build: Callable[[R, Optional[str]], T],
) -> List[T]:
    """
    Filter records by query and build one result per match.

    Args:
        records: Records of a single shape, in retrieval order
        query: Search term
        fields: Field priority list for the shape
        build: Result builder, called with the record and its snippet

    Returns:
        Results for matching records, in retrieval order
    """
    results: List[T] = []
    for record in records:
        # Resolve once; both passes below reuse these values
        values = [spec.resolve(record) for spec in fields]

        if not any(matches_query(value, query) for value in values):
            continue

        results.append(build(record, select_snippet(values, query)))

    logger.debug(f"Matched {len(results)} of {len(records)} records for {query!r}")
    return results
