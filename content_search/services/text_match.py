# Text Matching Service
"""
Plain-text extraction, case-insensitive matching and snippet extraction.

Content arrives in three forms: plain strings, Ghost HTML markup and
Contentful rich-text documents. Markup and rich text are reduced to plain
text first; matching and snippet extraction then share a single
case-folding step so that a haystack matches a query exactly when a
snippet can be cut from it.
"""

import re
from typing import Any, Optional, Tuple

# Characters of context kept on each side of the first match
SNIPPET_CONTEXT_CHARS = 150

ELLIPSIS = "..."

_TAG_RE = re.compile(r"<[^>]*>")


def flatten_rich_text(node: Any) -> str:
    """
    Flatten a Contentful rich-text node into plain text.

    Text nodes yield their ``value``. Any node with a ``content`` list yields
    the space-joined flattening of its children, depth-first and in order.
    Anything else (missing document, unknown node shape) yields ``""``.

    Args:
        node: Rich-text node mapping, or None

    Returns:
        Plain text
    """
    if not isinstance(node, dict):
        return ""
    if node.get("nodeType") == "text":
        return node.get("value") or ""
    children = node.get("content")
    if isinstance(children, list):
        return " ".join(flatten_rich_text(child) for child in children)
    return ""


def strip_html(markup: Optional[str]) -> str:
    """Remove every ``<...>`` tag span, keeping the remaining text verbatim."""
    if not markup:
        return ""
    return _TAG_RE.sub("", markup)


def _fold_chars(text: str) -> str:
    """Lowercase character by character, leaving multi-code-point lowercasings as-is."""
    return "".join(ch if len(ch.lower()) != 1 else ch.lower() for ch in text)


def _find(haystack: str, query: str) -> Tuple[int, int]:
    """
    Locate the query in the haystack, ignoring case.

    The fold is chosen from the haystack and applied to both strings. When
    whole-string lowercasing would change the haystack's length (e.g. U+0130),
    both sides fold per character so every index into the folded haystack is
    also a valid index into the original.

    Returns:
        (index of the first match or -1, length of the match in the haystack)
    """
    folded = haystack.lower()
    if len(folded) == len(haystack):
        needle = query.lower()
    else:
        folded = _fold_chars(haystack)
        needle = _fold_chars(query)
    return folded.find(needle), len(needle)


def matches_query(haystack: Optional[str], query: str) -> bool:
    """Return True if the haystack contains the query, ignoring case."""
    if not haystack:
        return False
    idx, _ = _find(haystack, query)
    return idx != -1


def extract_snippet(
    haystack: Optional[str],
    query: str,
    context_chars: int = SNIPPET_CONTEXT_CHARS,
) -> Optional[str]:
    """
    Cut a snippet of the haystack around the first occurrence of the query.

    The window spans ``context_chars`` on each side of the match, clamped to
    the haystack. The slice keeps the original casing and gets an ellipsis on
    each edge where text was cut off.

    Args:
        haystack: Text to search, or None
        query: Search term
        context_chars: Characters of context on each side

    Returns:
        Snippet text, or None if the haystack is empty or has no match
    """
    if not haystack:
        return None
    idx, length = _find(haystack, query)
    if idx == -1:
        return None

    start = max(0, idx - context_chars)
    end = min(len(haystack), idx + length + context_chars)
    snippet = haystack[start:end]
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(haystack):
        snippet = snippet + ELLIPSIS
    return snippet
