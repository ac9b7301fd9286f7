# Text Matching Tests
"""Tests for rich-text flattening, HTML stripping, matching and snippets."""

import pytest

from content_search.services.text_match import (
    SNIPPET_CONTEXT_CHARS,
    extract_snippet,
    flatten_rich_text,
    matches_query,
    strip_html,
)


class TestFlattenRichText:
    """Test rich-text flattening."""

    def test_nested_text_nodes_joined_with_space(self):
        """Two text leaves under two container levels flatten to 'a b'."""
        document = {
            "nodeType": "document",
            "content": [
                {
                    "nodeType": "paragraph",
                    "content": [
                        {"nodeType": "text", "value": "a"},
                        {"nodeType": "text", "value": "b"},
                    ],
                },
            ],
        }
        assert flatten_rich_text(document) == "a b"

    def test_none_returns_empty(self):
        assert flatten_rich_text(None) == ""

    def test_paragraphs_flattened_in_order(self, make_rich_text):
        document = make_rich_text("First paragraph.", "Second paragraph.")
        assert flatten_rich_text(document) == "First paragraph. Second paragraph."

    def test_text_node_without_value(self):
        assert flatten_rich_text({"nodeType": "text"}) == ""
        assert flatten_rich_text({"nodeType": "text", "value": None}) == ""

    def test_unknown_node_without_content(self):
        """Embedded entries carry only data; they contribute nothing."""
        node = {"nodeType": "embedded-entry-block", "data": {"target": {"sys": {"id": "x"}}}}
        assert flatten_rich_text(node) == ""

    def test_hyperlink_text_included(self):
        document = {
            "nodeType": "paragraph",
            "content": [
                {"nodeType": "text", "value": "Read the"},
                {
                    "nodeType": "hyperlink",
                    "data": {"uri": "https://example.com"},
                    "content": [{"nodeType": "text", "value": "docs"}],
                },
            ],
        }
        assert flatten_rich_text(document) == "Read the docs"

    def test_non_mapping_input(self):
        assert flatten_rich_text("plain string") == ""
        assert flatten_rich_text(["a"]) == ""


class TestStripHtml:
    """Test HTML tag stripping."""

    def test_removes_tags_keeps_text(self):
        assert strip_html("<p>Hello <b>World</b></p>") == "Hello World"

    def test_keeps_whitespace_verbatim(self):
        assert strip_html("<p>One</p>\n<p>Two  three</p>") == "One\nTwo  three"

    def test_keeps_entities(self):
        assert strip_html("<p>Fish &amp; chips</p>") == "Fish &amp; chips"

    def test_tag_attributes_removed(self):
        assert strip_html('<a href="https://x.io" class="link">x</a>') == "x"

    @pytest.mark.parametrize("markup", [None, ""])
    def test_empty_markup(self, markup):
        assert strip_html(markup) == ""


class TestMatchesQuery:
    """Test case-insensitive containment."""

    def test_case_insensitive(self):
        assert matches_query("Renewable Energy", "renewable") is True
        assert matches_query("renewable energy", "ENERGY") is True

    def test_no_match(self):
        assert matches_query("Solar power", "wind") is False

    @pytest.mark.parametrize("haystack", [None, ""])
    def test_absent_haystack(self, haystack):
        assert matches_query(haystack, "anything") is False

    def test_contiguous_substring_only(self):
        assert matches_query("renewable energy", "renewable  energy") is False

    def test_empty_query_matches_any_text(self):
        assert matches_query("anything", "") is True


class TestExtractSnippet:
    """Test snippet extraction."""

    def test_short_text_returned_whole(self):
        text = "We explore renewable energy trends"
        assert extract_snippet(text, "RENEWABLE") == text

    def test_absent_haystack(self):
        assert extract_snippet(None, "x") is None
        assert extract_snippet("", "x") is None

    def test_not_found(self):
        assert extract_snippet("Solar power", "wind") is None

    def test_preserves_original_case(self):
        assert extract_snippet("Big NEWS today", "news") == "Big NEWS today"

    def test_ellipsis_on_both_sides(self):
        text = "x" * 200 + "needle" + "y" * 200
        snippet = extract_snippet(text, "needle")

        assert snippet.startswith("...")
        assert snippet.endswith("...")
        body = snippet[3:-3]
        assert body == "x" * SNIPPET_CONTEXT_CHARS + "needle" + "y" * SNIPPET_CONTEXT_CHARS

    def test_no_leading_ellipsis_near_start(self):
        """Match within the first 150 chars; text extends well beyond the window."""
        i = 100
        text = "a" * i + "needle" + "b" * 400
        snippet = extract_snippet(text, "needle")

        assert not snippet.startswith("...")
        # i + len(query) + 150 < len(text), so the end is cut
        assert snippet.endswith("...")
        assert snippet == text[: i + 6 + 150] + "..."

    def test_no_trailing_ellipsis_when_window_reaches_end(self):
        text = "a" * 300 + "needle" + "b" * 150
        snippet = extract_snippet(text, "needle")

        assert snippet.startswith("...")
        assert not snippet.endswith("...")
        assert snippet == "..." + text[150:]

    def test_window_starting_exactly_at_zero(self):
        text = "a" * 150 + "needle"
        assert extract_snippet(text, "needle") == text

    def test_first_occurrence_used(self):
        text = "needle " + "z" * 400 + " needle"
        snippet = extract_snippet(text, "needle")
        assert snippet.startswith("needle ")
        assert snippet.endswith("...")

    def test_custom_context(self):
        assert extract_snippet("0123456789needle0123456789", "needle", context_chars=2) == (
            "...89needle01..."
        )

    def test_length_changing_lowercase(self):
        """U+0130 lowercases to two code points; indices must stay aligned."""
        text = "İİ Renewable energy"
        assert extract_snippet(text, "renewable") == text
        assert matches_query(text, "renewable") is True

    def test_query_folded_like_haystack(self):
        """Final sigma must match even when U+0130 forces per-character folding."""
        text = "ΟΔΟΣ İstanbul"
        assert matches_query(text, "ΟΔΟΣ") is True
        assert extract_snippet(text, "ΟΔΟΣ") == text

    def test_final_sigma_whole_string(self):
        assert matches_query("Η ΟΔΟΣ", "οδος") is True
        assert extract_snippet("Η ΟΔΟΣ", "ΟΔΟΣ") == "Η ΟΔΟΣ"

    @pytest.mark.parametrize(
        "haystack,query",
        [
            ("Renewable energy", "renewable"),
            ("Renewable energy", "wind"),
            (None, "x"),
            ("", "x"),
            ("İstanbul", "stanbul"),
            ("MiXeD CaSe", "mixed case"),
        ],
    )
    def test_matches_agrees_with_snippet(self, haystack, query):
        assert matches_query(haystack, query) == (extract_snippet(haystack, query) is not None)
