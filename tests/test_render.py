"""Tests for HTML rendering."""

from __future__ import annotations

from jsonlview.models import Neighbors
from jsonlview.web.render import (
    DEFAULT_ROLE_CLASS,
    ROLE_CLASSES,
    message_view,
    message_views,
    quote_id,
    quote_segment,
    render_error,
    render_index,
    render_view,
)


class TestQuoting:
    """Tests for URL segment helpers."""

    def test_quote_segment_encodes_slash(self) -> None:
        """Slashes and spaces are percent-encoded."""
        assert quote_segment("a/b c") == "a%2Fb%20c"

    def test_quote_id_numeric(self) -> None:
        """Numeric ids are encoded from their JSON text."""
        assert quote_id(42) == "42"


class TestMessageView:
    """Tests for message_view and message_views."""

    def test_string_content(self) -> None:
        """Text content is shown as-is with the role colour."""
        view = message_view({"role": "assistant", "content": "Hello"})

        assert view.role == "assistant"
        assert view.content == "Hello"
        assert view.css_class == ROLE_CLASSES["assistant"]

    def test_system_and_user_colours(self) -> None:
        """System messages use their own colour, others the default."""
        assert message_view({"role": "system", "content": "x"}).css_class == ROLE_CLASSES["system"]
        assert message_view({"role": "user", "content": "x"}).css_class == DEFAULT_ROLE_CLASS

    def test_missing_role(self) -> None:
        """Messages without a role are labelled Unknown."""
        assert message_view({"content": "x"}).role == "Unknown"

    def test_structured_content(self) -> None:
        """Non-string content is pretty-printed JSON."""
        view = message_view({"role": "user", "content": [{"type": "text", "text": "hi"}]})

        assert '"type": "text"' in view.content

    def test_missing_content_shows_message(self) -> None:
        """Without content the whole message is shown."""
        view = message_view({"role": "tool", "name": "search"})

        assert '"name": "search"' in view.content

    def test_non_object_message(self) -> None:
        """Scalar messages are rendered as JSON."""
        view = message_view(7)

        assert view.role == "Unknown"
        assert view.content == "7"

    def test_views_only_for_message_lists(self) -> None:
        """Records without a messages list have no transcript."""
        assert message_views({"messages": "nope"}) is None
        assert message_views([1, 2]) is None
        assert len(message_views({"messages": [{}, {}]})) == 2


class TestRenderPages:
    """Tests for the page templates."""

    def test_index_lists_summaries(self) -> None:
        """The index shows ids, item counts and keys."""
        html = render_index(
            [("chats.jsonl", [{"id": "a b", "num_items": 3, "keys": ["id", "messages"]}])]
        )

        assert "<h2" in html and "chats.jsonl" in html
        assert 'href="/view/chats.jsonl/a%20b"' in html
        assert "id, messages" in html

    def test_index_zero_items_shows_na(self) -> None:
        """A zero item count is shown as N/A."""
        html = render_index([("f.jsonl", [{"id": "item-0", "num_items": 0, "keys": []}])])

        assert "N/A" in html

    def test_index_without_files(self) -> None:
        """An empty assets directory is reported."""
        assert "No JSONL files found." in render_index([])

    def test_view_transcript(self) -> None:
        """Messages render with role and position counter."""
        record = {"messages": [{"role": "user", "content": "Q"}, {"role": "assistant", "content": "A"}]}

        html = render_view("f.jsonl", "c1", record, Neighbors())

        assert "1 of 2" in html
        assert "2 of 2" in html
        assert 'id="message-1"' in html
        assert "Previous</a>" not in html

    def test_view_plain_record(self) -> None:
        """Records without messages are shown as JSON."""
        html = render_view("f.jsonl", "x", {"id": "x", "n": 1}, Neighbors())

        assert "&#34;n&#34;: 1" in html or "&quot;n&quot;: 1" in html

    def test_view_navigation(self) -> None:
        """Previous and next links point at the neighbours."""
        nav = Neighbors(previous={"id": "p/1"}, next={"id": 9})

        html = render_view("f.jsonl", "x", {}, nav)

        assert 'href="/view/f.jsonl/p%2F1"' in html
        assert 'href="/view/f.jsonl/9"' in html

    def test_view_not_found(self) -> None:
        """A missing record shows the not-found notice."""
        assert "No data found for this ID." in render_view(
            "f.jsonl", "x", None, Neighbors(), found=False
        )

    def test_view_null_record(self) -> None:
        """A null record is shown as JSON, not as missing."""
        html = render_view("f.jsonl", "item-0", None, Neighbors())

        assert "No data found for this ID." not in html
        assert ">null</pre>" in html

    def test_view_escapes_content(self) -> None:
        """Message content is HTML-escaped."""
        record = {"messages": [{"role": "user", "content": "<script>alert(1)</script>"}]}

        html = render_view("f.jsonl", "x", record, Neighbors())

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_error_page(self) -> None:
        """The error page shows the message."""
        html = render_error("Boom")

        assert "Error | JSONL Viewer" in html
        assert "Boom" in html

    def test_error_page_default_message(self) -> None:
        """A missing message falls back to a generic one."""
        assert "An unknown error occurred" in render_error(None)
