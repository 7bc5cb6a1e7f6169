"""HTML rendering for the index, record and error pages."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple
from urllib.parse import quote

from jinja2 import Environment, PackageLoader

from jsonlview.ingestion.collector import id_key
from jsonlview.models import Neighbors, Summary

ROLE_CLASSES = {
    "assistant": "bg-gray-200",
    "system": "bg-pink-400 text-white",
}
DEFAULT_ROLE_CLASS = "bg-blue-500 text-white"


def pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def quote_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe="")


def quote_id(value: Any) -> str:
    return quote_segment(id_key(value))


_jinja_env = Environment(
    loader=PackageLoader("jsonlview.web", "templates"),
    autoescape=True,
)
_jinja_env.filters["pretty_json"] = pretty_json
_jinja_env.filters["quote_segment"] = quote_segment
_jinja_env.filters["quote_id"] = quote_id
_jinja_env.filters["display_id"] = id_key


@dataclass(slots=True)
class MessageView:
    role: str
    css_class: str
    content: str


def message_view(message: Any) -> MessageView:
    """Display fields for one chat message of any shape."""
    if not isinstance(message, dict):
        return MessageView(role="Unknown", css_class=DEFAULT_ROLE_CLASS, content=pretty_json(message))

    role = message.get("role")
    content = message.get("content")
    if isinstance(content, str) and content:
        text = content
    elif content:
        text = pretty_json(content)
    else:
        # Nothing to show on its own: fall back to the whole message.
        text = pretty_json(message)
    if not isinstance(role, str):
        role = str(role) if role else ""
    return MessageView(
        role=role or "Unknown",
        css_class=ROLE_CLASSES.get(role, DEFAULT_ROLE_CLASS),
        content=text,
    )


def message_views(record: Any) -> Optional[List[MessageView]]:
    """Transcript view of ``record.messages``, or ``None`` when it has no message list."""
    if isinstance(record, dict) and isinstance(record.get("messages"), list):
        return [message_view(message) for message in record["messages"]]
    return None


def render_index(files: Sequence[Tuple[str, Sequence[Summary]]]) -> str:
    return _jinja_env.get_template("index.html").render(files=files)


def render_view(
    file: str, record_id: Any, record: Any, nav: Neighbors, *, found: bool = True
) -> str:
    """Render a record page; ``found=False`` shows the not-found notice."""
    return _jinja_env.get_template("view.html").render(
        found=found,
        file=file,
        record_id=record_id,
        record=record,
        messages=message_views(record),
        nav=nav,
    )


def render_error(message: str | None) -> str:
    return _jinja_env.get_template("error.html").render(message=message)
