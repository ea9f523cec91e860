"""Adapter that turns page markup into a flat stream of tag and text events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from .errors import MarkupError


class EventType(Enum):
    START_TAG = "start"
    SELF_CLOSING_TAG = "self_closing"
    TEXT = "text"


@dataclass(frozen=True)
class MarkupEvent:
    """A single tag or text token in document order."""

    type: EventType
    name: str = ""
    attrs: Tuple[Tuple[str, str], ...] = ()
    data: str = ""

    def attr(self, key: str, default: str = "") -> str:
        for attr_key, value in self.attrs:
            if attr_key == key:
                return value
        return default


def _token_size(event: MarkupEvent) -> int:
    if event.type is EventType.TEXT:
        return len(event.data)
    return len(event.name) + sum(len(k) + len(v) for k, v in event.attrs)


def _to_event(node) -> Optional[MarkupEvent]:
    if isinstance(node, Tag):
        kind = EventType.SELF_CLOSING_TAG if node.is_empty_element else EventType.START_TAG
        attrs = tuple((str(k), str(v)) for k, v in node.attrs.items())
        return MarkupEvent(kind, name=node.name, attrs=attrs)
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return MarkupEvent(EventType.TEXT, data=str(node))
    # Comments, doctypes, CDATA and processing instructions.
    return None


def iter_events(markup: Union[bytes, str], max_buffer: int = 0) -> Iterator[MarkupEvent]:
    """Yield tag and text events for ``markup`` in document order.

    ``max_buffer`` caps the size of any single token; exceeding it raises
    :class:`MarkupError`. Zero disables the cap. Exhausting the generator is
    the normal end of stream.
    """
    try:
        soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise MarkupError(f"tokenize: {exc}") from exc

    for node in soup.descendants:
        event = _to_event(node)
        if event is None:
            continue
        if max_buffer > 0 and _token_size(event) > max_buffer:
            raise MarkupError(
                f"tokenize: buffer exceeded ({_token_size(event)} > {max_buffer})"
            )
        yield event
