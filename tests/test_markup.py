import pytest

from recon.errors import MarkupError
from recon.markup import EventType, MarkupEvent, iter_events


def test_iter_events_in_document_order():
    html = b'<html><head><title>Hello</title><meta property="og:title" content="A"></head></html>'
    events = list(iter_events(html))

    names = [(e.type, e.name or e.data) for e in events]
    assert names == [
        (EventType.START_TAG, "html"),
        (EventType.START_TAG, "head"),
        (EventType.START_TAG, "title"),
        (EventType.TEXT, "Hello"),
        (EventType.SELF_CLOSING_TAG, "meta"),
    ]


def test_iter_events_keeps_attribute_order_and_values():
    events = list(iter_events('<img class="a b" src="/x.png" alt="X">'))
    img = events[0]
    assert img.type is EventType.SELF_CLOSING_TAG
    assert img.attrs == (("class", "a b"), ("src", "/x.png"), ("alt", "X"))
    assert img.attr("src") == "/x.png"
    assert img.attr("missing") == ""


def test_iter_events_skips_comments_and_doctype():
    html = "<!DOCTYPE html><!-- hidden --><p>shown</p>"
    events = list(iter_events(html))
    assert [e.data for e in events if e.type is EventType.TEXT] == ["shown"]


def test_iter_events_buffer_exceeded():
    html = "<title>" + "x" * 100 + "</title>"
    with pytest.raises(MarkupError, match="buffer exceeded"):
        list(iter_events(html, max_buffer=50))


def test_iter_events_zero_buffer_is_unbounded():
    html = "<title>" + "x" * 10_000 + "</title>"
    events = list(iter_events(html, max_buffer=0))
    assert events[-1].data == "x" * 10_000


def test_markup_event_attr_returns_first_match():
    event = MarkupEvent(EventType.START_TAG, "meta", (("name", "a"), ("name", "b")))
    assert event.attr("name") == "a"
