# tests/services/test_feed.py

from datetime import datetime, timezone
from types import SimpleNamespace
from xml.etree import ElementTree as ET

from norwedfilm.services.feed import DESCRIPTION_LENGTH, build_rss_feed, strip_html


def _post(**overrides):
    data = dict(
        title="Fjord wedding",
        slug="fjord-wedding",
        excerpt=None,
        content=None,
        author=None,
        published_at=datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc),
    )
    data.update(overrides)
    return SimpleNamespace(**data)


def test_feed_items():
    xml = build_rss_feed(
        [_post(excerpt="Short summary", author="Nora")], "https://norwedfilm.no/"
    )

    root = ET.fromstring(xml.split("\n", 1)[1])
    item = root.find("channel/item")
    assert root.tag == "rss"
    assert item.find("link").text == "https://norwedfilm.no/blog/fjord-wedding"
    assert item.find("description").text == "Short summary"
    assert item.find("author").text == "Nora"
    assert item.find("pubDate").text == "Sun, 01 Jun 2025 12:00:00 GMT"


def test_description_falls_back_to_plain_content():
    xml = build_rss_feed([_post(content="<p>" + "a" * 500 + "</p>")], "https://norwedfilm.no")

    root = ET.fromstring(xml.split("\n", 1)[1])
    assert root.find("channel/item/description").text == "a" * DESCRIPTION_LENGTH


def test_empty_feed_is_valid():
    xml = build_rss_feed([], "https://norwedfilm.no")

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    root = ET.fromstring(xml.split("\n", 1)[1])
    assert root.find("channel/item") is None


def test_strip_html():
    assert strip_html("<h2>Hello</h2> <b>world</b>") == "Hello world"
    assert strip_html(None) == ""
