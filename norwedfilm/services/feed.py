"""
RSS 2.0 feed of the published blog posts.
"""

import re
from email.utils import format_datetime
from datetime import datetime, timezone
from typing import Iterable
from xml.etree import ElementTree as ET

from norwedfilm.models.blog_post import BlogPost

ATOM_NS = "http://www.w3.org/2005/Atom"
DESCRIPTION_LENGTH = 240

ET.register_namespace("atom", ATOM_NS)

_TAG_RE = re.compile(r"<[^>]+>")


def strip_html(value: str | None) -> str:
    return _TAG_RE.sub("", value or "").strip()


def _rfc822(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value, usegmt=True)


def build_rss_feed(posts: Iterable[BlogPost], base_url: str) -> str:
    base_url = base_url.rstrip("/")
    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    ET.SubElement(channel, "title").text = "Norwed Film Blog"
    ET.SubElement(channel, "link").text = f"{base_url}/blog"
    ET.SubElement(channel, "description").text = "Latest posts from Norwed Film"
    ET.SubElement(channel, "language").text = "en"
    ET.SubElement(channel, "lastBuildDate").text = _rfc822(datetime.now(timezone.utc))
    ET.SubElement(
        channel,
        f"{{{ATOM_NS}}}link",
        {"href": f"{base_url}/feed.xml", "rel": "self", "type": "application/rss+xml"},
    )

    for post in posts:
        link = f"{base_url}/blog/{post.slug}"
        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = post.title
        ET.SubElement(item, "link").text = link
        ET.SubElement(item, "guid", {"isPermaLink": "true"}).text = link
        if post.excerpt:
            ET.SubElement(item, "description").text = post.excerpt
        elif post.content:
            ET.SubElement(item, "description").text = strip_html(post.content)[:DESCRIPTION_LENGTH]
        if post.author:
            ET.SubElement(item, "author").text = post.author
        if post.published_at:
            ET.SubElement(item, "pubDate").text = _rfc822(post.published_at)

    body = ET.tostring(rss, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
