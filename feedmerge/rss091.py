"""Items of RSS 0.91 feeds and their parsing from XML."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

__all__ = ["Item", "ItemParseError", "parse_item", "parse_item_string"]


class ItemParseError(ValueError):
    """Raised when an ``<item>`` element is not a valid RSS 0.91 item."""


@dataclass
class Item:
    """A single RSS 0.91 feed item."""

    title: str = ""
    link: str = ""
    description: str = ""

    def is_empty(self) -> bool:
        """Return True if the required title or link is missing."""
        return not self.title or not self.link


_FIELDS = ("title", "link", "description")


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _has_text(text: str | None) -> bool:
    return bool(text and text.strip())


def parse_item(element: ET.Element) -> Item:
    """Build an :class:`Item` from an ``<item>`` element.

    Raises :class:`ItemParseError` on unknown or repeated child elements,
    stray text, or when title or link is missing.
    """
    if _local_name(element.tag) != "item":
        raise ItemParseError(
            f"expected an <item> element, got <{_local_name(element.tag)}>"
        )
    if len(element) == 0 and not _has_text(element.text):
        raise ItemParseError("item has no child elements")
    if _has_text(element.text):
        raise ItemParseError("expected element node, found text in item")

    item = Item()
    for child in element:
        if not isinstance(child.tag, str):
            # Comments and processing instructions are skipped.
            if _has_text(child.tail):
                raise ItemParseError("expected element node, found text in item")
            continue
        name = _local_name(child.tag)
        if name not in _FIELDS:
            raise ItemParseError(f"unexpected element within item: {name!r}")
        if getattr(item, name):
            raise ItemParseError(f"item already has a {name}")
        setattr(item, name, "".join(child.itertext()))
        if _has_text(child.tail):
            raise ItemParseError("expected element node, found text in item")

    if item.is_empty():
        raise ItemParseError("item needs both a title and a link")
    return item


def parse_item_string(source: str) -> Item:
    """Parse XML text whose root is an ``<item>`` element."""
    if not source:
        raise ItemParseError("empty XML source")
    try:
        root = ET.fromstring(source)
    except ET.ParseError as exc:
        raise ItemParseError(f"could not parse XML: {exc}") from exc
    return parse_item(root)