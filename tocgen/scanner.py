# tocgen/scanner.py
"""
Find the headings of a document and prepare them for the table of contents.

Scanning walks the heading tags h1 through h6, one tag at a time. Every
heading inside the configured level range:

- keeps its existing ``id``, or receives one generated from its text
- optionally gets the configured ``heading_class`` appended to its classes
- is recorded with a level relative to the shallowest heading present, so a
  document that only uses h3 and h4 produces levels 1 and 2

Records follow the tag passes (all h1, then all h2, ...) rather than the
textual order of mixed levels in the document.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from django.core.exceptions import SuspiciousOperation
from django.utils.html import strip_tags

from .config import TOCOptions
from .slugs import SlugAllocator

logger = logging.getLogger(__name__)

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


@dataclass(frozen=True)
class HeadingRecord:
    level: int
    text: str
    anchor: str

    def as_dict(self) -> dict:
        return asdict(self)


def _heading_text(heading: Tag) -> str:
    text = heading.get_text()
    try:
        return strip_tags(text).strip()
    except SuspiciousOperation as exc:
        logger.debug(f"Could not strip tags from heading text, using it as-is: {exc}")
        return text.strip()


def _append_class(heading: Tag, css_class: str) -> None:
    existing = heading.get("class", [])
    if isinstance(existing, str):
        existing = existing.split()
    heading["class"] = " ".join(existing + [css_class]).strip()


def find_min_heading_level(soup: BeautifulSoup) -> int:
    """Return the smallest heading level present in the document (6 if none)."""
    for tag_name in HEADING_TAGS:
        if soup.find(tag_name) is not None:
            return int(tag_name[1])
    return 6


def scan_headings(
    soup: BeautifulSoup,
    options: TOCOptions,
    allocator: Optional[SlugAllocator] = None,
) -> List[HeadingRecord]:
    """
    Collect heading records and annotate the headings in ``soup`` in place.

    Args:
        soup: Parsed document, mutated in place
        options: TOC options (level range and heading_class are used)
        allocator: Slug allocator for this run (a fresh one by default)

    Returns:
        List of HeadingRecord in tag-pass order
    """
    allocator = allocator or SlugAllocator()
    min_found_level = find_min_heading_level(soup)
    records: List[HeadingRecord] = []

    for tag_name in HEADING_TAGS:
        level = int(tag_name[1])  # "h2" -> 2
        if level < options.min_level or level > options.max_level:
            continue

        for heading in soup.find_all(tag_name):
            text = _heading_text(heading)

            anchor = heading.get("id")
            if not anchor:
                anchor = allocator.allocate(text)
                heading["id"] = anchor

            if options.heading_class:
                _append_class(heading, options.heading_class)

            records.append(
                HeadingRecord(
                    level=level - min_found_level + 1,
                    text=text,
                    anchor=anchor,
                )
            )

    logger.debug(
        f"Scanned {len(records)} headings (shallowest level h{min_found_level})"
    )
    return records
