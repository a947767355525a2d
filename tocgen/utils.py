"""Helpers for parsing and serialising documents with BeautifulSoup."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

PARSER = "html.parser"


def normalize_nbsp(html: str) -> str:
    """Replace ``&nbsp;`` entities with plain spaces in raw markup."""
    return html.replace("&nbsp;", " ")


@contextmanager
def tolerant_parsing(html: str) -> Iterator[None]:
    """
    Swallow any error raised while building a document tree.

    Malformed markup must never fail the caller. The failure is logged as a
    warning and the block exits normally, leaving any assignment made inside
    it undone; see parse_document for how callers detect that.
    """
    try:
        yield
    except Exception as exc:
        logger.warning(
            f"Could not parse HTML ({len(html)} chars), falling back to the raw input: {exc}",
            exc_info=True,
        )


def parse_document(html: str) -> tuple[BeautifulSoup, bool]:
    """
    Parse ``html`` into a soup.

    Returns the soup and a flag telling whether parsing completed. When it
    did not, the soup is empty and callers should fall back to the raw input.
    """
    soup = BeautifulSoup("", PARSER)
    parsed = False
    with tolerant_parsing(html):
        soup = BeautifulSoup(html, PARSER)
        parsed = True
    return soup, parsed


def soup_to_html(soup: BeautifulSoup) -> str:
    """Serialise a soup back to HTML."""
    return str(soup)
