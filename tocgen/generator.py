# tocgen/generator.py

from __future__ import annotations

from typing import Any, Mapping, NamedTuple, Optional, Tuple, Union

from .config import TOCOptions, build_options
from .renderer import render_toc
from .scanner import HeadingRecord, scan_headings
from .slugs import SlugAllocator
from .utils import normalize_nbsp, parse_document, soup_to_html


class TOCResult(NamedTuple):
    toc_markup: str
    annotated_html: Optional[str]
    headings: Tuple[HeadingRecord, ...] = ()


def generate_toc(
    html: Optional[str],
    options: Union[Mapping[str, Any], TOCOptions, None] = None,
    **overrides: Any,
) -> TOCResult:
    """
    Build a table of contents for rendered HTML.

    Args:
        html: Rendered HTML (empty or None is passed through untouched)
        options: TOC options, merged over the defaults
        **overrides: Individual options, applied last

    Returns:
        TOCResult with the TOC markup, the HTML with heading ids added and
        the heading records the TOC was built from
    """
    if not html:
        return TOCResult(toc_markup="", annotated_html=html)

    toc_options = build_options(options, **overrides)
    html = normalize_nbsp(html)

    soup, parsed = parse_document(html)
    if not parsed:
        return TOCResult(toc_markup="", annotated_html=html)

    records = scan_headings(soup, toc_options, SlugAllocator())
    toc_markup = render_toc(records, toc_options)
    return TOCResult(
        toc_markup=toc_markup,
        annotated_html=soup_to_html(soup),
        headings=tuple(records),
    )


class TOCGenerator:
    """
    Object wrapper around :func:`generate_toc`.

    The document is processed once, on the first call to ``generate_toc()``,
    ``get_processed_html()`` or ``headings``.
    """

    def __init__(self, html: Optional[str], options: Union[Mapping[str, Any], TOCOptions, None] = None, **overrides: Any):
        self.html = html
        self.options: TOCOptions = build_options(options, **overrides)
        self._result: Optional[TOCResult] = None

    def _process(self) -> TOCResult:
        if self._result is None:
            self._result = generate_toc(self.html, self.options)
        return self._result

    def generate_toc(self) -> str:
        return self._process().toc_markup

    def get_processed_html(self) -> Optional[str]:
        return self._process().annotated_html

    @property
    def headings(self) -> Tuple[HeadingRecord, ...]:
        return self._process().headings
