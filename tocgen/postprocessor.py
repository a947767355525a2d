# tocgen/postprocessor.py
"""
Postprocessor that adds heading ids and builds a table of contents.

Fits a rendering pipeline of ``(html, context) -> html`` steps:

- Returns the HTML with an ``id`` on every heading in range
- Stores the TOC markup in ``context["toc_html"]``
- Stores the heading records as dicts in ``context["toc"]``
- Reads per-render options from ``context["toc_options"]`` when present
"""

from typing import Any, Dict, List, Optional

from .generator import generate_toc


def toc_postprocessor(
    html: str,
    context: Dict[str, Any],
    options: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Annotate headings and publish the TOC through ``context``.

    Args:
        html: HTML string to process
        context: Rendering context, receives "toc_html" and "toc"
        options: TOC options; context["toc_options"] entries take precedence

    Returns:
        HTML with heading ids added
    """
    merged = dict(options or {})
    merged.update(context.get("toc_options") or {})

    result = generate_toc(html, merged)

    headings: List[Dict[str, Any]] = [record.as_dict() for record in result.headings]
    context["toc_html"] = result.toc_markup
    context["toc"] = headings
    return result.annotated_html if result.annotated_html is not None else html


def toc_postprocessor_default(html: str, context: Dict[str, Any]) -> str:
    """Default configuration: the project's TOC options with no per-call overrides."""
    return toc_postprocessor(html, context)
