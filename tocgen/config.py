# tocgen/config.py
"""
Options for table of contents generation.

Defaults can be overridden per project with a ``TOC_GENERATOR`` dict in the
Django settings, and per call with explicit options.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Union

from django.conf import settings

logger = logging.getLogger(__name__)

LIST_TYPES = ("ul", "ol")

DEFAULT_OPTIONS: dict[str, Any] = {
    "list_type": "ul",  # Type of the lists (ul or ol)
    "toc_class": "toc",  # Class for the outer TOC list
    "internal_list_class": "",  # Class for nested lists
    "toc_item_class": "",  # Class for each <li> in the TOC
    "toc_link_class": "",  # Class for each <a> in the TOC
    "heading_class": "",  # Class appended to each heading in the document
    "min_level": 1,  # Minimum heading level to include (h1)
    "max_level": 6,  # Maximum heading level to include (h6)
}


@dataclass(frozen=True)
class TOCOptions:
    list_type: str = "ul"
    toc_class: str = "toc"
    internal_list_class: str = ""
    toc_item_class: str = ""
    toc_link_class: str = ""
    heading_class: str = ""
    min_level: int = 1
    max_level: int = 6


def _coerce_level(name: str, value: Any) -> int:
    default = DEFAULT_OPTIONS[name]
    try:
        level = int(value)
    except (TypeError, ValueError):
        logger.debug(f"Invalid {name} {value!r}, using {default}")
        return default
    return max(1, min(level, 6))


def _coerce_class(name: str, value: Any) -> str:
    if value is None:
        return DEFAULT_OPTIONS[name]
    return str(value).strip()


def get_project_options() -> dict[str, Any]:
    """Return TOC option overrides declared in Django settings, if any."""
    if not settings.configured:
        return {}

    project_options = getattr(settings, "TOC_GENERATOR", None) or {}
    if not isinstance(project_options, Mapping):
        logger.debug("settings.TOC_GENERATOR is not a mapping, ignoring it")
        return {}
    return dict(project_options)


def build_options(options: Union[Mapping[str, Any], TOCOptions, None] = None, **overrides: Any) -> TOCOptions:
    """
    Merge defaults, project settings and explicit options into TOCOptions.

    Later sources win: defaults < settings.TOC_GENERATOR < ``options`` <
    keyword overrides. Unknown keys are ignored and invalid values fall back
    to their defaults, so building options never fails on bad values.
    """
    if isinstance(options, TOCOptions):
        if not overrides:
            return options
        options = {field.name: getattr(options, field.name) for field in fields(TOCOptions)}

    merged = dict(DEFAULT_OPTIONS)
    merged.update(get_project_options())
    merged.update(options or {})
    merged.update(overrides)

    unknown = set(merged) - set(DEFAULT_OPTIONS)
    if unknown:
        logger.debug(f"Ignoring unknown TOC options: {', '.join(sorted(unknown))}")

    list_type = merged["list_type"]
    if list_type not in LIST_TYPES:
        logger.debug(f"Unsupported list_type {list_type!r}, falling back to 'ul'")
        list_type = "ul"

    return TOCOptions(
        list_type=list_type,
        toc_class=_coerce_class("toc_class", merged["toc_class"]),
        internal_list_class=_coerce_class("internal_list_class", merged["internal_list_class"]),
        toc_item_class=_coerce_class("toc_item_class", merged["toc_item_class"]),
        toc_link_class=_coerce_class("toc_link_class", merged["toc_link_class"]),
        heading_class=_coerce_class("heading_class", merged["heading_class"]),
        min_level=_coerce_level("min_level", merged["min_level"]),
        max_level=_coerce_level("max_level", merged["max_level"]),
    )
