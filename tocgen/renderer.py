# tocgen/renderer.py
"""
Render heading records as a nested list of links.

The list is built in a single pass with a "previous level" counter:

- a deeper record opens exactly one nested list, however large the jump
  (levels 1 -> 4 nest once, not three times)
- a shallower record closes one ``</li></ul>`` pair per level climbed
- a record at the same level starts a new ``<li>``; the previous item is
  closed implicitly, as HTML allows for list items

Heading text is inserted as-is. It was tag-stripped while scanning, but
characters such as ``&`` and ``<`` are not escaped here.
"""

from typing import Sequence

from .config import LIST_TYPES, TOCOptions
from .scanner import HeadingRecord


def _class_attr(css_class: str) -> str:
    return f' class="{css_class}"' if css_class else ""


def render_toc(records: Sequence[HeadingRecord], options: TOCOptions) -> str:
    """Return the TOC markup for ``records``, or an empty string if there are none."""
    if not records:
        return ""

    list_type = options.list_type if options.list_type in LIST_TYPES else "ul"
    close_pair = f"</li></{list_type}>"
    internal_list_attr = _class_attr(options.internal_list_class)
    item_attr = _class_attr(options.toc_item_class)
    link_attr = _class_attr(options.toc_link_class)

    parts = [f'<{list_type} class="{options.toc_class}">']
    previous_level = 1

    for record in records:
        level = record.level
        if level > previous_level:
            parts.append(f"<{list_type}{internal_list_attr}>")
        elif level < previous_level:
            parts.append(close_pair * (previous_level - level))

        parts.append(
            f'<li{item_attr}><a href="#{record.anchor}"{link_attr}>{record.text}</a>'
        )
        previous_level = level

    parts.append(close_pair * (previous_level - 1))
    parts.append(f"</{list_type}>")
    return "".join(parts)
