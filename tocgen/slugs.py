# tocgen/slugs.py

import re
from typing import Iterable, Optional, Set

from django.utils.text import slugify

# Anything that is not a letter, a digit or a plain space. "_" is part of \w
# but counts as punctuation here.
_PUNCTUATION_RE = re.compile(r"[^\w ]|_")

_NBSP_VARIANTS = ("&nbsp;", "\u00a0", "\u200c")


class SlugAllocator:
    """
    Hand out heading anchors that are unique within one document.

    Duplicate slugs get a numeric suffix: "intro", "intro-1", "intro-2", ...
    One allocator is meant to live for a single processing run.
    """

    def __init__(self, used: Optional[Iterable[str]] = None):
        self._used: Set[str] = set(used or ())

    @property
    def used(self) -> frozenset:
        return frozenset(self._used)

    def __contains__(self, slug: str) -> bool:
        return slug in self._used

    def allocate(self, text: str) -> str:
        value = _PUNCTUATION_RE.sub("", text.strip())
        for variant in _NBSP_VARIANTS:
            value = value.replace(variant, " ")

        base = slugify(value, allow_unicode=True)

        slug = base
        count = 1
        while slug in self._used:
            slug = f"{base}-{count}"
            count += 1

        self._used.add(slug)
        return slug
