from .config import DEFAULT_OPTIONS, TOCOptions, build_options
from .generator import TOCGenerator, TOCResult, generate_toc
from .postprocessor import toc_postprocessor, toc_postprocessor_default
from .renderer import render_toc
from .scanner import HeadingRecord, find_min_heading_level, scan_headings
from .slugs import SlugAllocator

__all__ = (
    "DEFAULT_OPTIONS",
    "HeadingRecord",
    "SlugAllocator",
    "TOCGenerator",
    "TOCOptions",
    "TOCResult",
    "build_options",
    "find_min_heading_level",
    "generate_toc",
    "render_toc",
    "scan_headings",
    "toc_postprocessor",
    "toc_postprocessor_default",
)
