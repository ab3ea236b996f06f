"""List, sort, restore and empty a freedesktop-style trash bin, plus a fuzzy substring matcher."""

__version__ = "0.1.0"
__all__ = [
    "buttonbar",
    "config",
    "fuzzer",
    "info",
    "item",
    "manager",
    "popover",
    "settings",
    "sortmode",
]