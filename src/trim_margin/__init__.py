from trim_margin.exceptions import InvalidMarker, MarginNotFound, TrimMarginError
from trim_margin.margin import (
    DEFAULT_MARKER,
    MarginTrimmer,
    trim_margin,
    trim_margin_with,
)

__all__ = [
    "DEFAULT_MARKER",
    "InvalidMarker",
    "MarginNotFound",
    "MarginTrimmer",
    "TrimMarginError",
    "trim_margin",
    "trim_margin_with",
]
