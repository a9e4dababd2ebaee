"""Layer 2: Extraction - Free-form model output to JSON candidate."""

from .extractor import (
    extract_and_parse,
    extract_json,
    find_balanced_object,
    parse_object,
)

__all__ = [
    "extract_and_parse",
    "extract_json",
    "find_balanced_object",
    "parse_object",
]
