"""Layer 1: Prompting - Request to system/user prompt construction."""

from .prompt_builder import (
    BrdPrompt,
    COUNT_RANGES,
    build_prompt,
    build_section_prompt,
    count_range,
)

__all__ = [
    "BrdPrompt",
    "COUNT_RANGES",
    "build_prompt",
    "build_section_prompt",
    "count_range",
]
