"""Prompt templates for delivery artifacts."""

from .delivery_prompts import (
    BRD_CONTENT_USER_PROMPT,
    IMPLEMENTATION_SYSTEM_PROMPT,
    TEST_CASE_SYSTEM_PROMPT,
)

__all__ = [
    "BRD_CONTENT_USER_PROMPT",
    "IMPLEMENTATION_SYSTEM_PROMPT",
    "TEST_CASE_SYSTEM_PROMPT",
]
