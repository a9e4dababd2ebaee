"""Prompt templates for BRD generation."""

from .brd_prompts import (
    BRD_SYSTEM_PROMPT,
    BRD_USER_PROMPT,
    FIELD_OUTLINES,
    FIELD_SCHEMAS,
    FULL_DOCUMENT_TASK,
    SECTION_TASK,
)

__all__ = [
    "BRD_SYSTEM_PROMPT",
    "BRD_USER_PROMPT",
    "FIELD_OUTLINES",
    "FIELD_SCHEMAS",
    "FULL_DOCUMENT_TASK",
    "SECTION_TASK",
]
