"""Prompt templates for requirement enhancement."""

from .enhancement_prompts import ENHANCEMENT_SYSTEM_PROMPT, ENHANCEMENT_USER_PROMPT

__all__ = ["ENHANCEMENT_SYSTEM_PROMPT", "ENHANCEMENT_USER_PROMPT"]
