"""Layer 5: Enhancement - Functional requirement improvement suggestions."""

from .enhancer import RequirementEnhancer, get_enhancer

__all__ = ["RequirementEnhancer", "get_enhancer"]
