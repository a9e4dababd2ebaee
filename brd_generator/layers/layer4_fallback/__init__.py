"""Layer 4: Fallback - Deterministic minimal BRD content."""

from .fallback import minimal_document, minimal_section, required_defaults

__all__ = ["minimal_document", "minimal_section", "required_defaults"]
