"""Layer 3: Repair - Truncated JSON completion."""

from .json_repair import repair_json

__all__ = ["repair_json"]
