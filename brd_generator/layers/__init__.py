"""Processing layers for BRD generation."""

# Note: Import layers individually to avoid circular imports
# Use: from brd_generator.layers.layer1_prompting import build_prompt
# Use: from brd_generator.layers.layer2_extraction import extract_json
# Use: from brd_generator.layers.layer3_repair import repair_json
# Use: from brd_generator.layers.layer4_fallback import minimal_document

__all__ = [
    "layer1_prompting",
    "layer2_extraction",
    "layer3_repair",
    "layer4_fallback",
    "layer5_enhancement",
    "layer6_delivery",
]
