"""BRD generator: transcript to Business Requirements Document via LLM."""

__version__ = "1.0.0"
