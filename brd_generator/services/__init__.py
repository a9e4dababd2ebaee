"""Services for BRD generation system."""

from .providers import (
    ModelProvider,
    AnthropicProvider,
    GatewayProvider,
    LocalProvider,
    create_provider,
)
from .llm_client import LLMClient
from .brd_storage import BrdStorage, get_brd_storage
from .response_recovery import recover_document, recover_section, validate_fields
from .orchestrator import BrdOrchestrator, get_orchestrator

__all__ = [
    "ModelProvider",
    "AnthropicProvider",
    "GatewayProvider",
    "LocalProvider",
    "create_provider",
    "LLMClient",
    "BrdStorage",
    "get_brd_storage",
    "recover_document",
    "recover_section",
    "validate_fields",
    "BrdOrchestrator",
    "get_orchestrator",
]
