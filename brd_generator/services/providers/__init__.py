"""LLM provider adapters."""

from .base import ModelProvider
from .anthropic_provider import AnthropicProvider
from .gateway_provider import GatewayProvider
from .local_provider import LocalProvider
from .factory import PROVIDERS, create_provider

__all__ = [
    "ModelProvider",
    "AnthropicProvider",
    "GatewayProvider",
    "LocalProvider",
    "PROVIDERS",
    "create_provider",
]
