"""LLM_PROVIDER 설정값으로 공급자 어댑터를 선택합니다."""

import logging
from typing import Optional

import httpx

from brd_generator.config import Settings
from brd_generator.exceptions import ConfigurationError

from .anthropic_provider import AnthropicProvider
from .base import ModelProvider
from .gateway_provider import GatewayProvider
from .local_provider import LocalProvider

logger = logging.getLogger(__name__)

PROVIDERS: dict[str, type[ModelProvider]] = {
    AnthropicProvider.name: AnthropicProvider,
    GatewayProvider.name: GatewayProvider,
    LocalProvider.name: LocalProvider,
}


def create_provider(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ModelProvider:
    """
    설정에 맞는 공급자 인스턴스를 생성합니다.

    Raises:
        ConfigurationError: 알 수 없는 공급자 이름
    """
    key = settings.llm_provider.strip().lower()
    provider_cls = PROVIDERS.get(key)
    if provider_cls is None:
        raise ConfigurationError(
            f"지원하지 않는 LLM_PROVIDER입니다: {settings.llm_provider}",
            details={"supported": sorted(PROVIDERS)},
        )

    logger.info(f"[ProviderFactory] 공급자 선택: {key}")
    return provider_cls(settings, transport=transport)
