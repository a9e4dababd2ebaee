"""Anthropic Messages API 어댑터."""

from typing import Any, Optional

from brd_generator.exceptions import ConfigurationError

from .base import ModelProvider

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicProvider(ModelProvider):
    """호스팅 Anthropic API (POST {base}/v1/messages)."""

    name = "anthropic"

    @property
    def endpoint(self) -> str:
        return f"{self.settings.anthropic_base_url.rstrip('/')}/v1/messages"

    @property
    def model(self) -> str:
        return self.settings.anthropic_model

    @property
    def has_credentials(self) -> bool:
        return bool(self.settings.anthropic_api_key)

    def _build_request(self, full_prompt: str, temperature: float) -> tuple[dict, dict]:
        if not self.settings.anthropic_api_key:
            raise ConfigurationError("ANTHROPIC_API_KEY가 설정되지 않았습니다")

        headers = {
            "x-api-key": self.settings.anthropic_api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        body = {
            "model": self.model,
            "max_tokens": self.settings.anthropic_max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": full_prompt}],
        }
        return headers, body

    def _extract_text(self, data: Any) -> Optional[str]:
        try:
            block = data["content"][0]
        except (KeyError, IndexError, TypeError):
            return None
        if isinstance(block, dict) and block.get("type", "text") == "text":
            return block.get("text")
        return None
