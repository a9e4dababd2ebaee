"""자체 호스팅 LLM (예: Ollama 호환 /generate) 어댑터."""

from typing import Any, Optional

from brd_generator.exceptions import ConfigurationError

from .base import ModelProvider

# 서버 구현마다 응답 필드명이 달라 순서대로 확인
_TEXT_FIELDS = ("response", "text", "content")


class LocalProvider(ModelProvider):
    """로컬 LLM 서버. API 키는 선택 사항입니다."""

    name = "local"

    @property
    def endpoint(self) -> str:
        return self.settings.llm_endpoint

    @property
    def model(self) -> str:
        return self.settings.llm_model

    @property
    def has_credentials(self) -> bool:
        return bool(self.endpoint)

    def _build_request(self, full_prompt: str, temperature: float) -> tuple[dict, dict]:
        if not self.endpoint:
            raise ConfigurationError("LLM_ENDPOINT가 설정되지 않았습니다")

        headers = {"Content-Type": "application/json"}
        if self.settings.local_llm_api_key:
            headers["Authorization"] = f"Bearer {self.settings.local_llm_api_key}"

        body = {
            "model": self.model,
            "prompt": full_prompt,
            "temperature": temperature,
        }
        return headers, body

    def _extract_text(self, data: Any) -> Optional[str]:
        if not isinstance(data, dict):
            return None
        for field in _TEXT_FIELDS:
            value = data.get(field)
            if isinstance(value, str) and value.strip():
                return value
        return None
