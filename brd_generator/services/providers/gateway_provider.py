"""사내 GenAI 게이트웨이 (completions API) 어댑터."""

from typing import Any, Optional

from brd_generator.exceptions import ConfigurationError

from .base import ModelProvider


class GatewayProvider(ModelProvider):
    """
    엔터프라이즈 GenAI 게이트웨이.
    API-Key 헤더와 Bearer 토큰을 같은 키로 함께 보내야 합니다.
    """

    name = "gateway"

    @property
    def endpoint(self) -> str:
        return self.settings.genai_gateway_endpoint

    @property
    def model(self) -> str:
        return self.settings.genai_gateway_model

    @property
    def has_credentials(self) -> bool:
        return bool(self.settings.genai_gateway_api_key)

    def _build_request(self, full_prompt: str, temperature: float) -> tuple[dict, dict]:
        api_key = self.settings.genai_gateway_api_key
        if not api_key:
            raise ConfigurationError("GENAI_GATEWAY_API_KEY가 설정되지 않았습니다")
        if not self.endpoint:
            raise ConfigurationError("GENAI_GATEWAY_ENDPOINT가 설정되지 않았습니다")

        headers = {
            "accept": "application/json",
            "API-Key": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        body = {
            "model": self.model,
            "prompt": full_prompt,
            "presence_penalty": 0,
            "seed": 25,
            "stop": None,
            "stream": False,
            "stream_options": None,
            "temperature": temperature,
            "top_p": 1,
        }
        return headers, body

    def _extract_text(self, data: Any) -> Optional[str]:
        try:
            return data["choices"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
