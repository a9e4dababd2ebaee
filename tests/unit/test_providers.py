"""Provider adapter unit tests.

Wire-level checks with httpx.MockTransport: endpoint, auth headers, request body,
response text location and error mapping for each provider.
"""

import json

import httpx
import pytest

from brd_generator.config import Settings
from brd_generator.exceptions import ConfigurationError, ProviderError
from brd_generator.services.providers import (
    AnthropicProvider,
    GatewayProvider,
    LocalProvider,
    create_provider,
)


class RecordingHandler:
    """요청을 기록하고 정해진 응답을 돌려주는 MockTransport 핸들러."""

    def __init__(self, status_code: int = 200, json_body=None, text: str = None):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


def make_settings(**overrides) -> Settings:
    values = {
        "anthropic_api_key": "sk-ant-test",
        "genai_gateway_api_key": "gw-test",
        "llm_timeout_seconds": 5,
    }
    values.update(overrides)
    return Settings(**values)


class TestGatewayProvider:
    async def test_request_shape_and_response_text(self):
        handler = RecordingHandler(json_body={"choices": [{"text": '{"ok": true}'}]})
        provider = GatewayProvider(make_settings(), transport=httpx.MockTransport(handler))

        text = await provider.call_model("PROMPT", 0.3)

        assert text == '{"ok": true}'
        request = handler.requests[0]
        assert str(request.url) == "https://genai-sharedservice-americas.pwc.com/completions"
        assert request.headers["API-Key"] == "gw-test"
        assert request.headers["Authorization"] == "Bearer gw-test"
        assert handler.last_body == {
            "model": "bedrock.anthropic.claude-sonnet-4",
            "prompt": "PROMPT",
            "presence_penalty": 0,
            "seed": 25,
            "stop": None,
            "stream": False,
            "stream_options": None,
            "temperature": 0.3,
            "top_p": 1,
        }

    async def test_missing_key_raises_before_network(self):
        handler = RecordingHandler(json_body={"choices": [{"text": "x"}]})
        provider = GatewayProvider(
            make_settings(genai_gateway_api_key=""),
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(ConfigurationError):
            await provider.call_model("PROMPT", 0.3)
        assert handler.requests == []

    async def test_non_2xx_carries_status_code(self):
        handler = RecordingHandler(status_code=503, json_body={"error": "unavailable"})
        provider = GatewayProvider(make_settings(), transport=httpx.MockTransport(handler))

        with pytest.raises(ProviderError) as exc_info:
            await provider.call_model("PROMPT", 0.3)
        assert exc_info.value.status_code == 503

    async def test_non_json_body(self):
        handler = RecordingHandler(text="<html>gateway timeout</html>")
        provider = GatewayProvider(make_settings(), transport=httpx.MockTransport(handler))

        with pytest.raises(ProviderError):
            await provider.call_model("PROMPT", 0.3)

    async def test_empty_text(self):
        handler = RecordingHandler(json_body={"choices": [{"text": "   "}]})
        provider = GatewayProvider(make_settings(), transport=httpx.MockTransport(handler))

        with pytest.raises(ProviderError):
            await provider.call_model("PROMPT", 0.3)

    async def test_missing_choices(self):
        handler = RecordingHandler(json_body={"choices": []})
        provider = GatewayProvider(make_settings(), transport=httpx.MockTransport(handler))

        with pytest.raises(ProviderError):
            await provider.call_model("PROMPT", 0.3)

    async def test_transport_error(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider = GatewayProvider(make_settings(), transport=httpx.MockTransport(refuse))

        with pytest.raises(ProviderError) as exc_info:
            await provider.call_model("PROMPT", 0.3)
        assert exc_info.value.status_code is None


class TestAnthropicProvider:
    async def test_request_shape_and_response_text(self):
        handler = RecordingHandler(json_body={"content": [{"type": "text", "text": "hello"}]})
        provider = AnthropicProvider(
            make_settings(anthropic_base_url="https://api.anthropic.com/"),
            transport=httpx.MockTransport(handler),
        )

        assert await provider.call_model("PROMPT", 0.2) == "hello"

        request = handler.requests[0]
        assert str(request.url) == "https://api.anthropic.com/v1/messages"
        assert request.headers["x-api-key"] == "sk-ant-test"
        assert request.headers["anthropic-version"] == "2023-06-01"
        body = handler.last_body
        assert body["model"] == "claude-sonnet-4-20250514"
        assert body["max_tokens"] == 8000
        assert body["temperature"] == 0.2
        assert body["messages"] == [{"role": "user", "content": "PROMPT"}]

    async def test_missing_key(self):
        provider = AnthropicProvider(make_settings(anthropic_api_key=""))
        with pytest.raises(ConfigurationError):
            await provider.call_model("PROMPT", 0.2)

    async def test_unauthorized(self):
        handler = RecordingHandler(status_code=401, json_body={"error": {"type": "authentication_error"}})
        provider = AnthropicProvider(make_settings(), transport=httpx.MockTransport(handler))

        with pytest.raises(ProviderError) as exc_info:
            await provider.call_model("PROMPT", 0.2)
        assert exc_info.value.status_code == 401


class TestLocalProvider:
    async def test_request_without_key(self):
        handler = RecordingHandler(json_body={"response": "local text"})
        provider = LocalProvider(make_settings(), transport=httpx.MockTransport(handler))

        assert await provider.call_model("PROMPT", 0.3) == "local text"

        request = handler.requests[0]
        assert str(request.url) == "http://192.168.1.10:8000/generate"
        assert "Authorization" not in request.headers
        assert handler.last_body == {"model": "gemma3:latest", "prompt": "PROMPT", "temperature": 0.3}

    async def test_bearer_when_key_configured(self):
        handler = RecordingHandler(json_body={"response": "ok"})
        provider = LocalProvider(
            make_settings(local_llm_api_key="local-key"),
            transport=httpx.MockTransport(handler),
        )

        await provider.call_model("PROMPT", 0.3)
        assert handler.requests[0].headers["Authorization"] == "Bearer local-key"

    @pytest.mark.parametrize(
        "body, expected",
        [
            ({"response": "from response"}, "from response"),
            ({"response": "", "text": "from text"}, "from text"),
            ({"content": "from content"}, "from content"),
        ],
    )
    async def test_text_field_order(self, body, expected):
        handler = RecordingHandler(json_body=body)
        provider = LocalProvider(make_settings(), transport=httpx.MockTransport(handler))
        assert await provider.call_model("PROMPT", 0.3) == expected

    async def test_no_text_field(self):
        handler = RecordingHandler(json_body={"done": True})
        provider = LocalProvider(make_settings(), transport=httpx.MockTransport(handler))
        with pytest.raises(ProviderError):
            await provider.call_model("PROMPT", 0.3)


class TestFactory:
    @pytest.mark.parametrize(
        "name, provider_cls",
        [
            ("anthropic", AnthropicProvider),
            ("gateway", GatewayProvider),
            ("local", LocalProvider),
            (" Gateway ", GatewayProvider),
        ],
    )
    def test_create_provider(self, name, provider_cls):
        assert isinstance(create_provider(make_settings(llm_provider=name)), provider_cls)

    def test_unknown_provider(self):
        with pytest.raises(ConfigurationError):
            create_provider(make_settings(llm_provider="openai"))

    def test_describe_hides_secrets(self):
        info = create_provider(make_settings(llm_provider="gateway")).describe()
        assert info == {
            "provider": "gateway",
            "endpoint": "https://genai-sharedservice-americas.pwc.com/completions",
            "model": "bedrock.anthropic.claude-sonnet-4",
            "configured": True,
        }
        assert "gw-test" not in json.dumps(info)
