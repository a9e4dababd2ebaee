from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일)에서 설정값을 읽어옵니다.
    """

    # 사용할 LLM 공급자: anthropic(호스팅 API), gateway(사내 GenAI 게이트웨이), local(자체 호스팅 모델)
    llm_provider: str = "gateway"

    # Anthropic 호스팅 API 설정
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_base_url: str = "https://api.anthropic.com"
    anthropic_max_tokens: int = 8000

    # 사내 GenAI 게이트웨이 설정 (API-Key + Bearer 이중 헤더 인증)
    genai_gateway_api_key: str = ""
    genai_gateway_endpoint: str = "https://genai-sharedservice-americas.pwc.com/completions"
    genai_gateway_model: str = "bedrock.anthropic.claude-sonnet-4"

    # 로컬 LLM 설정
    llm_endpoint: str = "http://192.168.1.10:8000/generate"
    llm_model: str = "gemma3:latest"
    local_llm_api_key: str = ""

    # 생성 로직 설정
    generation_mode: str = "single"  # single: 한 번에 전체 생성, multi: 섹션별 8회 호출
    llm_temperature: float = 0.3
    llm_timeout_seconds: float = 300.0  # 호출 1회당 제한 시간 (5분)
    llm_max_retries: int = 2  # ProviderError 발생 시 재시도 횟수
    llm_retry_delay: float = 2.0  # 초기 재시도 대기 시간(초), 지수 백오프

    # 저장소 설정
    data_dir: str = "data"

    # 서버 설정
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = ["*"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
