"""
BRD 생성 흐름 전체를 관리하는 '지휘자' 역할의 오케스트레이터입니다.

처리 단계:
1. 프롬프트 조립 (Layer 1)
2. 공급자 호출 (LLMClient: 제한 시간 + 재시도)
3. 응답 추출 → 파싱/검증 → 복구 → 폴백 (Layer 2~4)
4. 저장소 상태 갱신 (PENDING → IN_PROGRESS → COMPLETED | FAILED)

생성 방식:
- single: 전체 문서를 한 번에 생성. 공급자/설정 오류는 작업 실패로 이어집니다.
- multi: 8개 섹션 그룹을 순차 호출. 섹션별 실패는 해당 섹션의 최소 내용으로 대체됩니다.
"""

import logging
from datetime import datetime
from typing import Any, Optional, Union

from brd_generator.config import Settings, get_settings
from brd_generator.exceptions import BRDGeneratorError, ConfigurationError
from brd_generator.layers.layer1_prompting import build_prompt, build_section_prompt
from brd_generator.layers.layer4_fallback import minimal_section
from brd_generator.models import (
    BrdDocument,
    BrdSection,
    BrdStatus,
    GenerationMode,
    GenerationRequest,
)

from .brd_storage import BrdStorage, get_brd_storage
from .llm_client import LLMClient
from .providers import ModelProvider, create_provider
from .response_recovery import recover_document, recover_section

logger = logging.getLogger(__name__)


class BrdOrchestrator:
    """
    BRD 생성 과정을 조율하는 클래스입니다.
    공급자는 생성자에서 명시적으로 주입받습니다 (전역 "현재 공급자" 없음).
    """

    def __init__(
        self,
        provider: ModelProvider,
        settings: Settings,
        storage: Optional[BrdStorage] = None,
    ):
        self.provider = provider
        self.settings = settings
        self.storage = storage or get_brd_storage()
        self.llm = LLMClient(provider, settings)

    def resolve_mode(self, mode: Optional[Union[GenerationMode, str]] = None) -> GenerationMode:
        """요청 값이 없으면 GENERATION_MODE 설정을 사용합니다."""
        value = mode if mode is not None else self.settings.generation_mode
        try:
            return GenerationMode(value)
        except ValueError as e:
            raise ConfigurationError(
                f"지원하지 않는 생성 방식입니다: {value}",
                details={"supported": [m.value for m in GenerationMode]},
            ) from e

    async def generate(
        self,
        request: GenerationRequest,
        mode: Optional[Union[GenerationMode, str]] = None,
    ) -> BrdDocument:
        """
        BRD 문서를 생성합니다.

        Args:
            request: 생성 요청
            mode: single / multi (None이면 설정값)

        Returns:
            BrdDocument: 항상 모든 필드가 채워진 문서

        Raises:
            ConfigurationError, ProviderError: single 모드에서 공급자 호출 실패
        """
        resolved = self.resolve_mode(mode)
        logger.info(
            f"[Orchestrator] 생성 시작: {request.client_name} / {request.process_area.value} "
            f"({resolved.value}, {self.provider.name})"
        )
        start_time = datetime.now()

        if resolved == GenerationMode.MULTI:
            document = await self._generate_multi(request)
        else:
            document = await self._generate_single(request)

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"[Orchestrator] 생성 완료: {elapsed:.1f}초, "
            f"기능 요구사항 {len(document.functional_requirements)}개"
        )
        return document

    async def _generate_single(self, request: GenerationRequest) -> BrdDocument:
        """전체 문서 1회 호출. JSON 수준 오류는 복구/폴백으로 흡수됩니다."""
        prompt = build_prompt(request)
        raw = await self.llm.complete(prompt, log_prefix="[Orchestrator:single]")
        return recover_document(raw, request)

    async def _generate_multi(self, request: GenerationRequest) -> BrdDocument:
        """섹션 그룹별 순차 호출 후 병합합니다."""
        merged: dict[str, Any] = {}
        failed_sections = []

        for section in BrdSection:
            log_prefix = f"[Orchestrator:{section.value}]"
            try:
                prompt = build_section_prompt(request, section)
                raw = await self.llm.complete(prompt, log_prefix=log_prefix)
                merged.update(recover_section(raw, request, section))
            except BRDGeneratorError as e:
                logger.warning(f"{log_prefix} 섹션 생성 실패, 기본값 사용: {e.message}")
                failed_sections.append(section.value)
                merged.update(minimal_section(request, section))
            except Exception as e:
                logger.error(f"{log_prefix} 예상치 못한 오류, 기본값 사용: {e}", exc_info=True)
                failed_sections.append(section.value)
                merged.update(minimal_section(request, section))

        if failed_sections:
            logger.warning(f"[Orchestrator] 기본값으로 대체된 섹션: {', '.join(failed_sections)}")

        return BrdDocument.model_validate(merged)

    async def run(
        self,
        record_id: str,
        request: GenerationRequest,
        mode: Optional[Union[GenerationMode, str]] = None,
    ) -> None:
        """
        저장된 레코드에 대해 생성을 실행하고 상태를 갱신합니다.
        HTTP 계층에서 asyncio.create_task로 실행되며 예외를 밖으로 던지지 않습니다.

        상태 갱신:
        - 시작: IN_PROGRESS (이미 취소된 레코드면 생성하지 않음)
        - 성공: COMPLETED + 문서
        - 실패: FAILED + 메시지
        """
        logger.info(f"[Orchestrator] 작업 시작 ID: {record_id}")

        started = await self.storage.update_status(record_id, BrdStatus.IN_PROGRESS)
        if not started:
            logger.warning(f"[Orchestrator] 작업을 시작할 수 없음 (취소 또는 없음): {record_id}")
            return

        try:
            document = await self.generate(request, mode)
        except BRDGeneratorError as e:
            logger.error(f"[Orchestrator] 작업 실패 {record_id}: [{e.error_code}] {e.message}")
            await self.storage.update_status(
                record_id, BrdStatus.FAILED, error_message=e.message
            )
            return
        except Exception as e:
            logger.error(f"[Orchestrator] 예상치 못한 오류 {record_id}: {e}", exc_info=True)
            await self.storage.update_status(
                record_id, BrdStatus.FAILED, error_message=f"BRD 생성 실패: {e}"
            )
            return

        await self.storage.update_status(record_id, BrdStatus.COMPLETED, content=document)
        logger.info(f"[Orchestrator] 작업 완료 ID: {record_id}")


# 싱글톤 인스턴스
_orchestrator: Optional[BrdOrchestrator] = None


def get_orchestrator() -> BrdOrchestrator:
    """설정으로 공급자를 한 번 만들어 BrdOrchestrator 싱글톤을 반환합니다."""
    global _orchestrator
    if _orchestrator is None:
        settings = get_settings()
        _orchestrator = BrdOrchestrator(create_provider(settings), settings, get_brd_storage())
    return _orchestrator
