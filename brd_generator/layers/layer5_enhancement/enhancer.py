"""Requirement enhancer - suggests improvements for one functional requirement."""

import logging
from typing import Optional

from brd_generator.config import get_settings
from brd_generator.exceptions import EnhancementError
from brd_generator.layers.base_generator import BaseGenerator
from brd_generator.models import (
    Complexity,
    EnhancementSuggestion,
    FunctionalRequirement,
    Priority,
    RequirementContext,
    enum_values,
)
from brd_generator.services.llm_client import LLMClient
from brd_generator.services.providers import create_provider

from .prompts import ENHANCEMENT_SYSTEM_PROMPT, ENHANCEMENT_USER_PROMPT

logger = logging.getLogger(__name__)


class RequirementEnhancer(BaseGenerator):
    """
    기능 요구사항 1건에 대한 개선 제안을 생성합니다.
    결과는 저장하지 않으며, 적용은 저장소의 apply_enhancement가 담당합니다.
    """

    _generator_name = "RequirementEnhancer"
    _error_cls = EnhancementError

    async def enhance(
        self,
        requirement: FunctionalRequirement,
        context: RequirementContext,
    ) -> EnhancementSuggestion:
        """
        개선 제안을 생성합니다.

        Args:
            requirement: 개선할 기능 요구사항
            context: 업무 영역 / 대상 시스템

        Returns:
            EnhancementSuggestion: 제안 목록과 개선된 요구사항

        Raises:
            EnhancementError: 호출, 파싱, 형식 검증 실패 또는 제안이 비어 있을 때
        """
        logger.info(f"[{self._generator_name}] 개선 제안 시작: {requirement.id}")

        user_prompt = ENHANCEMENT_USER_PROMPT.format(
            id=requirement.id,
            title=requirement.title,
            description=requirement.description,
            priority=requirement.priority,
            complexity=requirement.complexity,
            acceptance_criteria="; ".join(requirement.acceptance_criteria) or "None",
            process_area=context.process_area or "Not specified",
            target_system=context.target_system or "Not specified",
            priorities="/".join(enum_values(Priority)),
            complexities="/".join(enum_values(Complexity)),
        )

        data = await self._call_llm_json(ENHANCEMENT_SYSTEM_PROMPT, user_prompt)

        enhanced = data.get("enhancedRequirement")
        if isinstance(enhanced, dict):
            # 적용 시 같은 요구사항을 교체할 수 있도록 ID 고정
            data["enhancedRequirement"] = {**enhanced, "id": requirement.id}
        data["requirementId"] = requirement.id

        suggestion = self._validate(EnhancementSuggestion, data)
        if not suggestion.suggestions and suggestion.enhanced_requirement is None:
            raise EnhancementError(
                "개선 제안이 비어 있습니다",
                details={"requirement_id": requirement.id},
            )

        logger.info(
            f"[{self._generator_name}] 개선 제안 완료: {requirement.id} "
            f"(제안 {len(suggestion.suggestions)}개)"
        )
        return suggestion


# 싱글톤 인스턴스
_enhancer: Optional[RequirementEnhancer] = None


def get_enhancer() -> RequirementEnhancer:
    """RequirementEnhancer 인스턴스를 반환합니다."""
    global _enhancer
    if _enhancer is None:
        settings = get_settings()
        _enhancer = RequirementEnhancer(LLMClient(create_provider(settings), settings))
    return _enhancer
