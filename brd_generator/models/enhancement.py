"""요구사항 개선 제안 모델 (요청/응답 1회 동안만 존재하며 저장하지 않습니다)."""

from typing import Optional

from pydantic import Field

from .brd import FunctionalRequirement
from .common import CamelModel


class RequirementContext(CamelModel):
    """개선 제안 시 함께 전달하는 업무 맥락."""

    process_area: str = ""
    target_system: str = ""


class EnhancementSuggestion(CamelModel):
    """요구사항 ID 기준의 개선 제안 목록과 (선택) 개선된 요구사항 전체."""

    requirement_id: str
    suggestions: list[str] = Field(default_factory=list)
    enhanced_requirement: Optional[FunctionalRequirement] = None
