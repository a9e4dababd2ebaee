"""
생성 작업 상태 관련 데이터 모델입니다.
BRD 레코드의 상태, 상태 전이 규칙, 저장되는 레코드 구조를 정의합니다.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from .brd import BrdDocument
from .common import CamelModel
from .request import GenerationRequest


class BrdStatus(str, Enum):
    """
    BRD 생성 상태 단계입니다.
    PENDING → IN_PROGRESS → COMPLETED | FAILED 순서로만 이동합니다.
    """

    PENDING = "pending"          # 대기 중
    IN_PROGRESS = "in_progress"  # 생성 중
    COMPLETED = "completed"      # 완료됨
    FAILED = "failed"            # 실패함

    @property
    def is_terminal(self) -> bool:
        return self in (BrdStatus.COMPLETED, BrdStatus.FAILED)


# 허용되는 상태 전이 (역방향 전이 없음)
ALLOWED_TRANSITIONS: dict[BrdStatus, frozenset[BrdStatus]] = {
    BrdStatus.PENDING: frozenset({BrdStatus.IN_PROGRESS, BrdStatus.FAILED}),
    BrdStatus.IN_PROGRESS: frozenset({BrdStatus.COMPLETED, BrdStatus.FAILED}),
    BrdStatus.COMPLETED: frozenset(),
    BrdStatus.FAILED: frozenset(),
}


def can_transition(current: BrdStatus, target: BrdStatus) -> bool:
    """현재 상태에서 target 상태로 이동할 수 있는지 확인합니다."""
    return target in ALLOWED_TRANSITIONS[current]


class GenerationMode(str, Enum):
    """LLM 호출 방식입니다."""

    SINGLE = "single"  # 전체 문서를 한 번에 생성
    MULTI = "multi"    # 섹션 그룹별 8회 순차 호출


class BrdRecord(CamelModel):
    """
    저장소에 보관되는 BRD 레코드 한 건입니다.
    클라이언트는 이 레코드의 status를 폴링하여 생성 결과를 확인합니다.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="BRD 고유 ID")
    client_name: str
    team_name: str
    process_area: str
    target_system: str
    template: str
    analysis_depth: str
    generation_mode: GenerationMode = GenerationMode.SINGLE
    status: BrdStatus = BrdStatus.PENDING
    content: Optional[BrdDocument] = None
    error_message: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_request(
        cls,
        request: GenerationRequest,
        mode: GenerationMode = GenerationMode.SINGLE,
        status: BrdStatus = BrdStatus.PENDING,
    ) -> "BrdRecord":
        """생성 요청으로부터 새 레코드를 만듭니다. 트랜스크립트 원문은 보관하지 않습니다."""
        return cls(
            client_name=request.client_name,
            team_name=request.team_name,
            process_area=request.process_area.value,
            target_system=request.target_system.value,
            template=request.template.value,
            analysis_depth=request.analysis_depth.value,
            generation_mode=mode,
            status=status,
        )
