"""Prompt builder for BRD generation.

Layer 1: 프롬프트 조립기
GenerationRequest를 받아 시스템 프롬프트 + 사용자 프롬프트를 결정적으로 만듭니다.

- build_prompt(): 단일 호출 모드용 전체 문서 프롬프트
- build_section_prompt(): 멀티 호출 모드용 섹션 그룹 프롬프트 (스키마 축소, 최소 개수 축소)

시스템 프롬프트에는 출력 스키마(필드명, 허용값, 목록별 최소 개수)와
인도 금융권 규제 맥락을 담고, 사용자 프롬프트에는 요청의 모든 필드를 담습니다.
부수 효과가 없는 순수 문자열 조립입니다.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from brd_generator.models import (
    AnalysisDepth,
    BRD_FIELD_NAMES,
    BrdSection,
    Complexity,
    GenerationRequest,
    NfrCategory,
    Priority,
    RiskCategory,
    RiskLevel,
    SECTION_FIELDS,
    SECTION_TITLES,
    enum_values,
)

from .prompts import (
    BRD_SYSTEM_PROMPT,
    BRD_USER_PROMPT,
    FIELD_OUTLINES,
    FIELD_SCHEMAS,
    FULL_DOCUMENT_TASK,
    SECTION_TASK,
)

# 분석 깊이 "detailed" 기준 목록별 (최소, 최대) 개수
COUNT_RANGES: dict[str, tuple[int, int]] = {
    "tableOfContents": (12, 14),
    "functionalRequirements": (8, 12),
    "nonFunctionalRequirements": (6, 8),
    "integrationRequirements": (4, 6),
    "businessProcessFlows": (3, 5),
    "userInterfaceRequirements": (5, 8),
    "raciMatrix": (8, 12),
    "assumptions": (8, 10),
    "constraints": (6, 8),
    "riskManagement": (6, 8),
    "changelog": (1, 1),
}


@dataclass(frozen=True)
class BrdPrompt:
    """조립된 프롬프트 한 쌍."""

    system_prompt: str
    user_prompt: str

    @property
    def full_prompt(self) -> str:
        """단일 문자열만 받는 공급자를 위한 결합 프롬프트."""
        return f"{self.system_prompt}\n\nUser: {self.user_prompt}"


def count_range(field: str, depth: AnalysisDepth, section_mode: bool = False) -> tuple[int, int]:
    """
    분석 깊이에 따라 목록 최소/최대 개수를 계산합니다.

    - basic: 기준치의 절반
    - detailed: 기준치 그대로
    - comprehensive: 최대치 기준
    섹션 모드에서는 호출 1회의 출력 길이를 줄이기 위해 최소 개수를 한 단계 더 낮춥니다.
    """
    low, high = COUNT_RANGES[field]
    if depth == AnalysisDepth.BASIC:
        low, high = max(1, low // 2), max(1, high // 2)
    elif depth == AnalysisDepth.COMPREHENSIVE:
        low = high

    if section_mode:
        low = max(1, (low * 3) // 4)
    return low, max(low, high)


def _format_count(low: int, high: int) -> str:
    if low == high:
        return f"minimum {low}"
    return f"minimum {low}-{high}"


def _schema_examples(today: str) -> dict:
    return {
        "priority_example": Priority.HIGH.value,
        "complexity_example": Complexity.MEDIUM.value,
        "nfr_example": NfrCategory.PERFORMANCE.value,
        "risk_category_example": RiskCategory.TECHNICAL.value,
        "risk_level_example": RiskLevel.MEDIUM.value,
        "today": today,
    }


def _build_system_prompt(
    fields: tuple[str, ...],
    depth: AnalysisDepth,
    section_mode: bool,
    today: str,
) -> str:
    outline_lines = []
    for number, field in enumerate(fields, 1):
        outline = FIELD_OUTLINES[field]
        if field in COUNT_RANGES:
            outline = outline.format(count=_format_count(*count_range(field, depth, section_mode)))
        outline_lines.append(f"{number}. {outline}")

    examples = _schema_examples(today)
    schema = ",\n".join(FIELD_SCHEMAS[field].format(**examples) for field in fields)

    return BRD_SYSTEM_PROMPT.format(
        section_outline="\n".join(outline_lines),
        priorities="/".join(enum_values(Priority)),
        complexities="/".join(enum_values(Complexity)),
        nfr_categories="/".join(enum_values(NfrCategory)),
        risk_categories="/".join(enum_values(RiskCategory)),
        risk_levels="/".join(enum_values(RiskLevel)),
        schema=schema,
    )


def _build_user_prompt(request: GenerationRequest, task: str) -> str:
    return BRD_USER_PROMPT.format(
        client_name=request.client_name,
        team_name=request.team_name,
        process_area=request.process_area.value,
        target_system=request.target_system.value,
        template=request.template.value,
        analysis_depth=request.analysis_depth.value,
        transcript=request.transcript_content,
        task=task,
    )


def build_prompt(request: GenerationRequest, today: Optional[date] = None) -> BrdPrompt:
    """
    전체 BRD를 한 번에 생성하기 위한 프롬프트를 만듭니다.

    Args:
        request: BRD 생성 요청
        today: 변경 이력 예시에 들어갈 날짜 (테스트 고정용, 기본값 오늘)

    Returns:
        BrdPrompt: 시스템/사용자 프롬프트
    """
    today_str = (today or date.today()).isoformat()
    system_prompt = _build_system_prompt(
        BRD_FIELD_NAMES, request.analysis_depth, section_mode=False, today=today_str
    )
    return BrdPrompt(system_prompt, _build_user_prompt(request, FULL_DOCUMENT_TASK))


def build_section_prompt(
    request: GenerationRequest,
    section: BrdSection,
    today: Optional[date] = None,
) -> BrdPrompt:
    """멀티 호출 모드에서 섹션 그룹 하나만 생성하기 위한 프롬프트를 만듭니다."""
    today_str = (today or date.today()).isoformat()
    fields = SECTION_FIELDS[section]
    system_prompt = _build_system_prompt(
        fields, request.analysis_depth, section_mode=True, today=today_str
    )
    task = SECTION_TASK.format(
        section_title=SECTION_TITLES[section],
        keys=", ".join(f'"{field}"' for field in fields),
    )
    return BrdPrompt(system_prompt, _build_user_prompt(request, task))
