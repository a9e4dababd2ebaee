"""
Layer 4: 폴백 생성기
추출, 파싱, 복구가 모두 실패했을 때 사용할 최소 BRD를 결정적으로 만듭니다.

- 모든 목록 필드에 자리표시 항목을 정확히 1개씩 넣습니다.
- 요약에는 요청의 고객사, 팀, 업무 영역, 대상 시스템을 그대로 적어
  어떤 생성이 시도되었는지 알 수 있게 합니다.
- 예외를 발생시키지 않습니다.
"""

from datetime import date
from typing import Any, Optional

from brd_generator.models import (
    BrdDocument,
    BrdSection,
    BusinessProcessFlow,
    ChangelogEntry,
    Complexity,
    FunctionalRequirement,
    GenerationRequest,
    IntegrationRequirement,
    NfrCategory,
    NonFunctionalRequirement,
    Priority,
    ProcessStep,
    RaciEntry,
    Risk,
    RiskCategory,
    RiskLevel,
    SECTION_FIELDS,
    TableOfContentsEntry,
    UIRequirement,
    UserStory,
)

FALLBACK_AUTHOR = "BRD Generator"


def _executive_summary(request: GenerationRequest) -> str:
    return (
        f"Business requirements document generated for {request.client_name} - "
        f"{request.team_name}. Process Area: {request.process_area.value}, "
        f"Target System: {request.target_system.value}. "
        "Detailed content could not be generated automatically and should be "
        "completed from the source transcript."
    )


def minimal_document(request: GenerationRequest, today: Optional[date] = None) -> BrdDocument:
    """
    요청 정보만으로 스키마를 모두 채운 최소 BRD를 만듭니다.

    Args:
        request: BRD 생성 요청
        today: 변경 이력 날짜 (기본값 오늘)

    Returns:
        BrdDocument: 목록마다 자리표시 항목 1개를 가진 문서
    """
    changelog_date = (today or date.today()).isoformat()
    target = request.target_system.value

    return BrdDocument(
        table_of_contents=[TableOfContentsEntry(section="Executive Summary", page_number=1)],
        executive_summary=_executive_summary(request),
        functional_requirements=[
            FunctionalRequirement(
                id="FR-001",
                title="Core Functionality",
                description="Primary system functionality based on transcript requirements",
                priority=Priority.HIGH.value,
                complexity=Complexity.MEDIUM.value,
                acceptance_criteria=["System should meet basic functional requirements"],
                user_stories=[
                    UserStory(role="User", goal="use the system", benefit="complete business objectives")
                ],
            )
        ],
        non_functional_requirements=[
            NonFunctionalRequirement(
                id="NFR-001",
                title="Performance",
                description="System performance requirements",
                category=NfrCategory.PERFORMANCE.value,
            )
        ],
        integration_requirements=[
            IntegrationRequirement(
                id="IR-001",
                title="System Integration",
                description=f"Integration requirements for {target}",
            )
        ],
        business_process_flows=[
            BusinessProcessFlow(
                id="BPF-001",
                process_name=request.process_area.value,
                current_state="To be documented",
                future_state="To be documented",
                steps=[ProcessStep(step_number=1, description="To be documented", actor="Business User")],
            )
        ],
        user_interface_requirements=[
            UIRequirement(
                id="UI-001",
                screen_name="Main Screen",
                description="Primary user interface",
            )
        ],
        raci_matrix=[
            RaciEntry(
                task="Implementation",
                responsible="Development Team",
                accountable="Project Manager",
                consulted="Business Analyst",
                informed="Stakeholders",
            )
        ],
        assumptions=["Standard implementation assumptions"],
        constraints=["Regulatory and budget constraints"],
        risk_management=[
            Risk(
                id="RISK-001",
                category=RiskCategory.TECHNICAL.value,
                description="Requirements may be incomplete",
                probability=RiskLevel.MEDIUM.value,
                impact=RiskLevel.MEDIUM.value,
                mitigation="Review the document against the source transcript",
                owner="Business Analyst",
            )
        ],
        changelog=[
            ChangelogEntry(
                version="1.0",
                date=changelog_date,
                author=FALLBACK_AUTHOR,
                changes="Initial BRD (fallback content)",
            )
        ],
    )


def required_defaults(
    request: GenerationRequest,
    section: Optional[BrdSection] = None,
) -> dict[str, Any]:
    """
    복구 엔진에 넘길 필수 필드 기본값 맵 (JSON 이름 기준).
    section을 지정하면 해당 섹션 그룹이 담당하는 필드만 반환합니다.
    """
    wire = minimal_document(request).to_wire()
    if section is None:
        return wire
    return {field: wire[field] for field in SECTION_FIELDS[section]}


def minimal_section(request: GenerationRequest, section: BrdSection) -> dict[str, Any]:
    """멀티 호출 모드에서 실패한 섹션 그룹을 대신할 최소 내용."""
    return required_defaults(request, section)
