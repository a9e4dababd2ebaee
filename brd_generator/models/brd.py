"""
BRD (Business Requirements Document) 데이터 모델입니다.
LLM이 생성한 JSON을 검증하고, 최종적으로 저장/반환되는 문서의 구조를 정의합니다.

주의:
- priority, complexity, category 등 분류 값은 모델이 만든 문자열을 그대로 보존합니다.
  (대소문자 변환이나 이름 변경을 하지 않습니다)
- 모든 목록 필드는 기본값이 빈 목록이라 직렬화 결과에서 절대 빠지지 않습니다.
- 같은 목록 안에서 ID가 중복되면 두 번째 항목부터 접미사(-2, -3 ...)를 붙입니다.
"""

import logging
from typing import Any, Optional

from pydantic import Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from brd_generator.exceptions import RequirementNotFoundError
from .common import CamelModel

logger = logging.getLogger(__name__)


class TableOfContentsEntry(CamelModel):
    """목차 항목입니다."""

    section: str
    page_number: int = 1


class UserStory(CamelModel):
    """As a [role], I want [goal] so that [benefit] 형식의 사용자 스토리."""

    role: str = ""
    goal: str = ""
    benefit: str = ""


class FunctionalRequirement(CamelModel):
    """기능 요구사항 (FR-*)."""

    id: str
    title: str = ""
    description: str = ""
    priority: str = "Medium"  # Critical / High / Medium / Low
    complexity: str = "Medium"  # High / Medium / Low
    acceptance_criteria: list[str] = Field(default_factory=list)
    user_stories: list[UserStory] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)


class ScalabilityMetrics(CamelModel):
    concurrent_users: str = ""
    transaction_volume: str = ""


class AvailabilityRequirements(CamelModel):
    uptime: str = ""
    disaster_recovery: str = ""


class SecurityStandards(CamelModel):
    encryption: str = ""
    audit_trails: str = ""
    access_controls: str = ""


class UsabilityStandards(CamelModel):
    response_time: str = ""
    user_experience: str = ""


class ComplianceDetails(CamelModel):
    regulations: list[str] = Field(default_factory=list)
    requirements: str = ""


class NonFunctionalRequirement(CamelModel):
    """비기능 요구사항 (NFR-*). 분류별 상세 블록은 선택 사항입니다."""

    id: str
    title: str = ""
    description: str = ""
    category: str = "Performance"
    scalability_metrics: Optional[ScalabilityMetrics] = None
    availability_requirements: Optional[AvailabilityRequirements] = None
    security_standards: Optional[SecurityStandards] = None
    usability_standards: Optional[UsabilityStandards] = None
    compliance_details: Optional[ComplianceDetails] = None


class ApiSpecifications(CamelModel):
    endpoints: str = ""
    data_formats: str = ""
    authentication: str = ""


class IntegrationRequirement(CamelModel):
    """연동 요구사항 (IR-*)."""

    id: str
    title: str = ""
    description: str = ""
    api_specifications: Optional[ApiSpecifications] = None
    data_flow: list[str] = Field(default_factory=list)


class ProcessStep(CamelModel):
    step_number: int = 1
    description: str = ""
    actor: str = ""
    decision: Optional[str] = None


class BusinessProcessFlow(CamelModel):
    """업무 프로세스 흐름 (현재 상태 vs 목표 상태)."""

    id: str
    process_name: str = ""
    current_state: str = ""
    future_state: str = ""
    steps: list[ProcessStep] = Field(default_factory=list)


class UIRequirement(CamelModel):
    """화면(UI) 요구사항."""

    id: str
    screen_name: str = ""
    description: str = ""
    components: list[str] = Field(default_factory=list)
    navigation_flow: str = ""
    accessibility: str = ""
    responsiveness: str = ""


class RaciEntry(CamelModel):
    """RACI 매트릭스 한 행."""

    task: str
    responsible: str = ""
    accountable: str = ""
    consulted: str = ""
    informed: str = ""


class Risk(CamelModel):
    """리스크 항목 (RISK-*)."""

    id: str
    category: str = "Technical"
    description: str = ""
    probability: str = "Medium"
    impact: str = "Medium"
    mitigation: str = ""
    owner: str = ""


class ChangelogEntry(CamelModel):
    version: str = "1.0"
    date: str = ""
    author: str = ""
    changes: str = ""


# ID 유일성을 보장해야 하는 목록 필드 (파이썬 속성명)
ID_LIST_FIELDS = (
    "functional_requirements",
    "non_functional_requirements",
    "integration_requirements",
    "business_process_flows",
    "user_interface_requirements",
    "risk_management",
)

# 목록 필드별 항목 모델 (항목 단위 검증에 사용)
LIST_ITEM_MODELS: dict[str, type[CamelModel]] = {
    "table_of_contents": TableOfContentsEntry,
    "functional_requirements": FunctionalRequirement,
    "non_functional_requirements": NonFunctionalRequirement,
    "integration_requirements": IntegrationRequirement,
    "business_process_flows": BusinessProcessFlow,
    "user_interface_requirements": UIRequirement,
    "raci_matrix": RaciEntry,
    "risk_management": Risk,
    "changelog": ChangelogEntry,
}

STRING_LIST_FIELDS = ("assumptions", "constraints")


class BrdDocument(CamelModel):
    """
    완성된 BRD 문서를 나타내는 메인 클래스입니다.
    요청마다 새로 합성되며, 기능 요구사항 1건 교체(apply_requirement) 외에는 수정되지 않습니다.
    """

    table_of_contents: list[TableOfContentsEntry] = Field(default_factory=list)
    executive_summary: str = ""
    functional_requirements: list[FunctionalRequirement] = Field(default_factory=list)
    non_functional_requirements: list[NonFunctionalRequirement] = Field(default_factory=list)
    integration_requirements: list[IntegrationRequirement] = Field(default_factory=list)
    business_process_flows: list[BusinessProcessFlow] = Field(default_factory=list)
    user_interface_requirements: list[UIRequirement] = Field(default_factory=list)
    raci_matrix: list[RaciEntry] = Field(default_factory=list)
    assumptions: list[str] = Field(default_factory=list)
    constraints: list[str] = Field(default_factory=list)
    risk_management: list[Risk] = Field(default_factory=list)
    changelog: list[ChangelogEntry] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _drop_invalid_items(cls, data: Any) -> Any:
        """
        목록 항목을 하나씩 검증하여 형식이 잘못된 항목만 버립니다.
        항목 하나 때문에 문서 전체가 폴백으로 바뀌지 않게 합니다.
        목록 자리에 목록이 아닌 값이 오면 그대로 두어 문서 검증이 실패하게 합니다.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for field_name, item_cls in LIST_ITEM_MODELS.items():
            for key in (to_camel(field_name), field_name):
                items = data.get(key)
                if not isinstance(items, list):
                    continue
                kept = []
                for index, item in enumerate(items):
                    try:
                        kept.append(item_cls.model_validate(item))
                    except ValidationError as e:
                        logger.warning(
                            f"[BrdDocument] {key}[{index}] 항목 제외: 형식 오류 {e.error_count()}건"
                        )
                data[key] = kept

        for field_name in STRING_LIST_FIELDS:
            items = data.get(field_name)
            if isinstance(items, list):
                data[field_name] = [item for item in items if isinstance(item, str)]
        return data

    @model_validator(mode="after")
    def _ensure_unique_ids(self) -> "BrdDocument":
        """목록별로 중복된 ID에 접미사를 붙여 유일하게 만듭니다."""
        for field_name in ID_LIST_FIELDS:
            seen: set[str] = set()
            for item in getattr(self, field_name):
                if item.id not in seen:
                    seen.add(item.id)
                    continue
                suffix = 2
                while f"{item.id}-{suffix}" in seen:
                    suffix += 1
                item.id = f"{item.id}-{suffix}"
                seen.add(item.id)
        return self

    def to_wire(self) -> dict:
        """프론트엔드/저장소로 내보내는 camelCase JSON 딕셔너리."""
        return self.model_dump(mode="json", by_alias=True)

    def apply_requirement(self, requirement: FunctionalRequirement) -> "BrdDocument":
        """
        같은 ID의 기능 요구사항을 교체한 새 문서를 반환합니다.

        Raises:
            RequirementNotFoundError: 해당 ID의 요구사항이 없을 때
        """
        index = next(
            (i for i, fr in enumerate(self.functional_requirements) if fr.id == requirement.id),
            None,
        )
        if index is None:
            raise RequirementNotFoundError(
                f"요구사항을 찾을 수 없습니다: {requirement.id}",
                details={"requirement_id": requirement.id},
            )

        updated = list(self.functional_requirements)
        updated[index] = requirement
        return self.model_copy(update={"functional_requirements": updated})

    def to_markdown(self) -> str:
        """BRD 내용을 마크다운 텍스트로 변환하는 함수"""
        lines = ["# Business Requirements Document", ""]

        if self.table_of_contents:
            lines.append("## Table of Contents")
            for entry in self.table_of_contents:
                lines.append(f"- {entry.section} .......... {entry.page_number}")
            lines.append("")

        lines.append("## Executive Summary")
        lines.append(self.executive_summary)
        lines.append("")

        if self.functional_requirements:
            lines.append("## Functional Requirements")
            lines.append("")
            for fr in self.functional_requirements:
                lines.append(f"### {fr.id}: {fr.title}")
                lines.append(f"**Priority**: {fr.priority} | **Complexity**: {fr.complexity}")
                lines.append("")
                lines.append(fr.description)
                lines.append("")
                if fr.acceptance_criteria:
                    lines.append("**Acceptance Criteria**:")
                    for ac in fr.acceptance_criteria:
                        lines.append(f"- [ ] {ac}")
                    lines.append("")
                for story in fr.user_stories:
                    lines.append(
                        f"> As a {story.role}, I want {story.goal} so that {story.benefit}"
                    )
                if fr.user_stories:
                    lines.append("")
                if fr.dependencies:
                    lines.append(f"**Dependencies**: {', '.join(fr.dependencies)}")
                    lines.append("")

        if self.non_functional_requirements:
            lines.append("## Non-Functional Requirements")
            lines.append("")
            for nfr in self.non_functional_requirements:
                lines.append(f"### {nfr.id}: {nfr.title} ({nfr.category})")
                lines.append(nfr.description)
                lines.append("")

        if self.integration_requirements:
            lines.append("## Integration Requirements")
            lines.append("")
            for ir in self.integration_requirements:
                lines.append(f"### {ir.id}: {ir.title}")
                lines.append(ir.description)
                if ir.api_specifications:
                    spec = ir.api_specifications
                    lines.append(
                        f"- Endpoints: {spec.endpoints} | Formats: {spec.data_formats} "
                        f"| Auth: {spec.authentication}"
                    )
                for step_no, step in enumerate(ir.data_flow, 1):
                    lines.append(f"{step_no}. {step}")
                lines.append("")

        if self.business_process_flows:
            lines.append("## Business Process Flows")
            lines.append("")
            for flow in self.business_process_flows:
                lines.append(f"### {flow.id}: {flow.process_name}")
                lines.append(f"**Current State**: {flow.current_state}")
                lines.append(f"**Future State**: {flow.future_state}")
                for step in flow.steps:
                    decision = f" (decision: {step.decision})" if step.decision else ""
                    lines.append(f"{step.step_number}. [{step.actor}] {step.description}{decision}")
                lines.append("")

        if self.user_interface_requirements:
            lines.append("## User Interface Requirements")
            lines.append("")
            for ui in self.user_interface_requirements:
                lines.append(f"### {ui.id}: {ui.screen_name}")
                lines.append(ui.description)
                if ui.components:
                    lines.append(f"**Components**: {', '.join(ui.components)}")
                lines.append("")

        if self.raci_matrix:
            lines.append("## RACI Matrix")
            lines.append("")
            lines.append("| Task | R | A | C | I |")
            lines.append("|------|---|---|---|---|")
            for row in self.raci_matrix:
                lines.append(
                    f"| {row.task} | {row.responsible} | {row.accountable} "
                    f"| {row.consulted} | {row.informed} |"
                )
            lines.append("")

        for heading, items in (("Assumptions", self.assumptions), ("Constraints", self.constraints)):
            if items:
                lines.append(f"## {heading}")
                for item in items:
                    lines.append(f"- {item}")
                lines.append("")

        if self.risk_management:
            lines.append("## Risk Management")
            lines.append("")
            for risk in self.risk_management:
                lines.append(
                    f"- **{risk.id}** [{risk.category}] {risk.description} "
                    f"(P: {risk.probability}, I: {risk.impact}) → {risk.mitigation} / {risk.owner}"
                )
            lines.append("")

        if self.changelog:
            lines.append("## Changelog")
            for entry in self.changelog:
                lines.append(f"- v{entry.version} ({entry.date}, {entry.author}): {entry.changes}")
            lines.append("")

        return "\n".join(lines)


# BRD 최상위 필드의 JSON 이름 (응답 검증과 복구에 사용)
BRD_FIELD_NAMES = tuple(to_camel(name) for name in BrdDocument.model_fields)
