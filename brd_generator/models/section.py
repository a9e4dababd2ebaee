"""
멀티 호출 모드의 섹션 그룹 정의입니다.
BRD 문서를 8개의 독립 생성 단위로 나누고, 각 단위가 담당하는 최상위 JSON 필드를 지정합니다.
"""

from enum import Enum


class BrdSection(str, Enum):
    """독립적으로 생성되는 BRD 섹션 그룹."""

    SUMMARY = "summary"
    FUNCTIONAL = "functional"
    NON_FUNCTIONAL = "non_functional"
    INTEGRATION = "integration"
    PROCESS_FLOWS = "process_flows"
    USER_INTERFACE = "user_interface"
    GOVERNANCE = "governance"
    RISK = "risk"


# 섹션별로 담당하는 최상위 필드 (JSON 이름, 생성 순서대로)
SECTION_FIELDS: dict[BrdSection, tuple[str, ...]] = {
    BrdSection.SUMMARY: ("tableOfContents", "executiveSummary"),
    BrdSection.FUNCTIONAL: ("functionalRequirements",),
    BrdSection.NON_FUNCTIONAL: ("nonFunctionalRequirements",),
    BrdSection.INTEGRATION: ("integrationRequirements",),
    BrdSection.PROCESS_FLOWS: ("businessProcessFlows",),
    BrdSection.USER_INTERFACE: ("userInterfaceRequirements",),
    BrdSection.GOVERNANCE: ("raciMatrix", "assumptions", "constraints"),
    BrdSection.RISK: ("riskManagement", "changelog"),
}

# 사람이 읽는 섹션 이름 (프롬프트와 로그에 사용)
SECTION_TITLES: dict[BrdSection, str] = {
    BrdSection.SUMMARY: "Table of Contents and Executive Summary",
    BrdSection.FUNCTIONAL: "Functional Requirements",
    BrdSection.NON_FUNCTIONAL: "Non-Functional Requirements",
    BrdSection.INTEGRATION: "Integration Requirements",
    BrdSection.PROCESS_FLOWS: "Business Process Flows",
    BrdSection.USER_INTERFACE: "User Interface Requirements",
    BrdSection.GOVERNANCE: "RACI Matrix, Assumptions and Constraints",
    BrdSection.RISK: "Risk Management and Changelog",
}
