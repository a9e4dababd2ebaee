"""
BRD 후속 산출물 데이터 모델입니다.
완성된 BRD로부터 구현 활동 계획과 테스트 케이스를 만들 때 사용합니다.
"""

from pydantic import Field

from .common import CamelModel


class Activity(CamelModel):
    """구현 활동 한 건 (설정/개발/연동 공통)."""

    title: str
    description: str = ""
    effort: str = ""  # 예: "2-3 days", "1 week"
    skills_required: list[str] = Field(default_factory=list)


class ImplementationPlan(CamelModel):
    """대상 시스템 기준 구현 활동 계획."""

    configuration_activities: list[Activity] = Field(default_factory=list)
    development_activities: list[Activity] = Field(default_factory=list)
    integration_activities: list[Activity] = Field(default_factory=list)


class TestCase(CamelModel):
    """기능/연동 테스트 케이스."""

    __test__ = False  # pytest 수집 대상 아님

    id: str
    title: str = ""
    description: str = ""
    priority: str = "Medium"
    preconditions: str = ""
    test_steps: list[str] = Field(default_factory=list)
    expected_result: str = ""


class PerformanceTestCase(CamelModel):
    """성능 테스트 케이스."""

    id: str
    title: str = ""
    description: str = ""
    load_conditions: str = ""
    acceptance_criteria: str = ""


class TestSuite(CamelModel):
    """BRD에서 도출한 테스트 케이스 묶음."""

    __test__ = False

    functional_tests: list[TestCase] = Field(default_factory=list)
    integration_tests: list[TestCase] = Field(default_factory=list)
    performance_tests: list[PerformanceTestCase] = Field(default_factory=list)
