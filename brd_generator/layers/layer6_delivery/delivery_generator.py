"""Delivery generator - converts a completed BRD to implementation activities and test cases."""

import json
import logging
from typing import Optional

from brd_generator.config import get_settings
from brd_generator.layers.base_generator import BaseGenerator
from brd_generator.models import BrdDocument, ImplementationPlan, TestSuite
from brd_generator.services.llm_client import LLMClient
from brd_generator.services.providers import create_provider

from .prompts import (
    BRD_CONTENT_USER_PROMPT,
    IMPLEMENTATION_SYSTEM_PROMPT,
    TEST_CASE_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)


class DeliveryGenerator(BaseGenerator):
    """완성된 BRD로부터 구현 활동 계획과 테스트 케이스를 생성합니다."""

    _generator_name = "DeliveryGenerator"

    def _user_prompt(self, document: BrdDocument, target_system: str) -> str:
        return BRD_CONTENT_USER_PROMPT.format(
            target_system=target_system,
            brd_json=json.dumps(document.to_wire(), ensure_ascii=False, indent=2),
        )

    async def implementation_plan(
        self,
        document: BrdDocument,
        target_system: str,
    ) -> ImplementationPlan:
        """
        대상 시스템 기준 구현 활동(설정/개발/연동)을 생성합니다.

        Raises:
            GenerationError: 호출, 파싱, 형식 검증 실패
        """
        logger.info(f"[{self._generator_name}] 구현 활동 생성 시작: {target_system}")

        data = await self._call_llm_json(
            IMPLEMENTATION_SYSTEM_PROMPT.format(target_system=target_system),
            self._user_prompt(document, target_system),
            section_name="implementation",
        )
        plan = self._validate(ImplementationPlan, data, section_name="implementation")

        logger.info(
            f"[{self._generator_name}] 구현 활동 생성 완료: "
            f"설정 {len(plan.configuration_activities)}, "
            f"개발 {len(plan.development_activities)}, "
            f"연동 {len(plan.integration_activities)}"
        )
        return plan

    async def test_cases(self, document: BrdDocument, target_system: str = "") -> TestSuite:
        """
        기능/연동/성능 테스트 케이스를 생성합니다.

        Raises:
            GenerationError: 호출, 파싱, 형식 검증 실패
        """
        logger.info(f"[{self._generator_name}] 테스트 케이스 생성 시작")

        data = await self._call_llm_json(
            TEST_CASE_SYSTEM_PROMPT,
            self._user_prompt(document, target_system or "Not specified"),
            section_name="test_cases",
        )
        suite = self._validate(TestSuite, data, section_name="test_cases")

        logger.info(
            f"[{self._generator_name}] 테스트 케이스 생성 완료: "
            f"기능 {len(suite.functional_tests)}, 연동 {len(suite.integration_tests)}, "
            f"성능 {len(suite.performance_tests)}"
        )
        return suite


# 싱글톤 인스턴스
_delivery_generator: Optional[DeliveryGenerator] = None


def get_delivery_generator() -> DeliveryGenerator:
    """DeliveryGenerator 인스턴스를 반환합니다."""
    global _delivery_generator
    if _delivery_generator is None:
        settings = get_settings()
        _delivery_generator = DeliveryGenerator(LLMClient(create_provider(settings), settings))
    return _delivery_generator
