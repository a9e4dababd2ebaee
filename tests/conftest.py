"""공유 pytest fixture 모음."""

import json
from unittest.mock import AsyncMock

import pytest

from brd_generator.config import Settings
from brd_generator.models import (
    AnalysisDepth,
    BrdSection,
    GenerationRequest,
    ProcessArea,
    SECTION_FIELDS,
    TargetSystem,
    Template,
)


def build_brd_payload() -> dict:
    """모델이 정상적으로 생성했다고 가정한 완전한 BRD JSON (camelCase)."""
    return {
        "tableOfContents": [
            {"section": "Executive Summary", "pageNumber": 1},
            {"section": "Functional Requirements", "pageNumber": 3},
        ],
        "executiveSummary": "Digital savings account opening with Aadhaar eKYC for Acme Bank.",
        "functionalRequirements": [
            {
                "id": "FR-001",
                "title": "Aadhaar eKYC verification",
                "description": "Verify customer identity through UIDAI eKYC",
                "priority": "Critical",
                "complexity": "High",
                "acceptanceCriteria": ["Given a valid Aadhaar When OTP is verified Then KYC is marked complete"],
                "userStories": [{"role": "Customer", "goal": "open an account online", "benefit": "avoid branch visits"}],
                "dependencies": ["FR-002"],
            },
            {
                "id": "FR-002",
                "title": "CKYC registry lookup",
                "description": "Fetch existing CKYC records",
                "priority": "High",
                "complexity": "Medium",
                "acceptanceCriteria": [],
                "userStories": [],
                "dependencies": [],
            },
        ],
        "nonFunctionalRequirements": [
            {
                "id": "NFR-001",
                "title": "Data localisation",
                "description": "All customer data stored in India",
                "category": "Compliance",
                "complianceDetails": {"regulations": ["RBI data localisation circular"], "requirements": "India-only DC"},
            }
        ],
        "integrationRequirements": [
            {
                "id": "IR-001",
                "title": "Finacle CBS account creation",
                "description": "Create CASA account in Finacle",
                "apiSpecifications": {"endpoints": "/accounts", "dataFormats": "JSON", "authentication": "mTLS"},
                "dataFlow": ["Onboarding portal", "API gateway", "Finacle"],
            }
        ],
        "businessProcessFlows": [
            {
                "id": "BPF-001",
                "processName": "Digital account opening",
                "currentState": "Branch based paper forms",
                "futureState": "Fully digital journey",
                "steps": [{"stepNumber": 1, "description": "Customer enters mobile number", "actor": "Customer"}],
            }
        ],
        "userInterfaceRequirements": [
            {
                "id": "UI-001",
                "screenName": "eKYC consent",
                "description": "Capture Aadhaar consent",
                "components": ["Consent checkbox", "OTP input"],
                "navigationFlow": "Welcome -> Consent -> OTP",
                "accessibility": "WCAG 2.1 AA",
                "responsiveness": "Mobile first",
            }
        ],
        "raciMatrix": [
            {"task": "UAT sign-off", "responsible": "QA Lead", "accountable": "Product Owner", "consulted": "Compliance", "informed": "Branch Ops"}
        ],
        "assumptions": ["UIDAI sandbox access is available"],
        "constraints": ["Go-live before RBI audit window"],
        "riskManagement": [
            {
                "id": "RISK-001",
                "category": "Compliance",
                "description": "Consent capture may not satisfy RBI KYC master direction",
                "probability": "Medium",
                "impact": "High",
                "mitigation": "Compliance review of consent text",
                "owner": "Compliance Officer",
            }
        ],
        "changelog": [
            {"version": "1.0", "date": "2026-01-15", "author": "BRD Generator", "changes": "Initial BRD"}
        ],
    }


def section_payload(section: BrdSection) -> dict:
    """멀티 호출 모드에서 섹션 하나가 반환할 JSON."""
    payload = build_brd_payload()
    return {field: payload[field] for field in SECTION_FIELDS[section]}


@pytest.fixture
def brd_payload():
    """완전한 BRD JSON 딕셔너리 fixture."""
    return build_brd_payload()


@pytest.fixture
def brd_json(brd_payload):
    """완전한 BRD JSON 문자열 fixture."""
    return json.dumps(brd_payload)


@pytest.fixture
def sample_request():
    """GenerationRequest fixture."""
    return GenerationRequest(
        transcript_content="PM: We need digital account opening with Aadhaar eKYC and CKYC lookup.",
        process_area=ProcessArea.ACCOUNT_OPENING,
        target_system=TargetSystem.FINACLE,
        template=Template.STANDARD,
        analysis_depth=AnalysisDepth.DETAILED,
        client_name="Acme Bank",
        team_name="Retail Digital",
    )


@pytest.fixture
def test_settings(tmp_path):
    """재시도 대기 없이 빠르게 동작하는 Settings fixture."""
    return Settings(
        llm_provider="gateway",
        genai_gateway_api_key="test-key",
        anthropic_api_key="anthropic-test-key",
        llm_max_retries=0,
        llm_retry_delay=0,
        llm_timeout_seconds=5,
        generation_mode="single",
        data_dir=str(tmp_path),
    )


@pytest.fixture
def mock_provider():
    """ModelProvider mock fixture."""
    provider = AsyncMock()
    provider.name = "mock"
    provider.call_model = AsyncMock(return_value="{}")
    return provider


@pytest.fixture
def temp_storage(tmp_path):
    """임시 디렉토리 기반 BrdStorage fixture."""
    from brd_generator.services.brd_storage import BrdStorage
    return BrdStorage(base_path=str(tmp_path))


@pytest.fixture
def llm_client(mock_provider, test_settings):
    """mock 공급자를 감싼 LLMClient fixture."""
    from brd_generator.services.llm_client import LLMClient
    return LLMClient(mock_provider, test_settings)


@pytest.fixture
def section_payloads():
    """섹션 그룹별 응답 JSON fixture."""
    return {section: section_payload(section) for section in BrdSection}
