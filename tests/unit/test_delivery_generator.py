"""DeliveryGenerator unit tests."""

import json

import pytest

from brd_generator.exceptions import GenerationError
from brd_generator.layers.layer6_delivery import DeliveryGenerator
from brd_generator.models import BrdDocument


@pytest.fixture
def generator(llm_client):
    return DeliveryGenerator(llm_client)


@pytest.fixture
def document(brd_payload):
    return BrdDocument.model_validate(brd_payload)


async def test_implementation_plan(generator, mock_provider, document):
    mock_provider.call_model.return_value = json.dumps(
        {
            "configurationActivities": [
                {"title": "Configure CASA product", "effort": "2-3 days", "skillsRequired": ["Finacle"]}
            ],
            "developmentActivities": [{"title": "eKYC adapter", "description": "UIDAI client"}],
            "integrationActivities": [],
        }
    )

    plan = await generator.implementation_plan(document, "finacle")

    assert plan.configuration_activities[0].skills_required == ["Finacle"]
    assert plan.development_activities[0].title == "eKYC adapter"
    assert plan.integration_activities == []

    full_prompt = mock_provider.call_model.await_args.args[0]
    assert "finacle" in full_prompt
    assert "Aadhaar eKYC verification" in full_prompt


async def test_test_cases(generator, mock_provider, document):
    mock_provider.call_model.return_value = json.dumps(
        {
            "functionalTests": [
                {
                    "id": "TC-001",
                    "title": "eKYC happy path",
                    "priority": "High",
                    "testSteps": ["Enter Aadhaar", "Enter OTP"],
                    "expectedResult": "KYC complete",
                }
            ],
            "performanceTests": [{"id": "PT-001", "loadConditions": "500 concurrent users"}],
        }
    )

    suite = await generator.test_cases(document)

    assert suite.functional_tests[0].test_steps == ["Enter Aadhaar", "Enter OTP"]
    assert suite.integration_tests == []
    assert suite.performance_tests[0].load_conditions == "500 concurrent users"


async def test_invalid_shape_raises(generator, mock_provider, document):
    mock_provider.call_model.return_value = '{"functionalTests": [{"title": "missing id"}]}'

    with pytest.raises(GenerationError):
        await generator.test_cases(document)


async def test_no_json_raises(generator, mock_provider, document):
    mock_provider.call_model.return_value = "Unable to plan."

    with pytest.raises(GenerationError) as exc_info:
        await generator.implementation_plan(document, "finacle")
    assert exc_info.value.details == {"cause": "ERR_EXTRACT_001"}
