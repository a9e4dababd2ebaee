"""Data model unit tests."""

import pytest
from pydantic import ValidationError

from brd_generator.exceptions import RequirementNotFoundError
from brd_generator.models import (
    BRD_FIELD_NAMES,
    BrdDocument,
    BrdRecord,
    BrdStatus,
    FunctionalRequirement,
    GenerationMode,
    GenerationRequest,
    can_transition,
)


class TestGenerationRequest:
    def test_accepts_camel_case(self):
        request = GenerationRequest.model_validate(
            {
                "transcriptContent": "text",
                "processArea": "loan_processing",
                "targetSystem": "temenos_t24",
                "clientName": "Acme Bank",
                "teamName": "Lending",
            }
        )
        assert request.process_area.value == "loan_processing"
        assert request.template.value == "standard"
        assert request.analysis_depth.value == "detailed"

    def test_is_frozen(self, sample_request):
        with pytest.raises(ValidationError):
            sample_request.client_name = "Other"

    def test_empty_transcript_rejected(self):
        with pytest.raises(ValidationError):
            GenerationRequest(
                transcript_content="",
                process_area="loan_processing",
                target_system="finacle",
                client_name="Acme",
                team_name="Team",
            )

    def test_unknown_process_area_rejected(self):
        with pytest.raises(ValidationError):
            GenerationRequest(
                transcript_content="text",
                process_area="gardening",
                target_system="finacle",
                client_name="Acme",
                team_name="Team",
            )


class TestBrdDocument:
    def test_field_names_are_camel_case(self):
        assert BRD_FIELD_NAMES == (
            "tableOfContents",
            "executiveSummary",
            "functionalRequirements",
            "nonFunctionalRequirements",
            "integrationRequirements",
            "businessProcessFlows",
            "userInterfaceRequirements",
            "raciMatrix",
            "assumptions",
            "constraints",
            "riskManagement",
            "changelog",
        )

    def test_empty_document_has_every_list(self):
        wire = BrdDocument().to_wire()
        assert tuple(wire) == BRD_FIELD_NAMES
        assert wire["functionalRequirements"] == []
        assert wire["executiveSummary"] == ""

    def test_to_wire_uses_camel_case(self, brd_payload):
        wire = BrdDocument.model_validate(brd_payload).to_wire()

        requirement = wire["functionalRequirements"][0]
        assert requirement["acceptanceCriteria"] == brd_payload["functionalRequirements"][0]["acceptanceCriteria"]
        assert wire["tableOfContents"][1]["pageNumber"] == 3
        assert wire["businessProcessFlows"][0]["steps"][0]["stepNumber"] == 1

    def test_null_leaves_use_defaults(self):
        document = BrdDocument.model_validate(
            {
                "executiveSummary": None,
                "functionalRequirements": [{"id": "FR-001", "priority": None, "userStories": None}],
                "businessProcessFlows": [{"id": "BPF-001", "steps": [{"stepNumber": 1, "decision": None}]}],
            }
        )

        assert document.executive_summary == ""
        assert document.functional_requirements[0].priority == "Medium"
        assert document.functional_requirements[0].user_stories == []
        assert document.business_process_flows[0].steps[0].decision is None

    def test_non_list_value_still_rejected(self):
        with pytest.raises(ValidationError):
            BrdDocument.model_validate({"functionalRequirements": "TBD"})

    def test_duplicate_ids_suffixed_per_list(self):
        document = BrdDocument.model_validate(
            {
                "functionalRequirements": [{"id": "FR-001"}, {"id": "FR-001"}, {"id": "FR-001-2"}],
                "riskManagement": [{"id": "FR-001"}],
            }
        )
        assert [fr.id for fr in document.functional_requirements] == ["FR-001", "FR-001-2", "FR-001-2-2"]
        assert document.risk_management[0].id == "FR-001"

    def test_apply_requirement_returns_new_document(self, brd_payload):
        document = BrdDocument.model_validate(brd_payload)
        revised = FunctionalRequirement(id="FR-001", title="Video KYC", priority="High")

        updated = document.apply_requirement(revised)

        assert updated.functional_requirements[0].title == "Video KYC"
        assert updated.functional_requirements[1].id == "FR-002"
        assert document.functional_requirements[0].title == "Aadhaar eKYC verification"

    def test_apply_requirement_unknown_id(self, brd_payload):
        document = BrdDocument.model_validate(brd_payload)
        with pytest.raises(RequirementNotFoundError) as exc_info:
            document.apply_requirement(FunctionalRequirement(id="FR-404"))
        assert exc_info.value.details == {"requirement_id": "FR-404"}

    def test_to_markdown(self, brd_payload):
        markdown = BrdDocument.model_validate(brd_payload).to_markdown()

        assert markdown.startswith("# Business Requirements Document")
        assert "### FR-001: Aadhaar eKYC verification" in markdown
        assert "**Priority**: Critical | **Complexity**: High" in markdown
        assert "> As a Customer, I want open an account online so that avoid branch visits" in markdown
        assert "| UAT sign-off | QA Lead | Product Owner | Compliance | Branch Ops |" in markdown
        assert "- v1.0 (2026-01-15, BRD Generator): Initial BRD" in markdown


class TestBrdRecord:
    def test_from_request(self, sample_request):
        record = BrdRecord.from_request(sample_request, mode=GenerationMode.MULTI)

        assert record.status == BrdStatus.PENDING
        assert record.target_system == "finacle"
        assert record.generation_mode == GenerationMode.MULTI
        assert "transcriptContent" not in record.model_dump(by_alias=True)

    @pytest.mark.parametrize(
        "current, target, allowed",
        [
            (BrdStatus.PENDING, BrdStatus.IN_PROGRESS, True),
            (BrdStatus.PENDING, BrdStatus.FAILED, True),
            (BrdStatus.PENDING, BrdStatus.COMPLETED, False),
            (BrdStatus.IN_PROGRESS, BrdStatus.COMPLETED, True),
            (BrdStatus.IN_PROGRESS, BrdStatus.PENDING, False),
            (BrdStatus.COMPLETED, BrdStatus.FAILED, False),
            (BrdStatus.FAILED, BrdStatus.COMPLETED, False),
        ],
    )
    def test_transitions(self, current, target, allowed):
        assert can_transition(current, target) is allowed

    def test_terminal_states(self):
        assert [status for status in BrdStatus if status.is_terminal] == [
            BrdStatus.COMPLETED,
            BrdStatus.FAILED,
        ]
