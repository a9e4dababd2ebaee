"""
BRD 생성 요청 모델입니다.
업로드된 트랜스크립트 텍스트와 분석 메타데이터를 하나의 불변 값으로 묶습니다.
"""

from enum import Enum

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from .common import CamelModel


class ProcessArea(str, Enum):
    """분석 대상 업무 영역입니다."""

    ACCOUNT_OPENING = "account_opening"
    LOAN_PROCESSING = "loan_processing"
    CUSTOMER_ONBOARDING = "customer_onboarding"
    KYC_AML_COMPLIANCE = "kyc_aml_compliance"
    DIGITAL_BANKING = "digital_banking"
    PAYMENT_PROCESSING = "payment_processing"
    CREDIT_ASSESSMENT = "credit_assessment"
    PRIORITY_BANKING = "priority_banking"
    TRADE_FINANCE = "trade_finance"
    TREASURY_MANAGEMENT = "treasury_management"
    REGULATORY_REPORTING = "regulatory_reporting"
    RISK_MANAGEMENT = "risk_management"


class TargetSystem(str, Enum):
    """구현 대상 시스템입니다."""

    FINACLE = "finacle"
    TEMENOS_T24 = "temenos_t24"
    INFOSYS_BANKING_PLATFORM = "infosys_banking_platform"
    ORACLE_FLEXCUBE = "oracle_flexcube"
    TCS_BANCS = "tcs_bancs"
    NUCLEUS_SOFTWARE = "nucleus_software"
    INTELLECT_DESIGN_ARENA = "intellect_design_arena"
    NEWGEN_SOFTWARE = "newgen_software"
    MANTRA_OMNICHANNEL = "mantra_omnichannel"
    KONY_BANKING = "kony_banking"
    MINDTREE_DIGITAL = "mindtree_digital"
    RBI_RTGS_NEFT = "rbi_rtgs_neft"
    NPCI_UPI = "npci_upi"
    SALESFORCE_FINANCIAL_SERVICES = "salesforce_financial_services"
    MICROSOFT_DYNAMICS_365 = "microsoft_dynamics_365"
    CUSTOM_APPLICATION_DEVELOPMENT = "custom_application_development"


class Template(str, Enum):
    """BRD 문서 템플릿입니다."""

    STANDARD = "standard"
    AGILE = "agile"
    DETAILED = "detailed"
    EXECUTIVE = "executive"


class AnalysisDepth(str, Enum):
    """분석 깊이입니다. 프롬프트의 최소 항목 수를 조절합니다."""

    BASIC = "basic"
    DETAILED = "detailed"
    COMPREHENSIVE = "comprehensive"


class GenerationRequest(CamelModel):
    """
    BRD 생성 1회에 해당하는 요청입니다.
    한 번 만들어지면 변경되지 않습니다 (frozen).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    transcript_content: str = Field(..., min_length=1, description="트랜스크립트 원문 텍스트")
    process_area: ProcessArea
    target_system: TargetSystem
    template: Template = Template.STANDARD
    analysis_depth: AnalysisDepth = AnalysisDepth.DETAILED
    client_name: str = Field(..., min_length=1, description="고객사 이름")
    team_name: str = Field(..., min_length=1, description="팀 이름")
