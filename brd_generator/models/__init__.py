"""Data models for BRD generation system."""

from .common import (
    CamelModel,
    Priority,
    Complexity,
    NfrCategory,
    RiskCategory,
    RiskLevel,
    enum_values,
)
from .request import (
    ProcessArea,
    TargetSystem,
    Template,
    AnalysisDepth,
    GenerationRequest,
)
from .brd import (
    TableOfContentsEntry,
    UserStory,
    FunctionalRequirement,
    NonFunctionalRequirement,
    IntegrationRequirement,
    BusinessProcessFlow,
    ProcessStep,
    UIRequirement,
    RaciEntry,
    Risk,
    ChangelogEntry,
    BrdDocument,
    BRD_FIELD_NAMES,
)
from .section import BrdSection, SECTION_FIELDS, SECTION_TITLES
from .enhancement import RequirementContext, EnhancementSuggestion
from .delivery import (
    Activity,
    ImplementationPlan,
    TestCase,
    PerformanceTestCase,
    TestSuite,
)
from .processing import (
    BrdStatus,
    BrdRecord,
    GenerationMode,
    can_transition,
)
from .error import ErrorResponse

__all__ = [
    # Common
    "CamelModel",
    "Priority",
    "Complexity",
    "NfrCategory",
    "RiskCategory",
    "RiskLevel",
    "enum_values",
    # Request models
    "ProcessArea",
    "TargetSystem",
    "Template",
    "AnalysisDepth",
    "GenerationRequest",
    # BRD models
    "TableOfContentsEntry",
    "UserStory",
    "FunctionalRequirement",
    "NonFunctionalRequirement",
    "IntegrationRequirement",
    "BusinessProcessFlow",
    "ProcessStep",
    "UIRequirement",
    "RaciEntry",
    "Risk",
    "ChangelogEntry",
    "BrdDocument",
    "BRD_FIELD_NAMES",
    # Section groups
    "BrdSection",
    "SECTION_FIELDS",
    "SECTION_TITLES",
    # Enhancement models
    "RequirementContext",
    "EnhancementSuggestion",
    # Delivery models
    "Activity",
    "ImplementationPlan",
    "TestCase",
    "PerformanceTestCase",
    "TestSuite",
    # Processing models
    "BrdStatus",
    "BrdRecord",
    "GenerationMode",
    "can_transition",
    "ErrorResponse",
]
