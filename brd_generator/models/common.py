"""
공통 데이터 모델 모듈입니다.
BRD 문서, 생성 요청, 개선 제안 등에서 공통으로 사용되는 기반 클래스와 열거형을 정의합니다.

JSON 필드명은 프론트엔드와 문서 내보내기가 의존하는 camelCase 계약을 따릅니다.
파이썬 속성은 snake_case로 쓰고, 직렬화할 때는 by_alias=True로 camelCase를 사용합니다.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 별칭을 쓰는 모든 모델의 기반 클래스입니다."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """
        모델 응답의 null 값을 정리합니다.

        - 기본값이 None이 아닌 필드의 null은 제거하여 기본값이 적용되게 합니다.
        - 목록 안의 null 항목은 제거합니다.
        """
        if not isinstance(data, dict):
            return data

        nullable: set[str] = set()
        for name, field in cls.model_fields.items():
            if field.default is None:
                nullable.update((name, to_camel(name)))

        cleaned = {}
        for key, value in data.items():
            if value is None and key not in nullable:
                continue
            if isinstance(value, list):
                value = [item for item in value if item is not None]
            cleaned[key] = value
        return cleaned


class Priority(str, Enum):
    """기능 요구사항 우선순위입니다. 값의 대소문자가 그대로 계약입니다."""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Complexity(str, Enum):
    """기능 요구사항 구현 복잡도입니다."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class NfrCategory(str, Enum):
    """비기능 요구사항 분류입니다."""

    PERFORMANCE = "Performance"
    SECURITY = "Security"
    SCALABILITY = "Scalability"
    AVAILABILITY = "Availability"
    USABILITY = "Usability"
    COMPLIANCE = "Compliance"


class RiskCategory(str, Enum):
    """리스크 분류입니다."""

    TECHNICAL = "Technical"
    OPERATIONAL = "Operational"
    COMPLIANCE = "Compliance"
    BUSINESS = "Business"


class RiskLevel(str, Enum):
    """리스크 발생 가능성 / 영향도 수준입니다."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """열거형의 값 목록 (프롬프트에 허용값을 나열할 때 사용)."""
    return [member.value for member in enum_cls]
