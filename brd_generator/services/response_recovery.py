"""
모델 응답 → BrdDocument 복구 파이프라인입니다.

처리 흐름:
    추출(Layer 2) → 파싱 + 검증 → [실패 시] 균형 스캔 재시도
    → [실패 시] 복구(Layer 3) → [실패 시] 폴백(Layer 4)

JSON 수준의 오류(추출, 파싱, 복구, 검증 실패)는 이 모듈 밖으로 전파되지 않습니다.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from brd_generator.exceptions import (
    DocumentValidationError,
    ExtractionError,
    RepairError,
    ResponseParseError,
)
from brd_generator.layers.layer2_extraction import (
    extract_json,
    find_balanced_object,
    parse_object,
)
from brd_generator.layers.layer3_repair import repair_json
from brd_generator.layers.layer4_fallback import (
    minimal_document,
    minimal_section,
    required_defaults,
)
from brd_generator.models import (
    BRD_FIELD_NAMES,
    BrdDocument,
    BrdSection,
    GenerationRequest,
    SECTION_FIELDS,
)

logger = logging.getLogger(__name__)

# 파싱 이후 복구 단계로 넘기는 오류
_RECOVERABLE = (ResponseParseError, DocumentValidationError)


def validate_fields(
    data: dict,
    request: GenerationRequest,
    fields: tuple[str, ...] = BRD_FIELD_NAMES,
) -> BrdDocument:
    """
    파싱된 딕셔너리를 검증합니다.

    fields의 모든 키가 있어야 하며, 나머지 필드는 최소 문서로 채운 뒤
    BrdDocument 스키마로 검증합니다.

    Raises:
        DocumentValidationError: 필수 키 누락 또는 형식 오류
    """
    missing = [field for field in fields if field not in data]
    if missing:
        raise DocumentValidationError(
            f"필수 필드 누락: {', '.join(missing)}",
            details={"missing": missing},
        )

    merged = required_defaults(request)
    merged.update({field: data[field] for field in fields})
    try:
        return BrdDocument.model_validate(merged)
    except ValidationError as e:
        raise DocumentValidationError(
            f"BRD 형식 오류: {e.error_count()}건",
            details=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


def _recover(
    raw_text: str,
    request: GenerationRequest,
    fields: tuple[str, ...],
    defaults: dict[str, Any],
    log_prefix: str,
) -> Optional[BrdDocument]:
    """복구에 성공하면 문서, 모든 단계가 실패하면 None."""
    try:
        candidate = extract_json(raw_text)
    except ExtractionError as e:
        logger.warning(f"{log_prefix} 추출 실패: {e.message}")
        return None

    try:
        return validate_fields(parse_object(candidate), request, fields)
    except _RECOVERABLE as e:
        logger.warning(f"{log_prefix} 1차 파싱/검증 실패: {e.message}")

    balanced = find_balanced_object(candidate)
    if balanced is not None and balanced != candidate:
        try:
            document = validate_fields(parse_object(balanced), request, fields)
            logger.info(f"{log_prefix} 균형 스캔으로 파싱 성공")
            return document
        except _RECOVERABLE as e:
            logger.warning(f"{log_prefix} 균형 스캔 파싱 실패: {e.message}")

    try:
        repaired = repair_json(candidate, defaults)
        document = validate_fields(parse_object(repaired), request, fields)
        logger.info(f"{log_prefix} 복구 성공")
        return document
    except (RepairError, ResponseParseError, DocumentValidationError) as e:
        logger.warning(f"{log_prefix} 복구 실패: {e.message}")
        return None


def recover_document(raw_text: str, request: GenerationRequest) -> BrdDocument:
    """
    단일 호출 응답을 BrdDocument로 변환합니다. 실패하면 최소 문서를 반환합니다.
    """
    document = _recover(
        raw_text,
        request,
        BRD_FIELD_NAMES,
        required_defaults(request),
        "[Recovery]",
    )
    if document is None:
        logger.warning("[Recovery] 폴백 문서 사용")
        return minimal_document(request)
    return document


def recover_section(
    raw_text: str,
    request: GenerationRequest,
    section: BrdSection,
) -> dict[str, Any]:
    """
    섹션 그룹 응답을 해당 섹션 필드만 담은 딕셔너리(JSON 이름 기준)로 변환합니다.
    실패하면 그 섹션의 최소 내용을 반환합니다.
    """
    fields = SECTION_FIELDS[section]
    log_prefix = f"[Recovery:{section.value}]"
    document = _recover(
        raw_text,
        request,
        fields,
        required_defaults(request, section),
        log_prefix,
    )
    if document is None:
        logger.warning(f"{log_prefix} 폴백 섹션 사용")
        return minimal_section(request, section)

    wire = document.to_wire()
    return {field: wire[field] for field in fields}
