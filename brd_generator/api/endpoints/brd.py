"""
BRD 생성/관리 API입니다.
생성 작업을 시작하고, 상태를 폴링하고, 결과를 내보내거나 요구사항을 수정할 수 있습니다.
"""

import asyncio
import json
import logging
import re
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from pydantic import Field

from brd_generator.exceptions import InputValidationError
from brd_generator.layers.layer5_enhancement import RequirementEnhancer, get_enhancer
from brd_generator.layers.layer6_delivery import DeliveryGenerator, get_delivery_generator
from brd_generator.models import (
    BrdRecord,
    BrdStatus,
    CamelModel,
    FunctionalRequirement,
    GenerationMode,
    GenerationRequest,
    RequirementContext,
)
from brd_generator.services import (
    BrdOrchestrator,
    BrdStorage,
    get_brd_storage,
    get_orchestrator,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# 실행 중인 백그라운드 생성 작업 (작업이 끝나기 전에 GC되지 않도록 참조 유지)
_background_tasks: set[asyncio.Task] = set()


class GenerateBrdRequest(GenerationRequest):
    """생성 요청 본문. mode를 생략하면 GENERATION_MODE 설정을 따릅니다."""

    mode: Optional[GenerationMode] = None

    def to_generation_request(self) -> GenerationRequest:
        return GenerationRequest.model_validate(self.model_dump(exclude={"mode"}))


class EnhanceRequirementRequest(CamelModel):
    """요구사항 개선 제안 요청 본문."""

    requirement: FunctionalRequirement
    context: RequirementContext = Field(default_factory=RequirementContext)


def _content_disposition(filename: str) -> str:
    """
    다운로드 헤더 값. 헤더는 latin-1만 허용하므로 ASCII 대체 이름과
    RFC 5987 형식의 UTF-8 이름(filename*)을 함께 보냅니다.
    """
    ascii_name = re.sub(r"[^A-Za-z0-9._-]", "_", filename)
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"


async def _get_record_or_404(storage: BrdStorage, brd_id: str) -> BrdRecord:
    record = await storage.get_record(brd_id)
    if not record:
        raise HTTPException(status_code=404, detail="BRD를 찾을 수 없습니다")
    return record


async def _get_completed_record(storage: BrdStorage, brd_id: str) -> BrdRecord:
    record = await _get_record_or_404(storage, brd_id)
    if record.status != BrdStatus.COMPLETED or record.content is None:
        raise InputValidationError(
            f"완료되지 않은 BRD입니다 (상태: {record.status.value})",
            details={"brd_id": brd_id, "status": record.status.value},
        )
    return record


@router.post("/generate")
async def generate_brd(
    body: GenerateBrdRequest,
    storage: BrdStorage = Depends(get_brd_storage),
    orchestrator: BrdOrchestrator = Depends(get_orchestrator),
) -> dict:
    """
    BRD 생성을 시작하는 API입니다.
    레코드를 PENDING 상태로 만든 뒤 생성은 백그라운드에서 진행하고 바로 응답합니다.
    클라이언트는 GET /brd/{id}로 상태를 폴링합니다.
    """
    request = body.to_generation_request()
    mode = orchestrator.resolve_mode(body.mode)

    brd_id = await storage.create_record(request, mode=mode)

    task = asyncio.create_task(orchestrator.run(brd_id, request, mode))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)

    logger.info(f"[API] BRD 생성 요청 접수: {brd_id}")
    return {"brdId": brd_id, "status": BrdStatus.PENDING.value}


@router.post("/enhance-requirement")
async def enhance_requirement(
    body: EnhanceRequirementRequest,
    enhancer: RequirementEnhancer = Depends(get_enhancer),
) -> dict:
    """기능 요구사항 1건에 대한 개선 제안을 반환합니다 (저장하지 않음)."""
    suggestion = await enhancer.enhance(body.requirement, body.context)
    return suggestion.model_dump(mode="json", by_alias=True)


@router.get("")
async def list_brds(
    skip: int = 0,
    limit: int = 20,
    status: Optional[BrdStatus] = None,
    storage: BrdStorage = Depends(get_brd_storage),
) -> dict:
    """BRD 레코드 목록 조회 (본문 제외)"""
    records = await storage.list_records(skip=skip, limit=limit, status=status)
    return {
        "total": await storage.count_records(status),
        "records": [
            record.model_dump(mode="json", by_alias=True, exclude={"content"})
            for record in records
        ],
    }


@router.get("/{brd_id}")
async def get_brd(brd_id: str, storage: BrdStorage = Depends(get_brd_storage)) -> dict:
    """ID로 BRD 레코드 조회 (상태 폴링용)"""
    record = await _get_record_or_404(storage, brd_id)
    return record.model_dump(mode="json", by_alias=True)


@router.delete("/{brd_id}")
async def delete_brd(brd_id: str, storage: BrdStorage = Depends(get_brd_storage)) -> dict:
    """BRD 레코드 삭제"""
    if not await storage.delete_record(brd_id):
        raise HTTPException(status_code=404, detail="BRD를 찾을 수 없습니다")
    return {"deleted": True, "brdId": brd_id}


@router.post("/{brd_id}/cancel")
async def cancel_brd(brd_id: str, storage: BrdStorage = Depends(get_brd_storage)) -> dict:
    """
    진행 중인 생성을 취소합니다.
    레코드를 FAILED로 표시하며, 이후 도착하는 생성 결과는 저장소에서 무시됩니다.
    """
    record = await _get_record_or_404(storage, brd_id)
    if record.status.is_terminal:
        raise InputValidationError(
            f"이미 종료된 작업입니다 (상태: {record.status.value})",
            details={"brd_id": brd_id},
        )

    await storage.update_status(
        brd_id, BrdStatus.FAILED, error_message="사용자에 의해 취소되었습니다"
    )
    return {"brdId": brd_id, "status": BrdStatus.FAILED.value}


@router.get("/{brd_id}/export")
async def export_brd(
    brd_id: str,
    format: str = "markdown",
    storage: BrdStorage = Depends(get_brd_storage),
) -> Response:
    """
    BRD 문서를 파일로 다운로드하는 API.

    지원하는 형식:
    - markdown: 마크다운 텍스트 파일 (.md)
    - json: 데이터 원본 파일 (.json)
    """
    record = await _get_completed_record(storage, brd_id)
    filename = f"BRD_{record.client_name}_{record.id[:8]}".replace(" ", "_")

    if format == "markdown":
        return Response(
            content=record.content.to_markdown(),
            media_type="text/markdown",
            headers={"Content-Disposition": _content_disposition(f"{filename}.md")},
        )
    elif format == "json":
        return Response(
            content=json.dumps(record.content.to_wire(), ensure_ascii=False, indent=2),
            media_type="application/json",
            headers={"Content-Disposition": _content_disposition(f"{filename}.json")},
        )

    raise InputValidationError(
        f"지원하지 않는 형식입니다: {format}",
        details={"supported": ["markdown", "json"]},
    )


@router.put("/{brd_id}/requirements/{requirement_id}")
async def update_requirement(
    brd_id: str,
    requirement_id: str,
    requirement: FunctionalRequirement,
    storage: BrdStorage = Depends(get_brd_storage),
) -> dict:
    """완료된 BRD의 기능 요구사항 1건을 교체합니다 (개선 제안 적용)."""
    if requirement.id != requirement_id:
        raise InputValidationError(
            "경로의 요구사항 ID와 본문의 ID가 다릅니다",
            details={"path": requirement_id, "body": requirement.id},
        )

    await _get_completed_record(storage, brd_id)
    record = await storage.apply_enhancement(brd_id, requirement)
    if record is None:
        raise HTTPException(status_code=404, detail="BRD를 찾을 수 없습니다")
    return record.model_dump(mode="json", by_alias=True)


@router.post("/{brd_id}/implementation-plan")
async def generate_implementation_plan(
    brd_id: str,
    storage: BrdStorage = Depends(get_brd_storage),
    generator: DeliveryGenerator = Depends(get_delivery_generator),
) -> dict:
    """완료된 BRD로부터 대상 시스템 기준 구현 활동을 생성합니다."""
    record = await _get_completed_record(storage, brd_id)
    plan = await generator.implementation_plan(record.content, record.target_system)
    return plan.model_dump(mode="json", by_alias=True)


@router.post("/{brd_id}/test-cases")
async def generate_test_cases(
    brd_id: str,
    storage: BrdStorage = Depends(get_brd_storage),
    generator: DeliveryGenerator = Depends(get_delivery_generator),
) -> dict:
    """완료된 BRD로부터 기능/연동/성능 테스트 케이스를 생성합니다."""
    record = await _get_completed_record(storage, brd_id)
    suite = await generator.test_cases(record.content, record.target_system)
    return suite.model_dump(mode="json", by_alias=True)
