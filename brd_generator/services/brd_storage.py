"""
파일 기반 BRD 레코드 저장소입니다.
데이터베이스 대신 data/brd 폴더에 레코드 1건당 JSON 파일 1개를 저장합니다.

상태 전이 규칙:
- PENDING → IN_PROGRESS | FAILED
- IN_PROGRESS → COMPLETED | FAILED
- COMPLETED, FAILED 이후에는 변경 불가
규칙에 어긋나는 쓰기(예: 취소 후 늦게 도착한 완료 결과)는 무시하고 로그만 남깁니다.
"""

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import aiofiles

from brd_generator.config import get_settings
from brd_generator.exceptions import StorageError
from brd_generator.models import (
    BrdDocument,
    BrdRecord,
    BrdStatus,
    FunctionalRequirement,
    GenerationMode,
    GenerationRequest,
    can_transition,
)

logger = logging.getLogger(__name__)


class BrdStorage:
    """JSON 파일 기반의 BRD 레코드 저장소 클래스입니다."""

    def __init__(self, base_path: str = "data"):
        # 기본 저장 경로 설정 (기본값: data 폴더)
        self.base_path = Path(base_path)
        self.brd_path = self.base_path / "brd"
        self._lock = asyncio.Lock()

        self._ensure_directories()

    def _ensure_directories(self):
        """저장소 폴더 생성 함수"""
        self.brd_path.mkdir(parents=True, exist_ok=True)

    def _record_path(self, record_id: str) -> Path:
        return self.brd_path / f"{record_id}.json"

    # ==================== 레코드 생성/조회 ====================

    async def create_record(
        self,
        request: GenerationRequest,
        mode: GenerationMode = GenerationMode.SINGLE,
        status: BrdStatus = BrdStatus.PENDING,
    ) -> str:
        """새 BRD 레코드를 만들고 ID를 반환합니다. 생성 요청마다 새 레코드를 씁니다."""
        record = BrdRecord.from_request(request, mode=mode, status=status)
        async with self._lock:
            await self._save_record(record)
        logger.info(f"[Storage] 레코드 생성: {record.id} ({mode.value})")
        return record.id

    async def get_record(self, record_id: str) -> Optional[BrdRecord]:
        """ID로 레코드를 불러옵니다. 상태 폴링용이며 부수 효과가 없습니다."""
        return await self._load_record(self._record_path(record_id))

    async def list_records(
        self,
        skip: int = 0,
        limit: int = 20,
        status: Optional[BrdStatus] = None,
    ) -> list[BrdRecord]:
        """
        저장된 레코드 목록을 페이지 단위로 가져옵니다.
        최근 생성된 순서대로 정렬됩니다.
        """
        records = await self._load_records(status)
        records.sort(key=lambda r: r.created_at, reverse=True)
        return records[skip:skip + limit]

    async def count_records(self, status: Optional[BrdStatus] = None) -> int:
        """페이지와 관계없이 조건에 맞는 전체 레코드 수."""
        return len(await self._load_records(status))

    async def delete_record(self, record_id: str) -> bool:
        """레코드를 삭제합니다."""
        file_path = self._record_path(record_id)
        async with self._lock:
            if not file_path.exists():
                return False
            file_path.unlink()
        logger.info(f"[Storage] 레코드 삭제: {record_id}")
        return True

    # ==================== 상태/내용 갱신 ====================

    async def update_status(
        self,
        record_id: str,
        status: BrdStatus,
        content: Optional[BrdDocument] = None,
        error_message: Optional[str] = None,
    ) -> bool:
        """
        레코드 상태를 갱신합니다.

        Args:
            record_id: 레코드 ID
            status: 이동할 상태
            content: COMPLETED 전이 시 함께 저장할 문서
            error_message: FAILED 전이 시 저장할 메시지

        Returns:
            bool: 갱신되었으면 True, 레코드가 없거나 허용되지 않는 전이면 False
        """
        async with self._lock:
            record = await self._load_record(self._record_path(record_id))
            if record is None:
                logger.warning(f"[Storage] 상태 갱신 대상 없음: {record_id}")
                return False

            if not can_transition(record.status, status):
                logger.warning(
                    f"[Storage] 허용되지 않는 상태 전이 무시: {record_id} "
                    f"{record.status.value} → {status.value}"
                )
                return False

            update = {"status": status, "updated_at": datetime.now()}
            if content is not None:
                update["content"] = content
            if error_message is not None:
                update["error_message"] = error_message

            await self._save_record(record.model_copy(update=update))

        logger.info(f"[Storage] 상태 갱신: {record_id} → {status.value}")
        return True

    async def update_content(self, record_id: str, content: BrdDocument) -> bool:
        """완료된 레코드의 문서 내용을 교체합니다 (요구사항 편집용)."""
        async with self._lock:
            record = await self._load_record(self._record_path(record_id))
            if record is None or record.status != BrdStatus.COMPLETED:
                return False
            await self._save_record(
                record.model_copy(update={"content": content, "updated_at": datetime.now()})
            )
        return True

    async def apply_enhancement(
        self,
        record_id: str,
        requirement: FunctionalRequirement,
    ) -> Optional[BrdRecord]:
        """
        완료된 레코드의 기능 요구사항 1건을 같은 ID의 새 요구사항으로 교체합니다.

        Returns:
            갱신된 레코드. 레코드가 없거나 완료 상태가 아니면 None.

        Raises:
            RequirementNotFoundError: 문서에 해당 ID의 요구사항이 없을 때
        """
        async with self._lock:
            record = await self._load_record(self._record_path(record_id))
            if record is None or record.status != BrdStatus.COMPLETED or record.content is None:
                return None

            updated = record.model_copy(
                update={
                    "content": record.content.apply_requirement(requirement),
                    "updated_at": datetime.now(),
                }
            )
            await self._save_record(updated)

        logger.info(f"[Storage] 요구사항 교체: {record_id} / {requirement.id}")
        return updated

    # ==================== 내부 도우미 함수들 ====================

    async def _load_records(self, status: Optional[BrdStatus] = None) -> list[BrdRecord]:
        """저장된 모든 레코드를 읽습니다. 읽을 수 없는 파일은 건너뜁니다."""
        records = []
        for file_path in self.brd_path.glob("*.json"):
            record = await self._load_record(file_path)
            if record is None:
                continue
            # 상태 필터가 있으면 해당 상태의 레코드만 포함
            if status is None or record.status == status:
                records.append(record)
        return records

    async def _save_record(self, record: BrdRecord):
        """레코드를 JSON 파일로 저장하는 공통 함수"""
        file_path = self._record_path(record.id)
        try:
            async with aiofiles.open(file_path, "w", encoding="utf-8") as f:
                await f.write(record.model_dump_json(indent=2, by_alias=True))
        except OSError as e:
            logger.error(f"[Storage] 파일 저장 실패 {file_path}: {e}", exc_info=True)
            raise StorageError(
                f"파일 저장에 실패했습니다: {file_path.name}",
                details={"path": str(file_path), "error": str(e)},
            ) from e

    async def _load_record(self, file_path: Path) -> Optional[BrdRecord]:
        """JSON 파일을 읽어서 레코드로 변환하는 공통 함수"""
        if not file_path.exists():
            return None

        try:
            async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                content = await f.read()
            return BrdRecord.model_validate_json(content)
        except (OSError, ValueError) as e:
            logger.error(f"[Storage] 파일 로딩 에러 {file_path}: {e}", exc_info=True)
            return None


# 싱글톤 인스턴스 (프로그램 전체에서 공유)
_brd_storage: Optional[BrdStorage] = None


def get_brd_storage() -> BrdStorage:
    """BrdStorage 인스턴스를 반환합니다."""
    global _brd_storage
    if _brd_storage is None:
        _brd_storage = BrdStorage(get_settings().data_dir)
    return _brd_storage
