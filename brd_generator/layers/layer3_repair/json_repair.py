"""
Layer 3: JSON 복구 엔진
출력 길이 제한 등으로 중간에 잘린 JSON 객체를 파싱 가능한 형태로 되살립니다.

복구 전략:
1. 문자열 리터럴 여부(역슬래시 이스케이프 포함)와 중괄호/대괄호 깊이를 추적하며 스캔
2. 깊이가 (중괄호 1, 대괄호 0)인 "안전한 절단 지점"을 모두 기록
   - 최상위 쉼표 직전
   - 중첩 값이 닫히며 (1, 0)으로 돌아온 직후
   - 최상위 문자열이 닫힌 직후
   - 문자열 밖에서 (1, 0) 상태로 입력이 끝난 지점
   - 객체를 닫는 마지막 '}' 직전
3. 뒤쪽 지점부터 잘라 보고, 닫았을 때 비어 있지 않은 객체로 파싱되는 첫 지점을 채택
4. 누락된 필수 필드를 기본값으로 채워 넣고 '}' 로 닫음

반환 문자열은 항상 json.loads()로 파싱됩니다.
"""

import json
import logging
from typing import Any, Mapping

from brd_generator.exceptions import RepairError

logger = logging.getLogger(__name__)


def _safe_cut_points(text: str) -> list[int]:
    """(1, 0) 깊이에서의 절단 지점 목록 (슬라이스 끝 인덱스, 오름차순)."""
    points: list[int] = []
    braces = 0
    brackets = 0
    in_string = False
    escaped = False

    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
                if braces == 1 and brackets == 0:
                    points.append(index + 1)
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            braces += 1
        elif char == "[":
            brackets += 1
        elif char == "}":
            braces -= 1
            if braces == 0:
                points.append(index)
                return points
            if braces == 1 and brackets == 0:
                points.append(index + 1)
        elif char == "]":
            brackets -= 1
            if braces == 1 and brackets == 0:
                points.append(index + 1)
        elif char == "," and braces == 1 and brackets == 0:
            points.append(index)

    if not in_string and braces == 1 and brackets == 0:
        points.append(len(text))
    return points


def repair_json(candidate: str, required_defaults: Mapping[str, Any]) -> str:
    """
    잘리거나 필드가 빠진 JSON 객체 문자열을 복구합니다.

    Args:
        candidate: 추출 단계에서 얻은 '{' 로 시작하는 문자열
        required_defaults: 결과에 반드시 있어야 하는 필드와 그 기본값 (JSON 이름 기준)

    Returns:
        파싱 가능한 JSON 객체 문자열

    Raises:
        RepairError: 안전한 절단 지점이 없거나 어느 지점에서도 객체를 닫을 수 없을 때
    """
    text = candidate.strip()
    if not text.startswith("{"):
        raise RepairError("복구 대상이 JSON 객체로 시작하지 않습니다")

    cut_points = _safe_cut_points(text)
    logger.info(f"[Repair] 절단 후보 {len(cut_points)}개 (입력 길이: {len(text)} chars)")

    for cut in reversed(cut_points):
        head = text[:cut].rstrip()
        if head.endswith(","):
            head = head[:-1].rstrip()

        try:
            parsed = json.loads(head + "}")
        except json.JSONDecodeError:
            continue
        if not isinstance(parsed, dict) or not parsed:
            continue

        missing = [key for key in required_defaults if key not in parsed]
        additions = "".join(
            f", {json.dumps(key)}: {json.dumps(required_defaults[key], ensure_ascii=False)}"
            for key in missing
        )
        logger.info(
            f"[Repair] 복구 성공: {cut}번째 문자에서 절단, 기본값 {len(missing)}개 추가"
        )
        return head + additions + "}"

    logger.warning("[Repair] 안전한 절단 지점 없음")
    raise RepairError(
        "잘린 JSON을 복구할 수 없습니다",
        details={"cut_points": len(cut_points), "length": len(text)},
    )
