"""
Layer 2: 응답 추출기
LLM의 자유 형식 응답에서 JSON 객체 문자열을 잘라냅니다.

모델 응답은 종종 설명 문장, 마크다운 코드 블록, 뒤따르는 잡음을 포함하므로
다음 순서로 처리합니다.

┌──────────────────────────────────────────────────────────────┐
│ 단계        │ 처리                                           │
├──────────────────────────────────────────────────────────────┤
│ 1. 정리     │ 앞뒤 공백 제거                                 │
│ 2. 코드블록 │ 첫 번째 ``` 블록 내부만 사용 (닫힘 없으면 제거)│
│ 3. 범위     │ 첫 '{' 부터 마지막 '}' 까지                    │
│ 4. 잘림     │ '}' 가 없으면 첫 '{' 부터 끝까지 (복구 단계로) │
└──────────────────────────────────────────────────────────────┘

모든 함수는 순수 함수이며 같은 입력에 항상 같은 결과를 반환합니다.
"""

import json
import logging
import re
from typing import Optional

from brd_generator.exceptions import ExtractionError, ResponseParseError

logger = logging.getLogger(__name__)

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")
_OPENING_FENCE = re.compile(r"```(?:json)?")


def extract_json(raw_text: str) -> str:
    """
    모델 응답에서 JSON 객체 후보 문자열을 추출합니다.

    Args:
        raw_text: 공급자가 반환한 원시 텍스트

    Returns:
        '{' 로 시작하는 후보 문자열 (잘린 응답이면 '}' 로 끝나지 않을 수 있음)

    Raises:
        ExtractionError: 응답에 '{' 가 전혀 없을 때
    """
    text = raw_text.strip()

    fenced = _FENCED_BLOCK.search(text)
    if fenced:
        text = fenced.group(1)
    elif "```" in text:
        # 닫는 펜스 없이 잘린 응답
        text = _OPENING_FENCE.sub("", text, count=1)

    start = text.find("{")
    if start == -1:
        logger.warning(f"[Extractor] JSON 객체 없음 (응답 길이: {len(raw_text)} chars)")
        raise ExtractionError(
            "모델 응답에서 JSON 객체를 찾을 수 없습니다",
            details={"preview": raw_text[:200]},
        )

    end = text.rfind("}")
    if end < start:
        logger.info("[Extractor] 닫는 중괄호 없음, 잘린 응답으로 처리")
        return text[start:].rstrip()

    return text[start:end + 1]


def find_balanced_object(text: str) -> Optional[str]:
    """
    첫 '{' 부터 문자열 리터럴을 고려하며 깊이가 0이 되는 지점까지 잘라냅니다.

    마지막 '}' 기준 추출이 뒤따르는 두 번째 객체까지 삼켜서 파싱에 실패했을 때
    두 번째 시도로 사용합니다. 균형이 맞지 않으면 None.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]

    return None


def parse_object(candidate: str) -> dict:
    """
    후보 문자열을 JSON 객체로 파싱합니다.

    Raises:
        ResponseParseError: JSON 문법 오류이거나 최상위 값이 객체가 아닐 때
    """
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ResponseParseError(
            f"JSON 파싱 실패: {e.msg} (line {e.lineno}, column {e.colno})",
            details={"position": e.pos},
        ) from e

    if not isinstance(parsed, dict):
        raise ResponseParseError(
            f"최상위 JSON 값이 객체가 아닙니다: {type(parsed).__name__}"
        )
    return parsed


def extract_and_parse(raw_text: str) -> dict:
    """
    추출 후 파싱까지 수행합니다. 첫 시도가 실패하면 균형 스캔 결과로 한 번 더 시도합니다.
    보조 생성 흐름(개선 제안, 구현 활동, 테스트 케이스)은 복구 없이 이 함수만 사용합니다.

    Raises:
        ExtractionError, ResponseParseError
    """
    candidate = extract_json(raw_text)
    try:
        return parse_object(candidate)
    except ResponseParseError:
        balanced = find_balanced_object(candidate)
        if balanced is None or balanced == candidate:
            raise
        logger.info("[Extractor] 균형 스캔 결과로 재파싱")
        return parse_object(balanced)
