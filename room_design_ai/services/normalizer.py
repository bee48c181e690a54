"""모델 응답 텍스트 -> JSON 정규화

모델은 JSON을 마크다운 코드 블록으로 감싸거나 아예 깨진 텍스트를 돌려줄 수
있다. 파싱에 실패해도 예외를 던지지 않고 원문을 `rawResponse`로 넘겨
클라이언트가 그대로 보여줄 수 있게 한다.
"""
import json
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Union

# 첫 번째 ``` 블록만 사용 (json 태그는 선택)
FENCED_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


@dataclass(frozen=True)
class Parsed:
    """JSON 파싱 성공"""
    value: Any

    def to_result(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Unparsed:
    """JSON 파싱 실패 (원문 보존)"""
    raw_text: str

    def to_result(self) -> Dict[str, str]:
        return {"rawResponse": self.raw_text}


NormalizedResult = Union[Parsed, Unparsed]


def _reject_constant(name: str) -> Any:
    # NaN, Infinity는 표준 JSON이 아님
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    # 1e400 같은 범위 초과 값은 inf가 되어 응답으로 직렬화할 수 없다
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"Out of range number: {literal}")
    return value


def extract_reply_text(payload: Any) -> str:
    """chat completions 응답에서 choices[0].message.content 추출 (없으면 빈 문자열)"""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) and content else ""


def normalize_reply(text: str) -> NormalizedResult:
    """코드 블록 우선, 없으면 전체 텍스트를 JSON으로 파싱"""
    match = FENCED_BLOCK_RE.search(text)
    candidate = match.group(1).strip() if match else text.strip()

    try:
        return Parsed(json.loads(
            candidate,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float
        ))
    except ValueError:
        return Unparsed(text)
