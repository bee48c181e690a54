"""AI 요청 디스패처

요청 본문 `{action, data}`를 받아 프롬프트 생성 -> 게이트웨이 호출 ->
응답 정규화까지 한 번에 처리한다. 모든 경로는 `result` 또는 `error` 중
하나만 담은 응답 하나로 끝난다.
"""
import json
from typing import Any, Dict, NamedTuple

import httpx
from pydantic import BaseModel, ValidationError

from ..errors import (
    DesignAIError,
    GatewayTransportError,
    InvalidRequestError,
    UnknownActionError,
    UpstreamBillingError,
    UpstreamOtherError,
    UpstreamRateLimited,
)
from ..models.schemas import ACTION_DATA_MODELS, Action
from ..utils.logger import logger
from .gateway_client import AIGatewayClient, get_gateway_client
from .normalizer import extract_reply_text, normalize_reply
from .prompts import build_prompt


class DispatchOutcome(NamedTuple):
    status_code: int
    envelope: Dict[str, Any]
    content: bytes


def render_outcome(status_code: int, envelope: Dict[str, Any]) -> DispatchOutcome:
    """응답 본문 직렬화 (JSON으로 표현할 수 없는 값이면 ValueError)"""
    content = json.dumps(
        envelope,
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":")
    ).encode("utf-8")
    return DispatchOutcome(status_code, envelope, content)


def parse_body(raw_body: bytes) -> Dict[str, Any]:
    """요청 본문 JSON 파싱 (객체가 아니면 400)"""
    try:
        body = json.loads(raw_body or b"null")
    except ValueError:
        raise InvalidRequestError("Invalid request body")

    if not isinstance(body, dict):
        raise InvalidRequestError("Invalid request body")
    return body


def resolve_action(value: Any) -> Action:
    """action 문자열 -> Action (누락/미지원이면 400)"""
    try:
        return Action(value)
    except ValueError:
        raise UnknownActionError(value if isinstance(value, str) else None)


def validate_data(action: Action, data: Any) -> BaseModel:
    """action별 입력 모델로 검증 (누락된 필드는 프롬프트 기본값 사용)"""
    if data is None:
        data = {}
    try:
        return ACTION_DATA_MODELS[action].model_validate(data)
    except ValidationError as e:
        logger.warning(f"Invalid data for {action.value}: {e.error_count()} error(s)")
        raise InvalidRequestError(f"Invalid data for action '{action.value}'")


def raise_for_upstream_status(response: httpx.Response) -> None:
    """게이트웨이 상태 코드 -> 클라이언트 오류"""
    if response.is_success:
        return
    if response.status_code == 429:
        raise UpstreamRateLimited()
    if response.status_code == 402:
        raise UpstreamBillingError()

    logger.error(f"AI gateway error: {response.status_code} {response.text}")
    raise UpstreamOtherError(response.status_code, response.text)


class DesignAIDispatcher:
    """단일 패스 요청 처리기 (상태 없음)"""

    def __init__(self, gateway: AIGatewayClient):
        self.gateway = gateway

    async def handle(self, body: Dict[str, Any]) -> Any:
        """검증 -> 프롬프트 -> 호출 -> 정규화. 실패 시 DesignAIError"""
        action = resolve_action(body.get("action"))
        data = validate_data(action, body.get("data"))
        logger.info(f"Dispatching action: {action.value}")

        prompt = build_prompt(action, data)

        try:
            response = await self.gateway.complete(prompt)
        except httpx.RequestError as e:
            logger.error(f"AI gateway transport error: {type(e).__name__}: {str(e)}")
            raise GatewayTransportError(str(e) or type(e).__name__)

        raise_for_upstream_status(response)

        reply_text = extract_reply_text(response.json())
        normalized = normalize_reply(reply_text)
        logger.info(f"{action.value} completed ({type(normalized).__name__})")
        return normalized.to_result()

    async def dispatch(self, raw_body: bytes) -> DispatchOutcome:
        """바깥 경계: 모든 예외를 응답 하나로 변환"""
        try:
            body = parse_body(raw_body)
            result = await self.handle(body)
            return render_outcome(200, {"result": result})

        except DesignAIError as e:
            if e.status_code >= 500:
                logger.error(f"Room design error: {e.message}")
            else:
                logger.warning(f"Request rejected ({e.status_code}): {e.message}")
            return render_outcome(e.status_code, {"error": e.message})

        except Exception as e:
            logger.error(f"Room design error: {str(e)}", exc_info=True)
            return render_outcome(500, {"error": str(e) or "Unknown error"})


def get_dispatcher() -> DesignAIDispatcher:
    """요청마다 디스패처 생성 (FastAPI dependency)"""
    return DesignAIDispatcher(get_gateway_client())
