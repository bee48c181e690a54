# tests/conftest.py
import json
import os
from typing import Any, Callable, Dict, List, Optional

# 테스트 중에는 logs/ 파일을 만들지 않는다 (앱 import 전에 설정)
os.environ.setdefault("LOG_FILE", "")

import httpx
import pytest
from fastapi.testclient import TestClient

from room_design_ai.main import app
from room_design_ai.services.dispatcher import DesignAIDispatcher, get_dispatcher
from room_design_ai.services.gateway_client import AIGatewayClient

GATEWAY_URL = "https://gateway.test/v1/chat/completions"


def completion(content: str) -> Dict[str, Any]:
    """chat completions 성공 응답 본문"""
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class FakeGateway:
    """MockTransport 핸들러: 받은 요청을 기록하고 정해진 응답을 돌려준다"""

    def __init__(self, status_code: int = 200, body: Any = None, error: Optional[Exception] = None):
        self.status_code = status_code
        self.body = body if body is not None else completion('{"ok": true}')
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def make_gateway_client(fake: FakeGateway, api_key: Optional[str] = "test-key") -> AIGatewayClient:
    return AIGatewayClient(
        api_key=api_key,
        url=GATEWAY_URL,
        model="google/gemini-3-flash-preview",
        temperature=0.3,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(fake))
    )


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_gateway() -> Callable[..., FakeGateway]:
    """디스패처가 FakeGateway를 쓰도록 dependency override"""

    def _install(fake: Optional[FakeGateway] = None, api_key: Optional[str] = "test-key") -> FakeGateway:
        fake = fake or FakeGateway()
        app.dependency_overrides[get_dispatcher] = lambda: DesignAIDispatcher(
            make_gateway_client(fake, api_key=api_key)
        )
        return fake

    yield _install
    app.dependency_overrides.clear()
