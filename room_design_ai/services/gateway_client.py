from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from ..errors import ConfigurationError
from ..utils.logger import logger
from .prompts import PromptPair


class AIGatewayClient:
    """OpenAI 호환 chat completions 게이트웨이 클라이언트

    요청 한 번에 POST 한 번. 재시도, 내부 타임아웃, 상태 코드 해석은 하지
    않는다 (상태 코드 처리는 디스패처 담당).
    """

    def __init__(
        self,
        api_key: Optional[str],
        url: str = settings.ai_gateway_url,
        model: str = settings.ai_model,
        temperature: float = settings.ai_temperature,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.api_key = api_key
        self.url = url
        self.model = model
        self.temperature = temperature
        # 테스트에서 MockTransport 클라이언트를 주입할 수 있다
        self._http_client = http_client

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, prompt: PromptPair) -> Dict[str, Any]:
        """chat completions 요청 본문"""
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": prompt.system_prompt},
            {"role": "user", "content": prompt.user_prompt},
        ]
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
        }

    async def complete(self, prompt: PromptPair) -> httpx.Response:
        """게이트웨이 호출 후 원본 응답 반환 (연결 오류는 httpx.RequestError로 전파)"""
        if not self.api_key:
            raise ConfigurationError("AI gateway API key is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = self.build_payload(prompt)

        logger.info(f"Calling AI gateway: model={self.model}")

        if self._http_client is not None:
            return await self._http_client.post(self.url, json=payload, headers=headers)

        # 타임아웃은 호스팅 런타임 정책에 맡긴다
        async with httpx.AsyncClient(timeout=None) as client:
            return await client.post(self.url, json=payload, headers=headers)


# 싱글톤 인스턴스
_gateway_client = None

def get_gateway_client() -> AIGatewayClient:
    """AIGatewayClient 인스턴스 가져오기"""
    global _gateway_client
    if _gateway_client is None:
        _gateway_client = AIGatewayClient(api_key=settings.ai_gateway_api_key)
        logger.info(f"AIGatewayClient initialized (configured={_gateway_client.configured})")
    return _gateway_client
