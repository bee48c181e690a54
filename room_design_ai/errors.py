"""AI 디스패처 오류 정의

모든 오류는 클라이언트에 노출할 HTTP 상태 코드와 메시지를 함께 가진다.
디스패처의 바깥 경계에서 한 번에 `{"error": message}` 응답으로 변환된다.
"""
from typing import Optional


RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
CREDITS_EXHAUSTED_MESSAGE = "AI credits exhausted. Please add credits in workspace settings."
SERVICE_UNAVAILABLE_MESSAGE = "AI service temporarily unavailable"
UNKNOWN_ACTION_MESSAGE = "Unknown action"


class DesignAIError(Exception):
    """클라이언트에 그대로 전달되는 오류의 기본 클래스"""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(DesignAIError):
    """필수 설정(API 키 등) 누락"""

    status_code = 500


class InvalidRequestError(DesignAIError):
    """요청 본문 또는 data 필드 형식 오류"""

    status_code = 400


class UnknownActionError(InvalidRequestError):
    """지원하지 않는 action"""

    def __init__(self, action: Optional[str] = None):
        super().__init__(UNKNOWN_ACTION_MESSAGE)
        self.action = action


class UpstreamRateLimited(DesignAIError):
    """게이트웨이 429"""

    status_code = 429

    def __init__(self):
        super().__init__(RATE_LIMIT_MESSAGE)


class UpstreamBillingError(DesignAIError):
    """게이트웨이 402"""

    status_code = 402

    def __init__(self):
        super().__init__(CREDITS_EXHAUSTED_MESSAGE)


class UpstreamOtherError(DesignAIError):
    """기타 게이트웨이 오류 (상세 내용은 서버 로그에만 남긴다)"""

    status_code = 500

    def __init__(self, upstream_status: int, upstream_body: str = ""):
        super().__init__(SERVICE_UNAVAILABLE_MESSAGE)
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body


class GatewayTransportError(DesignAIError):
    """게이트웨이 연결 실패 (DNS, connection refused 등)"""

    status_code = 500
