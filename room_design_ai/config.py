"""애플리케이션 설정"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """환경변수 기반 설정"""

    # API Keys (없으면 AI 호출 시점에 500 처리)
    ai_gateway_api_key: Optional[str] = None

    # Application
    app_name: str = "Room Design AI API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (클라이언트 SDK가 보내는 헤더 전체 허용)
    cors_allow_origin: str = "*"
    cors_allow_headers: List[str] = [
        "authorization",
        "x-client-info",
        "apikey",
        "content-type",
        "x-supabase-client-platform",
        "x-supabase-client-platform-version",
        "x-supabase-client-runtime",
        "x-supabase-client-runtime-version",
    ]

    # AI Gateway (OpenAI 호환 chat completions)
    ai_gateway_url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    ai_model: str = "google/gemini-3-flash-preview"
    ai_temperature: float = 0.3

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/app.log"

    class Config:
        env_file = ".env"
        case_sensitive = False


# 전역 설정 인스턴스
settings = Settings()
