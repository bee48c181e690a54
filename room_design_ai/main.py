from fastapi import FastAPI, Request, Response

from .routes import design, planner
from .config import settings
from .utils.logger import logger

logger.info(f"Starting {settings.app_name} v{settings.app_version}")

# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_name,
    description="GruhaBuddy interior design AI dispatch API",
    version=settings.app_version,
    debug=settings.debug
)

# 모든 응답에 동일한 CORS 헤더
CORS_HEADERS = {
    "Access-Control-Allow-Origin": settings.cors_allow_origin,
    "Access-Control-Allow-Headers": ", ".join(settings.cors_allow_headers),
}


@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    """OPTIONS preflight는 라우팅 전에 빈 200으로 응답"""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


logger.info(f"CORS enabled for origin: {settings.cors_allow_origin}")

# 라우터 등록
app.include_router(design.router)
app.include_router(planner.router)


@app.get("/")
async def home():
    """서비스 정보"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": [
            "POST /api/room-design-ai",
            "GET  /api/themes",
            "GET  /api/catalog/furniture",
            "GET  /api/catalog/colors",
            "GET  /api/catalog/room-types",
            "POST /api/layout/check",
            "POST /api/layout/clamp",
            "POST /api/budget/estimate",
        ]
    }


@app.get("/health")
async def health_check():
    """헬스 체크 및 시스템 상태"""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "ai_gateway_api_key_configured": bool(settings.ai_gateway_api_key),
        "config": {
            "ai_gateway_url": settings.ai_gateway_url,
            "model": settings.ai_model,
            "temperature": settings.ai_temperature
        }
    }


@app.on_event("startup")
async def startup_event():
    """애플리케이션 시작 시 실행"""
    logger.info("="*50)
    logger.info("Application startup")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"AI gateway configured: {bool(settings.ai_gateway_api_key)}")
    logger.info(f"Model: {settings.ai_model} (temperature={settings.ai_temperature})")
    logger.info("="*50)


@app.on_event("shutdown")
async def shutdown_event():
    """애플리케이션 종료 시 실행"""
    logger.info("Application shutdown")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )
