from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from typing import List

from ..catalog import THEME_PACKS
from ..models.schemas import ThemePack
from ..services.dispatcher import DesignAIDispatcher, get_dispatcher
from ..utils.logger import logger

router = APIRouter(prefix="/api", tags=["design"])


@router.get("/themes", response_model=List[ThemePack])
async def get_themes():
    """사용 가능한 테마 팩 목록 반환"""
    return THEME_PACKS


@router.post("/room-design-ai")
async def room_design_ai(
    request: Request,
    dispatcher: DesignAIDispatcher = Depends(get_dispatcher)
):
    """AI 디자인 요청 처리

    Body:
        {"action": "analyze-room" | "theme-recommendations" | "color-suggestions" | "budget-optimize",
         "data": {...}}

    Returns:
        200 {"result": ...} 또는 4xx/5xx {"error": "..."}
    """
    raw_body = await request.body()
    logger.info(f"AI request received ({len(raw_body)} bytes)")

    outcome = await dispatcher.dispatch(raw_body)
    return Response(
        content=outcome.content,
        status_code=outcome.status_code,
        media_type="application/json"
    )
