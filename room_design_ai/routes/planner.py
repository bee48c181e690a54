from fastapi import APIRouter
from typing import List

from ..catalog import FURNITURE_CATALOG, MOODS, PAINT_FINISHES, ROOM_TYPES, WALL_COLORS
from ..models.schemas import (
    BudgetEstimateRequest,
    BudgetEstimateResponse,
    CatalogFurniture,
    ClampRequest,
    ColorCatalog,
    FurnitureItem,
    LayoutCheckRequest,
    LayoutCheckResponse,
)
from ..services.budget import estimate_budget
from ..services.layout import check_layout, clamp_position
from ..utils.logger import logger

router = APIRouter(prefix="/api", tags=["planner"])


@router.get("/catalog/furniture", response_model=List[CatalogFurniture])
async def get_furniture_catalog():
    """룸 디자이너 가구 목록"""
    return FURNITURE_CATALOG


@router.get("/catalog/colors", response_model=ColorCatalog)
async def get_color_catalog():
    """페인트 시뮬레이터 색상/무드/마감재"""
    return ColorCatalog(wall_colors=WALL_COLORS, moods=MOODS, finishes=PAINT_FINISHES)


@router.get("/catalog/room-types", response_model=List[str])
async def get_room_types():
    return ROOM_TYPES


@router.post("/layout/check", response_model=LayoutCheckResponse)
async def check_furniture_layout(request: LayoutCheckRequest):
    """가구 겹침 및 방 범위 검사"""
    overlaps, out_of_bounds, warnings = check_layout(
        request.items,
        request.room_width,
        request.room_height
    )

    logger.info(f"Layout checked: {len(request.items)} items, {len(warnings)} warning(s)")

    return LayoutCheckResponse(
        ok=not warnings,
        overlaps=overlaps,
        out_of_bounds=out_of_bounds,
        warnings=warnings
    )


@router.post("/layout/clamp", response_model=FurnitureItem)
async def clamp_furniture_position(request: ClampRequest):
    """드래그가 끝난 가구 위치를 방 안으로 보정"""
    x, y = clamp_position(request.item, request.room_width, request.room_height)
    return request.item.model_copy(update={"x": x, "y": y})


@router.post("/budget/estimate", response_model=BudgetEstimateResponse)
async def estimate_room_budget(request: BudgetEstimateRequest):
    """예산 슬라이더 기반 카테고리별 배분"""
    estimate = estimate_budget(request.total_budget, request.room_size)

    if estimate.over_budget:
        logger.info(f"Budget ₹{request.total_budget:.0f} is short by ₹{estimate.over_budget_by}")

    return estimate
