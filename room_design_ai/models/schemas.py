from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any, Union


# 프론트엔드 입력값은 숫자 또는 문자열("12")로 들어온다
Measure = Union[int, float, str]


class Action(str, Enum):
    """AI 디스패처 action"""
    ANALYZE_ROOM = "analyze-room"
    THEME_RECOMMENDATIONS = "theme-recommendations"
    COLOR_SUGGESTIONS = "color-suggestions"
    BUDGET_OPTIMIZE = "budget-optimize"


# ============ Action Payloads ============

class Dimensions(BaseModel):
    """방 치수 (ft)"""
    length: Optional[Measure] = None
    width: Optional[Measure] = None
    height: Optional[Measure] = None


class AnalyzeRoomData(BaseModel):
    """analyze-room 입력"""
    room_type: Optional[str] = Field(None, alias="roomType")
    dimensions: Optional[Dimensions] = None
    has_photo: Optional[bool] = Field(None, alias="hasPhoto")
    features: Optional[str] = None


class ThemeRecommendationsData(BaseModel):
    """theme-recommendations 입력"""
    theme: Optional[str] = None
    room_type: Optional[str] = Field(None, alias="roomType")
    dimensions: Optional[Dimensions] = None
    budget: Optional[Measure] = None


class ColorSuggestionsData(BaseModel):
    """color-suggestions 입력"""
    mood: Optional[str] = None
    room_type: Optional[str] = Field(None, alias="roomType")
    room_size: Optional[Measure] = Field(None, alias="roomSize")
    lighting: Optional[str] = None


class BudgetOptimizeData(BaseModel):
    """budget-optimize 입력"""
    total_budget: Optional[Measure] = Field(None, alias="totalBudget")
    room_size: Optional[Measure] = Field(None, alias="roomSize")
    room_type: Optional[str] = Field(None, alias="roomType")
    categories: Optional[Dict[str, Any]] = None


ActionData = Union[AnalyzeRoomData, ThemeRecommendationsData, ColorSuggestionsData, BudgetOptimizeData]

ACTION_DATA_MODELS = {
    Action.ANALYZE_ROOM: AnalyzeRoomData,
    Action.THEME_RECOMMENDATIONS: ThemeRecommendationsData,
    Action.COLOR_SUGGESTIONS: ColorSuggestionsData,
    Action.BUDGET_OPTIMIZE: BudgetOptimizeData,
}


# ============ Envelopes ============

class ResultEnvelope(BaseModel):
    """성공 응답"""
    result: Any


class ErrorEnvelope(BaseModel):
    """실패 응답"""
    error: str


# ============ Layout ============

class FurnitureItem(BaseModel):
    """배치된 가구 (좌상단 기준, 단위: px)"""
    id: str
    name: str
    x: float = 0
    y: float = 0
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    rotation: float = 0


class LayoutCheckRequest(BaseModel):
    """가구 배치 검사 요청"""
    items: List[FurnitureItem] = Field(default_factory=list)
    room_width: float = Field(400, gt=0)
    room_height: float = Field(300, gt=0)


class OverlapPair(BaseModel):
    first_id: str
    second_id: str
    overlap_area: float


class LayoutCheckResponse(BaseModel):
    """가구 배치 검사 결과"""
    ok: bool
    overlaps: List[OverlapPair]
    out_of_bounds: List[str]
    warnings: List[str]


class ClampRequest(BaseModel):
    """드래그 위치 보정 요청"""
    item: FurnitureItem
    room_width: float = Field(400, gt=0)
    room_height: float = Field(300, gt=0)


# ============ Budget ============

class BudgetEstimateRequest(BaseModel):
    """예산 배분 요청"""
    total_budget: float = Field(150000, gt=0)
    room_size: Optional[float] = Field(None, gt=0)


class BudgetAllocation(BaseModel):
    category: str
    icon: str
    min: int
    max: int
    amount: int
    percentage: int


class BudgetEstimateResponse(BaseModel):
    """예산 배분 결과"""
    total_budget: float
    room_size: Optional[float] = None
    allocations: List[BudgetAllocation]
    total_allocated: int
    over_budget: bool
    over_budget_by: int = 0
    cost_per_sq_ft: Optional[int] = None


# ============ Catalog ============

class ThemePack(BaseModel):
    """테마 팩"""
    id: str
    name: str
    description: str
    colors: List[str]
    budget: str
    tags: List[str]
    icon: str


class CatalogFurniture(BaseModel):
    """가구 카탈로그 항목"""
    name: str
    emoji: str
    width: int
    height: int


class PaintColor(BaseModel):
    name: str
    hex: str


class MoodPalette(BaseModel):
    name: str
    colors: List[str]


class ColorCatalog(BaseModel):
    """페인트 시뮬레이터 데이터"""
    wall_colors: List[PaintColor]
    moods: List[MoodPalette]
    finishes: List[str]
