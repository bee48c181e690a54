"""action별 프롬프트 템플릿

각 action은 (system prompt, user prompt) 쌍으로 변환된다. 입력이 비어 있으면
프롬프트 안에 기본값을 그대로 채워 넣으며, 모델에게 돌려받을 JSON 구조를
user prompt에 예시로 포함한다.
"""
import json
from typing import Any, Callable, Dict, Mapping, NamedTuple, Union

from pydantic import BaseModel

from ..models.schemas import (
    ACTION_DATA_MODELS,
    Action,
    ActionData,
    AnalyzeRoomData,
    ThemeRecommendationsData,
    ColorSuggestionsData,
    BudgetOptimizeData,
)


class PromptPair(NamedTuple):
    system_prompt: str
    user_prompt: str


PERSONA = "You are GruhaBuddy"


def _or(value: Any, default: Any) -> Any:
    """빈 값(None, "", 0)이면 기본값"""
    return value if value else default


def _fmt(value: Any) -> str:
    """12.0 -> "12" 처럼 정수 float는 정수로 표기"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _build_analyze_room(data: AnalyzeRoomData) -> PromptPair:
    dims = data.dimensions
    length = _or(dims.length if dims else None, 12)
    width = _or(dims.width if dims else None, 10)
    height = _or(dims.height if dims else None, 9)

    system_prompt = (
        f"{PERSONA}, an expert Indian interior design AI assistant. You specialize in designing homes "
        "optimized for Indian families, small spaces, Vastu compliance, and budget constraints. "
        "Always respond in valid JSON format."
    )
    user_prompt = f"""Analyze this room and provide comprehensive design recommendations:
Room Type: {_or(data.room_type, "Bedroom")}
Dimensions: {_fmt(length)}ft × {_fmt(width)}ft × {_fmt(height)}ft
Has Photo: {"true" if data.has_photo else "false"}
Additional Features: {_or(data.features, "standard room")}

Respond with this exact JSON structure:
{{
  "roomAnalysis": {{
    "area": "number in sq ft",
    "roomType": "detected type",
    "naturalLight": "Good/Moderate/Low",
    "ventilation": "Good/Moderate/Low",
    "windowsEstimate": "number",
    "doorsEstimate": "number",
    "vastuCompliance": "percentage string"
  }},
  "colorRecommendations": [
    {{"name": "color name", "hex": "#hexcode", "usage": "wall/accent/ceiling", "reason": "why this color"}}
  ],
  "furnitureRecommendations": [
    {{"item": "name", "placement": "where to place", "reason": "why", "estimatedCost": "₹ amount"}}
  ],
  "spaceOptimization": ["tip1", "tip2", "tip3"],
  "vastuTips": ["tip1", "tip2"],
  "estimatedBudget": {{
    "paint": "₹ range",
    "furniture": "₹ range",
    "flooring": "₹ range",
    "lighting": "₹ range",
    "decor": "₹ range",
    "total": "₹ range"
  }},
  "designScore": "number out of 100",
  "lightingSuggestions": [
    {{"type": "light type", "location": "where", "reason": "why"}}
  ]
}}"""
    return PromptPair(system_prompt, user_prompt)


def _build_theme_recommendations(data: ThemeRecommendationsData) -> PromptPair:
    dims = data.dimensions
    theme = _or(data.theme, "Budget Friendly Home")
    length = _or(dims.length if dims else None, 12)
    width = _or(dims.width if dims else None, 10)

    system_prompt = (
        f"{PERSONA}, an expert Indian interior design AI. Generate detailed theme-specific design "
        "recommendations. Always respond in valid JSON."
    )
    user_prompt = f"""Generate a complete design plan for the "{theme}" theme:
Room Type: {_or(data.room_type, "Living Room")}
Dimensions: {_fmt(length)}ft × {_fmt(width)}ft
Budget: {_fmt(_or(data.budget, "₹1-3 Lakhs"))}

Respond with this JSON structure:
{{
  "themeName": "{theme}",
  "description": "2-3 sentence theme description",
  "colorPalette": [{{"name": "name", "hex": "#hex", "usage": "where to use"}}],
  "furniture": [{{"item": "name", "style": "style description", "estimatedCost": "₹X", "whereToBuy": "vendor suggestion"}}],
  "decor": [{{"item": "name", "description": "brief desc", "estimatedCost": "₹X"}}],
  "lighting": [{{"type": "type", "location": "where", "mood": "warm/cool/neutral"}}],
  "flooring": {{"type": "recommendation", "reason": "why", "estimatedCost": "₹X"}},
  "totalBudget": "₹ range",
  "vastuNotes": ["note1", "note2"],
  "spaceOptimization": ["tip1", "tip2"],
  "designScore": "number out of 100"
}}"""
    return PromptPair(system_prompt, user_prompt)


def _build_color_suggestions(data: ColorSuggestionsData) -> PromptPair:
    system_prompt = (
        f"{PERSONA}, an expert color consultant for Indian homes. Suggest colors based on room context, "
        "mood, and Vastu principles. Always respond in valid JSON."
    )
    user_prompt = f"""Suggest a color scheme for:
Mood: {_or(data.mood, "Calm")}
Room Type: {_or(data.room_type, "Bedroom")}
Room Size: {_fmt(_or(data.room_size, "120 sq ft"))}
Lighting: {_or(data.lighting, "Natural + Artificial")}

Respond with this JSON:
{{
  "wallColors": [{{"name": "name", "hex": "#hex", "finish": "matte/glossy/textured", "reason": "why"}}],
  "accentColors": [{{"name": "name", "hex": "#hex", "usage": "where to use"}}],
  "ceilingColor": {{"name": "name", "hex": "#hex", "reason": "why"}},
  "colorHarmony": "description of how colors work together",
  "vastuColorTips": ["tip1", "tip2"],
  "paintBrands": [{{"brand": "Asian Paints/Berger/etc", "shadeName": "shade", "estimatedCost": "₹X per litre"}}],
  "moodEffect": "how the colors affect mood"
}}"""
    return PromptPair(system_prompt, user_prompt)


def _build_budget_optimize(data: BudgetOptimizeData) -> PromptPair:
    # 카테고리 배분은 압축 JSON으로 그대로 전달
    categories = json.dumps(data.categories or {}, ensure_ascii=False, separators=(",", ":"))

    system_prompt = (
        f"{PERSONA}, a budget optimization expert for Indian home interiors. Provide realistic INR "
        "estimates based on actual Indian market prices. Always respond in valid JSON."
    )
    user_prompt = f"""Optimize this interior design budget:
Total Budget: ₹{_fmt(_or(data.total_budget, 150000))}
Room Size: {_fmt(_or(data.room_size, 120))} sq ft
Room Type: {_or(data.room_type, "Bedroom")}
Categories: {categories}

Respond with this JSON:
{{
  "optimizedBudget": [
    {{"category": "Paint & Finish", "recommended": "₹X", "percentage": "X%", "tips": "saving tip"}},
    {{"category": "Flooring", "recommended": "₹X", "percentage": "X%", "tips": "saving tip"}},
    {{"category": "Furniture", "recommended": "₹X", "percentage": "X%", "tips": "saving tip"}},
    {{"category": "Lighting", "recommended": "₹X", "percentage": "X%", "tips": "saving tip"}},
    {{"category": "Decor", "recommended": "₹X", "percentage": "X%", "tips": "saving tip"}},
    {{"category": "Curtains & Textiles", "recommended": "₹X", "percentage": "X%", "tips": "saving tip"}}
  ],
  "totalEstimated": "₹X",
  "savingTips": ["tip1", "tip2", "tip3"],
  "vendorSuggestions": [
    {{"name": "vendor/store", "type": "online/offline", "specialty": "what they sell", "priceRange": "budget/mid/premium"}}
  ],
  "cheaperAlternatives": [
    {{"original": "expensive item", "alternative": "cheaper option", "savings": "₹X saved"}}
  ]
}}"""
    return PromptPair(system_prompt, user_prompt)


PROMPT_BUILDERS: Dict[Action, Callable[[Any], PromptPair]] = {
    Action.ANALYZE_ROOM: _build_analyze_room,
    Action.THEME_RECOMMENDATIONS: _build_theme_recommendations,
    Action.COLOR_SUGGESTIONS: _build_color_suggestions,
    Action.BUDGET_OPTIMIZE: _build_budget_optimize,
}


def build_prompt(
    action: Union[Action, str],
    data: Union[ActionData, Mapping[str, Any], None] = None
) -> PromptPair:
    """action과 입력으로 프롬프트 쌍 생성

    data는 검증된 모델과 원본 dict 모두 받는다. 알 수 없는 action은
    디스패처에서 미리 걸러지므로 여기서는 처리하지 않는다.
    """
    action = Action(action)
    if not isinstance(data, BaseModel):
        data = ACTION_DATA_MODELS[action].model_validate(dict(data or {}))
    return PROMPT_BUILDERS[action](data)
