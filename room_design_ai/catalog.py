"""정적 카탈로그 데이터 (테마 팩, 가구, 페인트 색상, 예산 카테고리)"""
from typing import List, NamedTuple

from .models.schemas import CatalogFurniture, MoodPalette, PaintColor, ThemePack


class BudgetCategory(NamedTuple):
    name: str
    min: int
    max: int
    icon: str


ROOM_TYPES: List[str] = ["Bedroom", "Living Room", "Kitchen", "Office", "Bathroom", "Dining Room"]

# 미리 정의된 테마 팩
THEME_PACKS: List[ThemePack] = [
    ThemePack(
        id="budget",
        name="Budget Friendly Home",
        description="Affordable yet stylish design for cost-conscious families",
        colors=["#F5E6D3", "#C4A882", "#8B7355", "#E8D5B7"],
        budget="₹50K - ₹1.5L",
        tags=["Affordable", "Practical"],
        icon="💰"
    ),
    ThemePack(
        id="south-indian",
        name="South Indian Traditional",
        description="Rich wood tones, brass accents, kolam-inspired patterns",
        colors=["#8B4513", "#DAA520", "#FAEBD7", "#556B2F"],
        budget="₹1L - ₹3L",
        tags=["Traditional", "Cultural"],
        icon="🪔"
    ),
    ThemePack(
        id="modern-bachelor",
        name="Modern Bachelor Room",
        description="Sleek minimal design with smart storage and tech-friendly",
        colors=["#2D3142", "#4F5D75", "#BFC0C0", "#FFFFFF"],
        budget="₹80K - ₹2L",
        tags=["Minimal", "Modern"],
        icon="🖥️"
    ),
    ThemePack(
        id="family",
        name="Family-Friendly Design",
        description="Safe, spacious, and child-friendly with warm colors",
        colors=["#F2CC8F", "#81B29A", "#E07A5F", "#F4F1DE"],
        budget="₹1.5L - ₹4L",
        tags=["Family", "Safe"],
        icon="👨‍👩‍👧‍👦"
    ),
    ThemePack(
        id="vastu",
        name="Vastu-Based Layout",
        description="Aligned with Vastu Shastra principles for harmony and positive energy",
        colors=["#FFD700", "#FF8C00", "#FFEFD5", "#8FBC8F"],
        budget="₹1L - ₹3L",
        tags=["Vastu", "Spiritual"],
        icon="🕉️"
    ),
    ThemePack(
        id="luxury",
        name="Premium Luxury",
        description="High-end finishes, imported materials, designer furniture",
        colors=["#1C1C1C", "#C5A47E", "#EDE8E2", "#4A3728"],
        budget="₹5L - ₹15L",
        tags=["Luxury", "Premium"],
        icon="✨"
    ),
]

# 룸 디자이너 가구 (px 단위 footprint)
FURNITURE_CATALOG: List[CatalogFurniture] = [
    CatalogFurniture(name="Bed (Queen)", emoji="🛏️", width=80, height=60),
    CatalogFurniture(name="Wardrobe", emoji="🗄️", width=60, height=30),
    CatalogFurniture(name="Study Desk", emoji="🖥️", width=50, height=30),
    CatalogFurniture(name="Sofa (3-Seat)", emoji="🛋️", width=80, height=35),
    CatalogFurniture(name="Dining Table", emoji="🪑", width=60, height=40),
    CatalogFurniture(name="Bookshelf", emoji="📚", width=40, height=20),
    CatalogFurniture(name="Side Table", emoji="🪴", width=25, height=25),
    CatalogFurniture(name="TV Unit", emoji="📺", width=60, height=20),
]

WALL_COLORS: List[PaintColor] = [
    PaintColor(name="Terracotta Dream", hex="#C35831"),
    PaintColor(name="Warm Cream", hex="#F5E6D3"),
    PaintColor(name="Sage Leaf", hex="#8FAE8B"),
    PaintColor(name="Golden Sand", hex="#D4A853"),
    PaintColor(name="Clay Rose", hex="#C9827A"),
    PaintColor(name="Ocean Deep", hex="#2D5F7C"),
    PaintColor(name="Ivory White", hex="#FEFCF3"),
    PaintColor(name="Charcoal", hex="#3A3A3A"),
    PaintColor(name="Marigold", hex="#E8A317"),
    PaintColor(name="Dusty Blue", hex="#7C9EB2"),
    PaintColor(name="Plum Wine", hex="#6B3557"),
    PaintColor(name="Moss Green", hex="#556B2F"),
]

MOODS: List[MoodPalette] = [
    MoodPalette(name="Calm", colors=["#E8D5B7", "#C4A882", "#8B7355", "#F5E6D3"]),
    MoodPalette(name="Energetic", colors=["#E07A5F", "#F2CC8F", "#81B29A", "#F4F1DE"]),
    MoodPalette(name="Luxury", colors=["#2D3142", "#C5A47E", "#EDE8E2", "#4F5D75"]),
]

PAINT_FINISHES: List[str] = ["Matte", "Glossy", "Textured", "Satin"]

# 예산 카테고리별 최소/최대 (₹)
BUDGET_CATEGORIES: List[BudgetCategory] = [
    BudgetCategory("Paint & Wall Finish", 5000, 40000, "🎨"),
    BudgetCategory("Flooring", 10000, 80000, "🪵"),
    BudgetCategory("Furniture", 20000, 200000, "🛋️"),
    BudgetCategory("Lighting", 3000, 25000, "💡"),
    BudgetCategory("Decor & Accessories", 2000, 30000, "🖼️"),
    BudgetCategory("Curtains & Textiles", 2000, 20000, "🪟"),
]
