"""가구 배치 검사 (겹침, 방 범위, 드래그 위치 보정)"""

from typing import Iterator, List, Tuple

from shapely.affinity import rotate
from shapely.geometry import Polygon, box

from ..models.schemas import FurnitureItem, OverlapPair

DEFAULT_ROOM_WIDTH = 400
DEFAULT_ROOM_HEIGHT = 300

# 이 값 이하의 공유 면적/거리는 경계 접촉 또는 회전 부동소수 오차
TOLERANCE = 1e-6


def item_to_polygon(item: FurnitureItem) -> Polygon:
    """가구 footprint 폴리곤 (x, y는 회전 전 좌상단, 회전은 중심 기준)"""
    footprint = box(item.x, item.y, item.x + item.width, item.y + item.height)
    if item.rotation % 360:
        footprint = rotate(footprint, item.rotation, origin="center")
    return footprint


def overlap_area(item_a: FurnitureItem, item_b: FurnitureItem) -> float:
    """두 가구의 공유 면적 (맞닿기만 하면 0)"""
    area = item_to_polygon(item_a).intersection(item_to_polygon(item_b)).area
    return area if area > TOLERANCE else 0.0


def items_overlap(item_a: FurnitureItem, item_b: FurnitureItem) -> bool:
    return overlap_area(item_a, item_b) > 0


def _overlapping_pairs(items: List[FurnitureItem]) -> Iterator[Tuple[FurnitureItem, FurnitureItem, float]]:
    for i, item_a in enumerate(items):
        for item_b in items[i + 1:]:
            area = overlap_area(item_a, item_b)
            if area > 0:
                yield item_a, item_b, area


def find_overlaps(items: List[FurnitureItem]) -> List[OverlapPair]:
    """겹치는 가구 쌍 전체 (입력 순서, 앞 항목이 first)"""
    return [
        OverlapPair(first_id=item_a.id, second_id=item_b.id, overlap_area=round(area, 2))
        for item_a, item_b, area in _overlapping_pairs(items)
    ]


def is_within_room(
    item: FurnitureItem,
    room_width: float = DEFAULT_ROOM_WIDTH,
    room_height: float = DEFAULT_ROOM_HEIGHT
) -> bool:
    """회전된 footprint가 방 안에 완전히 들어가는지"""
    min_x, min_y, max_x, max_y = item_to_polygon(item).bounds
    return (
        min_x >= -TOLERANCE and
        min_y >= -TOLERANCE and
        max_x <= room_width + TOLERANCE and
        max_y <= room_height + TOLERANCE
    )


def _shift_into_range(low: float, high: float, limit: float) -> float:
    # 방보다 큰 가구는 왼쪽/위쪽 벽에 맞춘다
    if low < 0:
        return -low
    if high > limit:
        return limit - high
    return 0.0


def clamp_position(
    item: FurnitureItem,
    room_width: float = DEFAULT_ROOM_WIDTH,
    room_height: float = DEFAULT_ROOM_HEIGHT
) -> Tuple[float, float]:
    """드래그한 가구가 방 밖으로 나가지 않도록 (x, y) 보정

    회전된 footprint 기준으로 벗어난 만큼만 이동시킨다.
    """
    min_x, min_y, max_x, max_y = item_to_polygon(item).bounds
    x = item.x + _shift_into_range(min_x, max_x, room_width)
    y = item.y + _shift_into_range(min_y, max_y, room_height)
    return x, y


def check_layout(
    items: List[FurnitureItem],
    room_width: float = DEFAULT_ROOM_WIDTH,
    room_height: float = DEFAULT_ROOM_HEIGHT
) -> Tuple[List[OverlapPair], List[str], List[str]]:
    """겹침 + 방 범위 검사

    Returns:
        (겹치는 쌍, 방 밖 가구 id, 경고 문구)
    """
    overlaps = []
    warnings = []
    for item_a, item_b, area in _overlapping_pairs(items):
        overlaps.append(OverlapPair(first_id=item_a.id, second_id=item_b.id, overlap_area=round(area, 2)))
        warnings.append(f"{item_a.name} overlaps with {item_b.name}")

    out_of_bounds = []
    for item in items:
        if not is_within_room(item, room_width, room_height):
            out_of_bounds.append(item.id)
            warnings.append(f"{item.name} is outside the room")

    return overlaps, out_of_bounds, warnings
