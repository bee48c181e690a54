"""규칙 기반 예산 배분

예산이 카테고리 최소 합계와 최대 합계 사이 어디쯤인지(ratio)를 구해
모든 카테고리에 같은 비율로 min~max 사이 금액을 배분한다.
"""
import math
from typing import List, Optional

from ..catalog import BUDGET_CATEGORIES
from ..models.schemas import BudgetAllocation, BudgetEstimateResponse


def _round(value: float) -> int:
    """0.5는 올림 (round()의 은행가 반올림 대신)"""
    return math.floor(value + 0.5)


def budget_ratio(total_budget: float) -> float:
    """0(최소 합계 이하) ~ 1(최대 합계 이상)"""
    total_min = sum(c.min for c in BUDGET_CATEGORIES)
    total_max = sum(c.max for c in BUDGET_CATEGORIES)
    return max(0.0, min(1.0, (total_budget - total_min) / (total_max - total_min)))


def allocate_budget(total_budget: float) -> List[BudgetAllocation]:
    """카테고리별 배분 금액과 전체 예산 대비 비율(%)"""
    ratio = budget_ratio(total_budget)

    allocations = []
    for category in BUDGET_CATEGORIES:
        amount = _round(category.min + (category.max - category.min) * ratio)
        allocations.append(BudgetAllocation(
            category=category.name,
            icon=category.icon,
            min=category.min,
            max=category.max,
            amount=amount,
            percentage=_round(amount / total_budget * 100)
        ))
    return allocations


def estimate_budget(total_budget: float, room_size: Optional[float] = None) -> BudgetEstimateResponse:
    """예산 배분 + 초과 여부"""
    allocations = allocate_budget(total_budget)
    total_allocated = sum(a.amount for a in allocations)
    over_budget = total_allocated > total_budget

    return BudgetEstimateResponse(
        total_budget=total_budget,
        room_size=room_size,
        allocations=allocations,
        total_allocated=total_allocated,
        over_budget=over_budget,
        over_budget_by=_round(total_allocated - total_budget) if over_budget else 0,
        cost_per_sq_ft=_round(total_allocated / room_size) if room_size else None
    )
