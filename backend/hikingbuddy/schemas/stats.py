"""
Pydantic schemas for hike statistics.
"""
from typing import Dict, List, Union
from hikingbuddy.schemas.base import CamelModel
from hikingbuddy.schemas.hike import HikeResponse
from hikingbuddy.schemas.hike_entry import HikeEntryResponse

# One-decimal string such as "20.0", or the number 0 when the target is 0
Percentage = Union[str, int]


class HikeStats(CamelModel):
    """Aggregated totals for a hike."""
    total_km_travelled: float
    total_money_spent: float
    pre_hike_spent: float
    on_trail_spent: float
    category_totals: Dict[str, float]
    distance_remaining: float
    pre_hike_budget_remaining: float
    on_trail_budget_remaining: float
    distance_percentage: Percentage
    pre_hike_budget_percentage: Percentage
    on_trail_budget_percentage: Percentage
    total_entries: int
    entries_with_distance: int


class HikeStatsResponse(CamelModel):
    """Schema for hike statistics response."""
    hike: HikeResponse
    entries: List[HikeEntryResponse]
    stats: HikeStats
