"""
Pydantic schemas for Hike entity.
"""
from pydantic import AfterValidator, Field, field_validator
from typing import Annotated, Optional
from datetime import datetime
from hikingbuddy.schemas.base import CamelModel


def _strip_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Name must not be empty")
    return v


HikeName = Annotated[str, AfterValidator(_strip_name)]


class HikeCreate(CamelModel):
    """Schema for hike creation."""
    name: HikeName
    total_distance: float = Field(gt=0)
    pre_hike_budget: Optional[float] = Field(default=0, ge=0)
    on_trail_budget: float = Field(gt=0)
    
    @field_validator("pre_hike_budget")
    @classmethod
    def default_pre_hike_budget(cls, v: Optional[float]) -> float:
        """Missing or null pre-hike budget means no pre-hike spending planned."""
        return v or 0


class HikeUpdate(CamelModel):
    """Schema for partial hike update. Fields are applied independently."""
    name: Optional[HikeName] = None
    total_distance: Optional[float] = Field(default=None, gt=0)
    pre_hike_budget: Optional[float] = Field(default=None, ge=0)
    on_trail_budget: Optional[float] = Field(default=None, gt=0)
    budget: Optional[float] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
    

class HikeResponse(CamelModel):
    """Schema for hike response."""
    id: int
    user_id: int
    name: str
    total_distance: float
    pre_hike_budget: float
    on_trail_budget: Optional[float] = None
    budget: float
    is_active: bool
    created_at: datetime
    updated_at: datetime
