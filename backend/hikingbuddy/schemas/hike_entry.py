"""
Pydantic schemas for HikeEntry entity.
"""
from pydantic import Field
from typing import Annotated, List, Optional
from datetime import date as dt_date, datetime
from hikingbuddy.models.hike_entry import ExpenseCategory, WeatherTemp, WeatherType
from hikingbuddy.schemas.base import CamelModel


Rating = Annotated[int, Field(ge=1, le=10)]


class Location(CamelModel):
    """Named point on the trail."""
    name: str = ""
    lat: Optional[float] = None
    lng: Optional[float] = None


class ExpenseItem(CamelModel):
    """Single tagged expense within an entry."""
    category: ExpenseCategory
    amount: float = Field(ge=0)


class ExpenseResponse(CamelModel):
    """Stored expense. Category is free text so legacy rows still render."""
    category: Optional[str] = None
    amount: float = 0


class HikeEntryCreate(CamelModel):
    """Schema for entry creation. A client-supplied moneySpent is ignored."""
    date: dt_date
    km_travelled: Optional[float] = Field(default=0, ge=0)
    rpe: Rating
    mood: Rating
    sleep_quality: Rating
    overall_feeling: Rating
    calories_spent: float = Field(ge=0)
    weather_temp: WeatherTemp
    weather_type: WeatherType
    notes: Optional[str] = ""
    location_from: Optional[Location] = None
    location_to: Optional[Location] = None
    expenses: List[ExpenseItem]


class HikeEntryUpdate(CamelModel):
    """Schema for partial entry update. A supplied expenses list replaces the old one."""
    date: Optional[dt_date] = None
    km_travelled: Optional[float] = Field(default=None, ge=0)
    rpe: Optional[Rating] = None
    mood: Optional[Rating] = None
    sleep_quality: Optional[Rating] = None
    overall_feeling: Optional[Rating] = None
    calories_spent: Optional[float] = Field(default=None, ge=0)
    weather_temp: Optional[WeatherTemp] = None
    weather_type: Optional[WeatherType] = None
    notes: Optional[str] = None
    location_from: Optional[Location] = None
    location_to: Optional[Location] = None
    expenses: Optional[List[ExpenseItem]] = None


class HikeEntryResponse(CamelModel):
    """Schema for entry response."""
    id: int
    hike_id: int
    user_id: int
    date: dt_date
    km_travelled: float
    rpe: int
    mood: int
    sleep_quality: int
    overall_feeling: int
    calories_spent: float
    weather_temp: WeatherTemp
    weather_type: WeatherType
    notes: str = ""
    location_from: Optional[Location] = None
    location_to: Optional[Location] = None
    expenses: List[ExpenseResponse] = []
    money_spent: float
    created_at: datetime
    updated_at: datetime
