"""
Hike entry model for one day's logged data.
"""
from sqlalchemy import Column, String, Float, Date, Text, JSON, Enum as SQLEnum, ForeignKey, Integer, Index
from sqlalchemy.orm import relationship
from hikingbuddy.db.base import BaseModel
import enum


class ExpenseCategory(str, enum.Enum):
    """Fixed set of expense categories."""
    TRAVEL = "Travel"
    ACCOMMODATION = "Accommodation"
    FOOD = "Food"
    EQUIPMENT = "Equipment"
    GENERAL = "General"
    PRE_HIKE = "Pre-Hike"


class WeatherTemp(str, enum.Enum):
    """Weather temperature enumeration."""
    HOT = "Hot"
    MILD = "Mild"
    COLD = "Cold"


class WeatherType(str, enum.Enum):
    """Weather type enumeration."""
    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAIN = "Rain"
    STORM = "Storm"
    WINDY = "Windy"
    SNOW = "Snow"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class HikeEntry(BaseModel):
    """Daily record for a hike."""
    __tablename__ = "hike_entries"
    
    hike_id = Column(Integer, ForeignKey("hikes.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)  # Denormalized from hike
    date = Column(Date, nullable=False)
    km_travelled = Column(Float, nullable=False, default=0)
    
    # Self-reported ratings, 1-10
    rpe = Column(Integer, nullable=False)
    mood = Column(Integer, nullable=False)
    sleep_quality = Column(Integer, nullable=False)
    overall_feeling = Column(Integer, nullable=False)
    
    calories_spent = Column(Float, nullable=False)
    weather_temp = Column(SQLEnum(WeatherTemp, values_callable=_enum_values), nullable=False)
    weather_type = Column(SQLEnum(WeatherType, values_callable=_enum_values), nullable=False)
    notes = Column(Text, nullable=False, default="")
    
    # {"name": str, "lat": float | None, "lng": float | None}
    location_from = Column(JSON, nullable=True)
    location_to = Column(JSON, nullable=True)
    
    # [{"category": str, "amount": float}, ...]; money_spent is always their sum
    expenses = Column(JSON, nullable=False, default=list)
    money_spent = Column(Float, nullable=False, default=0)
    
    # Relationships
    hike = relationship("Hike", back_populates="entries")
    user = relationship("User", back_populates="hike_entries")
    
    __table_args__ = (
        Index("ix_hike_entries_hike_date", "hike_id", "date"),
    )
