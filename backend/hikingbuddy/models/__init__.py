"""Models package - Import all models for SQLAlchemy registration."""
from hikingbuddy.models.user import User
from hikingbuddy.models.hike import Hike
from hikingbuddy.models.hike_entry import HikeEntry, ExpenseCategory, WeatherTemp, WeatherType

__all__ = [
    "User",
    "Hike",
    "HikeEntry",
    "ExpenseCategory",
    "WeatherTemp",
    "WeatherType",
]
