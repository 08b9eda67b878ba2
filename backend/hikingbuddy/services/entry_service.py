"""
Hike entry service for entry-related business logic.
"""
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional
from sqlalchemy.orm import Session
from hikingbuddy.models.hike import Hike
from hikingbuddy.models.hike_entry import HikeEntry
from hikingbuddy.schemas.hike_entry import ExpenseItem, HikeEntryCreate, HikeEntryUpdate, Location

logger = logging.getLogger(__name__)

EMPTY_LOCATION = {"name": "", "lat": None, "lng": None}


def calculate_money_spent(expenses: Iterable[Any]) -> float:
    """Sum of expense amounts. Missing amounts count as zero."""
    total = 0
    for expense in expenses or []:
        amount = expense.get("amount") if isinstance(expense, dict) else getattr(expense, "amount", None)
        total += amount or 0
    return total


def serialize_expenses(expenses: Iterable[ExpenseItem]) -> List[Dict[str, Any]]:
    """Expense items as JSON-storable dicts."""
    return [
        {"category": expense.category.value, "amount": expense.amount}
        for expense in expenses
    ]


def replace_expenses(entry: HikeEntry, expenses: Iterable[ExpenseItem]) -> HikeEntry:
    """Replace the whole expenses list and recompute money_spent from it."""
    entry.expenses = serialize_expenses(expenses)
    entry.money_spent = calculate_money_spent(entry.expenses)
    return entry


def _location_dict(location: Optional[Location]) -> Dict[str, Any]:
    if location is None:
        return dict(EMPTY_LOCATION)
    return location.model_dump()


def list_entries(
    hike_id: int,
    user_id: int,
    db: Session,
    entry_date: Optional[date] = None
) -> List[HikeEntry]:
    """Entries of a hike for one user in date order, optionally for a single day."""
    query = db.query(HikeEntry).filter(
        HikeEntry.hike_id == hike_id,
        HikeEntry.user_id == user_id
    )
    if entry_date is not None:
        query = query.filter(HikeEntry.date == entry_date)
    
    return query.order_by(HikeEntry.date.asc(), HikeEntry.id.asc()).all()


def list_entries_for_hike(hike_id: int, db: Session) -> List[HikeEntry]:
    """All entries of a hike in date order."""
    return db.query(HikeEntry).filter(
        HikeEntry.hike_id == hike_id
    ).order_by(HikeEntry.date.asc(), HikeEntry.id.asc()).all()


def get_entry_for_user(entry_id: int, hike_id: int, user_id: int, db: Session) -> Optional[HikeEntry]:
    """Find an entry by id, hike and owner."""
    return db.query(HikeEntry).filter(
        HikeEntry.id == entry_id,
        HikeEntry.hike_id == hike_id,
        HikeEntry.user_id == user_id
    ).first()


def create_entry(hike: Hike, user_id: int, entry_data: HikeEntryCreate, db: Session) -> HikeEntry:
    """Create an entry. money_spent is always derived from the expenses."""
    entry = HikeEntry(
        hike_id=hike.id,
        user_id=user_id,
        date=entry_data.date,
        km_travelled=entry_data.km_travelled or 0,
        rpe=entry_data.rpe,
        mood=entry_data.mood,
        sleep_quality=entry_data.sleep_quality,
        overall_feeling=entry_data.overall_feeling,
        calories_spent=entry_data.calories_spent,
        weather_temp=entry_data.weather_temp,
        weather_type=entry_data.weather_type,
        notes=entry_data.notes or "",
        location_from=_location_dict(entry_data.location_from),
        location_to=_location_dict(entry_data.location_to)
    )
    replace_expenses(entry, entry_data.expenses)
    
    db.add(entry)
    db.commit()
    db.refresh(entry)
    
    logger.info(f"Created entry {entry.id} for hike {hike.id}")
    return entry


def update_entry(entry: HikeEntry, entry_data: HikeEntryUpdate, db: Session) -> HikeEntry:
    """Apply a partial update. Expenses and locations are replaced wholesale when supplied."""
    changes = entry_data.model_dump(
        exclude_unset=True,
        exclude_none=True,
        exclude={"expenses", "location_from", "location_to"}
    )
    for field, value in changes.items():
        setattr(entry, field, value)
    
    if entry_data.expenses is not None:
        replace_expenses(entry, entry_data.expenses)
    
    if entry_data.location_from is not None:
        entry.location_from = entry_data.location_from.model_dump()
    if entry_data.location_to is not None:
        entry.location_to = entry_data.location_to.model_dump()
    
    db.commit()
    db.refresh(entry)
    return entry


def delete_entry(entry_id: int, hike_id: int, user_id: int, db: Session) -> bool:
    """Hard-delete an entry. Returns False when nothing matched."""
    deleted = db.query(HikeEntry).filter(
        HikeEntry.id == entry_id,
        HikeEntry.hike_id == hike_id,
        HikeEntry.user_id == user_id
    ).delete()
    db.commit()
    
    if deleted:
        logger.info(f"Deleted entry {entry_id} from hike {hike_id}")
    return deleted > 0
