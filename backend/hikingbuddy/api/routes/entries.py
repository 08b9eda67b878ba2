"""
Hike entry routes for daily logs.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
from hikingbuddy.db.session import get_db
from hikingbuddy.models.user import User
from hikingbuddy.schemas.hike_entry import HikeEntryCreate, HikeEntryUpdate, HikeEntryResponse
from hikingbuddy.schemas.user import MessageResponse
from hikingbuddy.api.dependencies import get_current_user
from hikingbuddy.api.routes.hikes import check_hike_access
from hikingbuddy.services import entry_service

router = APIRouter(prefix="/hikes", tags=["entries"])


def _entry_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Entry not found"
    )


@router.get("/{hike_id}/entries", response_model=List[HikeEntryResponse])
async def list_entries(
    hike_id: int,
    date: Optional[date] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get entries for a hike in date order, optionally for a single day."""
    return entry_service.list_entries(hike_id, current_user.id, db, entry_date=date)


@router.post("/{hike_id}/entries", response_model=HikeEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_entry(
    hike_id: int,
    entry_data: HikeEntryCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Log a day on a hike."""
    hike = check_hike_access(hike_id, current_user.id, db)
    return entry_service.create_entry(hike, current_user.id, entry_data, db)


@router.put("/{hike_id}/entries/{entry_id}", response_model=HikeEntryResponse)
async def update_entry(
    hike_id: int,
    entry_id: int,
    entry_data: HikeEntryUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update an entry. A supplied expenses list replaces the stored one."""
    entry = entry_service.get_entry_for_user(entry_id, hike_id, current_user.id, db)
    if not entry:
        raise _entry_not_found()
    
    return entry_service.update_entry(entry, entry_data, db)


@router.delete("/{hike_id}/entries/{entry_id}", response_model=MessageResponse)
async def delete_entry(
    hike_id: int,
    entry_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an entry permanently."""
    if not entry_service.delete_entry(entry_id, hike_id, current_user.id, db):
        raise _entry_not_found()
    
    return {"message": "Entry deleted successfully"}
