"""
Hike management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from hikingbuddy.db.session import get_db
from hikingbuddy.models.user import User
from hikingbuddy.models.hike import Hike
from hikingbuddy.schemas.hike import HikeCreate, HikeUpdate, HikeResponse
from hikingbuddy.schemas.user import MessageResponse
from hikingbuddy.schemas.hike_entry import HikeEntryResponse
from hikingbuddy.schemas.stats import HikeStatsResponse
from hikingbuddy.api.dependencies import get_current_user
from hikingbuddy.services import hike_service, entry_service
from hikingbuddy.services.stats_service import summarize_hike

router = APIRouter(prefix="/hikes", tags=["hikes"])


def check_hike_access(hike_id: int, user_id: int, db: Session) -> Hike:
    """Return the user's hike, or 404 whether it is missing or someone else's."""
    hike = hike_service.get_hike_for_user(hike_id, user_id, db)
    if not hike:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Hike not found"
        )
    return hike


@router.get("", response_model=List[HikeResponse])
async def list_hikes(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List active hikes for current user, newest first."""
    return hike_service.list_active_hikes(current_user.id, db)


@router.post("", response_model=HikeResponse, status_code=status.HTTP_201_CREATED)
async def create_hike(
    hike_data: HikeCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new hike."""
    return hike_service.create_hike(current_user.id, hike_data, db)


@router.get("/{hike_id}", response_model=HikeResponse)
async def get_hike(
    hike_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get hike details."""
    return check_hike_access(hike_id, current_user.id, db)


@router.put("/{hike_id}", response_model=HikeResponse)
async def update_hike(
    hike_id: int,
    hike_data: HikeUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update hike fields that are present in the request."""
    hike = check_hike_access(hike_id, current_user.id, db)
    return hike_service.update_hike(hike, hike_data, db)


@router.delete("/{hike_id}", response_model=MessageResponse)
async def delete_hike(
    hike_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Soft-delete a hike."""
    hike = check_hike_access(hike_id, current_user.id, db)
    hike_service.soft_delete_hike(hike, db)
    return {"message": "Hike deleted successfully"}


@router.get("/{hike_id}/stats", response_model=HikeStatsResponse)
async def get_hike_stats(
    hike_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get distance and budget statistics for a hike."""
    hike = check_hike_access(hike_id, current_user.id, db)
    entries = entry_service.list_entries_for_hike(hike.id, db)
    
    summary = summarize_hike(hike, entries)
    return HikeStatsResponse(
        hike=HikeResponse.model_validate(summary.hike),
        entries=[HikeEntryResponse.model_validate(e) for e in summary.entries],
        stats=summary.stats
    )
