"""
Hike service for hike-related persistence rules.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from hikingbuddy.models.hike import Hike
from hikingbuddy.schemas.hike import HikeCreate, HikeUpdate

logger = logging.getLogger(__name__)


def get_hike_for_user(hike_id: int, user_id: int, db: Session) -> Optional[Hike]:
    """Find a hike by id and owner. Soft-deleted hikes are still returned."""
    return db.query(Hike).filter(
        Hike.id == hike_id,
        Hike.user_id == user_id
    ).first()


def list_active_hikes(user_id: int, db: Session) -> List[Hike]:
    """Active hikes for a user, newest first."""
    return db.query(Hike).filter(
        Hike.user_id == user_id,
        Hike.is_active.is_(True)
    ).order_by(Hike.created_at.desc(), Hike.id.desc()).all()


def create_hike(user_id: int, hike_data: HikeCreate, db: Session) -> Hike:
    """Create a hike. The legacy budget column starts equal to the on-trail budget."""
    hike = Hike(
        user_id=user_id,
        name=hike_data.name,
        total_distance=hike_data.total_distance,
        pre_hike_budget=hike_data.pre_hike_budget or 0,
        on_trail_budget=hike_data.on_trail_budget,
        budget=hike_data.on_trail_budget,
        is_active=True
    )
    db.add(hike)
    db.commit()
    db.refresh(hike)
    
    logger.info(f"Created hike {hike.id} for user {user_id}")
    return hike


def update_hike(hike: Hike, hike_data: HikeUpdate, db: Session) -> Hike:
    """
    Apply a partial update.
    
    budget and on_trail_budget are written only when each is supplied;
    neither is copied into the other.
    """
    changes = hike_data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(hike, field, value)
    
    db.commit()
    db.refresh(hike)
    return hike


def soft_delete_hike(hike: Hike, db: Session) -> Hike:
    """Mark a hike inactive. Its entries are left untouched."""
    hike.is_active = False
    db.commit()
    
    logger.info(f"Soft-deleted hike {hike.id}")
    return hike
