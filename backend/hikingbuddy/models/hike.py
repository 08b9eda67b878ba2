"""
Hike model for tracked multi-day trips.
"""
from sqlalchemy import Column, String, Float, Boolean, ForeignKey, Integer, Index
from sqlalchemy.orm import relationship
from hikingbuddy.db.base import BaseModel


class Hike(BaseModel):
    """Hike model with distance and budget targets."""
    __tablename__ = "hikes"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    total_distance = Column(Float, nullable=False)
    pre_hike_budget = Column(Float, nullable=False, default=0)
    on_trail_budget = Column(Float, nullable=True)  # Null only on rows created before the budget split
    budget = Column(Float, nullable=False)  # Legacy alias, set from on_trail_budget at creation only
    is_active = Column(Boolean, default=True, nullable=False)  # Soft-delete marker
    
    # Relationships
    user = relationship("User", back_populates="hikes")
    entries = relationship("HikeEntry", back_populates="hike")
    
    __table_args__ = (
        Index("ix_hikes_user_active", "user_id", "is_active"),
    )
    
    @property
    def effective_on_trail_budget(self) -> float:
        """On-trail budget, falling back to the legacy budget when unset."""
        return self.on_trail_budget or self.budget or 0
