"""
User model for authentication and user management.
"""
from sqlalchemy import Column, String, Boolean, Integer, DateTime
from sqlalchemy.orm import relationship
from hikingbuddy.db.base import BaseModel


class User(BaseModel):
    """User model with immutable username."""
    __tablename__ = "users"
    
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True, nullable=False, index=True)  # Stored lower-cased
    hashed_password = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    total_points = Column(Integer, default=0, nullable=False)
    
    # Password reset
    reset_token = Column(String(64), nullable=True, index=True)
    reset_token_expiry = Column(DateTime, nullable=True)
    
    # Relationships
    hikes = relationship("Hike", back_populates="user", cascade="all, delete-orphan")
    hike_entries = relationship("HikeEntry", back_populates="user", cascade="all, delete-orphan")
