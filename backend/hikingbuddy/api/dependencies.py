"""
Shared route dependencies.
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from typing import Optional
from hikingbuddy.db.session import get_db
from hikingbuddy.models.user import User
from hikingbuddy.core.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to an active user."""
    if credentials is None:
        raise _unauthenticated("Not authenticated")
    
    payload = decode_access_token(credentials.credentials)
    if not payload or payload.get("user_id") is None:
        raise _unauthenticated("Invalid or expired token")
    
    user = db.query(User).filter(User.id == payload["user_id"]).first()
    if not user or not user.is_active:
        raise _unauthenticated("Invalid or expired token")
    
    return user
