"""
Authentication routes for registration, login and password reset.
"""
import logging
from datetime import datetime, timedelta
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from hikingbuddy.core.config import settings
from hikingbuddy.db.session import get_db
from hikingbuddy.schemas.user import (
    UserCreate, UserLogin, UserPublic, AuthResponse, PasswordResetRequest,
    PasswordResetConfirm, ResetTokenStatus, MessageResponse
)
from hikingbuddy.models.user import User
from hikingbuddy.core.security import (
    verify_password, get_password_hash, create_access_token, generate_reset_token
)
from hikingbuddy.services.notification_service import (
    build_reset_url, send_password_reset, send_password_changed
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

RESET_REQUESTED_MESSAGE = "If an account with that email exists, a password reset link has been sent"
INVALID_RESET_TOKEN = "Invalid or expired reset token"


def _issue_token(user: User) -> str:
    return create_access_token(data={"sub": user.username, "user_id": user.id})


def _check_password_length(password: str) -> None:
    if len(password) < settings.MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password is required and must be at least {settings.MIN_PASSWORD_LENGTH} characters long"
        )


def _duplicate_user() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="User with this email or username already exists"
    )


def find_existing_user(username: str, email: str, db: Session):
    """User already holding this username or email, if any."""
    return db.query(User).filter(
        or_(User.email == email, User.username == username)
    ).first()


def _find_by_valid_reset_token(token: str, db: Session):
    return db.query(User).filter(
        User.reset_token == token,
        User.reset_token_expiry > datetime.utcnow()
    ).first()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user."""
    _check_password_length(user_data.password)
    email = user_data.email.lower()
    if find_existing_user(user_data.username, email, db):
        raise _duplicate_user()
    
    new_user = User(
        username=user_data.username,
        email=email,
        hashed_password=get_password_hash(user_data.password)
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same name or email
        db.rollback()
        raise _duplicate_user()
    db.refresh(new_user)
    
    logger.info(f"Registered user {new_user.id}")
    return {
        "message": "User registered successfully",
        "token": _issue_token(new_user),
        "user": UserPublic.model_validate(new_user)
    }


@router.post("/login", response_model=AuthResponse)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login with email or username and get a JWT token."""
    user = db.query(User).filter(
        or_(User.email == credentials.identifier.lower(), User.username == credentials.identifier)
    ).first()
    
    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.info(f"Failed login for '{credentials.identifier}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )
    
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive"
        )
    
    logger.info(f"Login success for user {user.id}")
    return {
        "message": "Login successful",
        "token": _issue_token(user),
        "user": UserPublic.model_validate(user)
    }


@router.post("/reset-password", response_model=MessageResponse)
async def request_password_reset(request: PasswordResetRequest, db: Session = Depends(get_db)):
    """Issue a reset token. The response does not reveal whether the email exists."""
    user = db.query(User).filter(User.email == request.email.lower()).first()
    if user:
        user.reset_token = generate_reset_token()
        user.reset_token_expiry = datetime.utcnow() + timedelta(minutes=settings.RESET_TOKEN_EXPIRE_MINUTES)
        db.commit()
        send_password_reset(user, build_reset_url(user.reset_token))
    
    return {"message": RESET_REQUESTED_MESSAGE}


@router.get("/reset-password/{token}", response_model=ResetTokenStatus)
async def verify_reset_token(token: str, db: Session = Depends(get_db)):
    """Check that a reset token exists and has not expired."""
    user = _find_by_valid_reset_token(token, db)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_RESET_TOKEN
        )
    
    return {"message": "Token is valid", "username": user.username}


@router.post("/reset-password/{token}", response_model=MessageResponse)
async def reset_password(token: str, payload: PasswordResetConfirm, db: Session = Depends(get_db)):
    """Set a new password and consume the reset token."""
    _check_password_length(payload.password)
    
    user = _find_by_valid_reset_token(token, db)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_RESET_TOKEN
        )
    
    user.hashed_password = get_password_hash(payload.password)
    user.reset_token = None
    user.reset_token_expiry = None
    db.commit()
    
    send_password_changed(user)
    return {"message": "Password has been reset successfully"}
