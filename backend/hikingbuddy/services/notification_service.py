"""
User notifications for account events.

Mail delivery is not wired up; events are recorded through logging so a
delivery backend can be attached here later.
"""
import logging
from hikingbuddy.core.config import settings
from hikingbuddy.models.user import User

logger = logging.getLogger(__name__)


def build_reset_url(token: str) -> str:
    """Frontend link that carries a password reset token."""
    return f"{settings.FRONTEND_URL.rstrip('/')}/reset-password/{token}"


def send_password_reset(user: User, reset_url: str) -> None:
    """Notify a user that a password reset was requested."""
    logger.info(f"Password reset link issued for user {user.id}")
    logger.debug(f"Reset link for {user.email}: {reset_url}")


def send_password_changed(user: User) -> None:
    """Notify a user that their password was changed."""
    logger.info(f"Password changed for user {user.id}")
