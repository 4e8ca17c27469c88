# storefront/services/login_service.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.models.user_model import User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def get_user_by_credentials(session: Session, username: str, password: str):
    # exact match on both columns, no hashing
    return (session.query(User)
            .filter(User.name == username, User.password == password)
            .first())


def login_user(session: Session, username: str, password: str) -> tuple[bool, str]:
    """Returns (True, email) on a match, otherwise (False, "Invalid credentials").

    A database error is reported to the caller exactly like a wrong password.
    """
    try:
        user = get_user_by_credentials(session, username, password)
    except SQLAlchemyError as e:
        logger.warning("Login lookup failed: %s", e)
        session.rollback()
        return False, INVALID_CREDENTIALS

    if user is None:
        return False, INVALID_CREDENTIALS
    return True, user.email
