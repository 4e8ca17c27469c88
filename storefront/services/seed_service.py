# storefront/services/seed_service.py
import logging

from sqlalchemy.orm import Session

from storefront.models.user_model import User

logger = logging.getLogger(__name__)

MOCK_USER_COUNT = 10


def mock_users():
    for i in range(1, MOCK_USER_COUNT + 1):
        yield User(
            name=f"User{i}",
            email=f"user{i}@example.com",
            password=f"password{i}",
        )


def insert_mock_users(session: Session) -> int:
    """Add User1..User10 to the session and flush; the caller commits.

    A failing insert raises and the whole seed is rolled back by the caller.
    """
    logger.info("Inserting mock users into the database")
    count = 0
    for user in mock_users():
        session.add(user)
        session.flush()
        count += 1
    return count
