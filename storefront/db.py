# storefront/db.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from flask import current_app
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.errors import StorageInitError

logger = logging.getLogger(__name__)

Base = declarative_base()

# Key under app.extensions where create_app() stores the Storage
EXTENSION_KEY = "storefront.storage"

CREATE_USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    email TEXT,
    password TEXT
)
"""


def create_db_engine(path: str) -> Engine:
    """SQLite engine for a single database file.

    ``":memory:"`` gives one shared connection so every session sees the
    same in-memory database (used by the tests).
    """
    if path == ":memory:":
        return create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
    # Flask serves requests on several threads
    return create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
        future=True,
    )


class Storage:
    """The process-wide database handle: one engine plus its session factory."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)

    def session(self) -> Session:
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Usage:
            with storage.session_scope() as s:
                s.add(obj)
        commit / rollback / close handled here
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        self.engine.dispose()


def init_db(path: str, preload: bool = False) -> Storage:
    """Open the database, make sure the users table exists, optionally seed it.

    Every failure is raised as StorageInitError; nothing is retried.
    """
    # the seed service imports the model, which needs Base from this module
    from storefront.services.seed_service import insert_mock_users

    engine = None
    try:
        engine = create_db_engine(path)
        with engine.begin() as conn:
            conn.execute(text(CREATE_USERS_TABLE))
    except SQLAlchemyError as e:
        if engine is not None:
            engine.dispose()
        raise StorageInitError(f"failed to open database or create users table: {e}") from e

    storage = Storage(engine)
    logger.debug("Database ready at %s", path)

    if preload:
        try:
            with storage.session_scope() as session:
                insert_mock_users(session)
        except SQLAlchemyError as e:
            storage.close()
            raise StorageInitError(f"failed to insert mock users: {e}") from e

    return storage


# New session from the Storage attached to the current app
def get_db_session() -> Session:
    return current_app.extensions[EXTENSION_KEY].session()
