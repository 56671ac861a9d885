"""
SQLAlchemy-backed session store.

Each lobby is one row: the code, the map seed and the whole game state as a
JSON text column. Writes overwrite the column; mutations in this process are
serialized by a lock, but separate processes writing the same row can still
lose each other's updates.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from sqlalchemy import Column, Integer, String, Text, create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from deep_diggers.config import get_settings
from deep_diggers.models import GameSession, GameState

from .errors import SessionNotFound

logger = logging.getLogger(__name__)

Base = declarative_base()


class SessionRecord(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, nullable=False, unique=True)
    seed = Column(String, nullable=False)
    state = Column(Text, nullable=False)   # GameState as JSON


def _make_engine(database_url: str):
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, usable from the threadpool that runs sync routes.
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url)


class SessionStore:
    def __init__(self, database_url: str) -> None:
        self._engine = _make_engine(database_url)
        self._db = sessionmaker(bind=self._engine, expire_on_commit=False)
        self._lock = threading.Lock()
        Base.metadata.create_all(self._engine)

    def exists(self, code: str) -> bool:
        with self._db() as db:
            return db.query(SessionRecord.id).filter(SessionRecord.code == code).first() is not None

    def get(self, code: str) -> GameSession | None:
        with self._db() as db:
            record = db.query(SessionRecord).filter(SessionRecord.code == code).first()
            if record is None:
                return None
            return GameSession(
                code=record.code,
                seed=record.seed,
                state=GameState.model_validate_json(record.state),
            )

    def create(self, code: str, seed: str, state: GameState) -> GameSession:
        with self._db() as db:
            db.add(SessionRecord(code=code, seed=seed, state=state.model_dump_json()))
            db.commit()
        logger.info("[store] Session row created code=%s", code)
        return GameSession(code=code, seed=seed, state=state)

    def try_create(self, code: str, seed: str, state: GameState) -> GameSession | None:
        """Insert a new row, or return None if ``code`` is already taken."""
        try:
            return self.create(code, seed, state)
        except IntegrityError:
            return None

    def save(self, session: GameSession) -> None:
        with self._db() as db:
            updated = (
                db.query(SessionRecord)
                .filter(SessionRecord.code == session.code)
                .update({SessionRecord.state: session.state.model_dump_json()})
            )
            db.commit()
        if not updated:
            raise SessionNotFound(session.code)

    def mutate(self, code: str, fn: Callable[[GameState], bool | None]) -> GameSession:
        """
        Load the session, apply ``fn`` to its state and write it back.

        ``fn`` returning False skips the write. Exceptions from ``fn``
        propagate and leave the stored state untouched.
        """
        with self._lock:
            session = self.get(code)
            if session is None:
                raise SessionNotFound(code)
            if fn(session.state) is not False:
                self.save(session)
            return session

    def clear(self) -> None:
        with self._db() as db:
            db.query(SessionRecord).delete()
            db.commit()


store = SessionStore(get_settings().database_url)
