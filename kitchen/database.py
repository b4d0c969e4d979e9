"""Database configuration and session management."""

from collections.abc import Generator
from types import TracebackType
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from kitchen.config import get_settings

settings = get_settings()

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from kitchen import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


class UnitOfWork:
    """A group of reads and writes that becomes visible all at once or not at all.

    Used as a context manager around a session: a clean exit commits, any
    exception rolls back and propagates. Callers only ever see ``commit`` and
    ``rollback``; how the store implements the transaction stays here.

        with UnitOfWork(db) as uow:
            uow.session.add(row)
    """

    def __init__(self, session: Session):
        self.session = session
        self._finished = False

    def __enter__(self) -> "UnitOfWork":
        self._finished = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._finished:
            return
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()

    def commit(self) -> None:
        """Make every staged write visible."""
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        finally:
            self._finished = True

    def rollback(self) -> None:
        """Discard every staged write."""
        self.session.rollback()
        self._finished = True
