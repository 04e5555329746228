from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase

from app.domain.exceptions import PersistenceUnavailableError


class Base(DeclarativeBase):
    pass


@lru_cache(maxsize=4)
def get_engine(dsn: str):
    return create_engine(dsn, future=True, pool_pre_ping=True)


@contextmanager
def persistence_errors(operation: str):
    try:
        yield
    except SQLAlchemyError as exc:
        raise PersistenceUnavailableError(f"{operation} failed: {exc.__class__.__name__}") from exc
