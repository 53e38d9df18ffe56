# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from notes_api.shared.config import DatabaseConfig
from notes_api.shared.errors import InfrastructureError
from notes_api.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _engine_kwargs(config: DatabaseConfig) -> dict[str, Any]:
    if config.url.startswith("sqlite"):
        kwargs: dict[str, Any] = {
            "connect_args": {
                "check_same_thread": False,
                "timeout": int(config.pool_timeout),
            }
        }
        if _is_memory_sqlite(config.url):
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "pool_pre_ping": True,
        "pool_size": config.pool_size,
        "max_overflow": config.max_overflow,
        "pool_timeout": config.pool_timeout,
    }


class Database:
    """Engine plus session factory built once from :class:`DatabaseConfig`."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = create_engine(
            config.url, echo=False, future=True, **_engine_kwargs(config)
        )
        self._sessions = scoped_session(
            sessionmaker(
                bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
            )
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self._sessions()
        logger.debug("db.session: opened scoped session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed scoped session")
        except IntegrityError:
            # repositories map constraint violations to domain errors
            session.rollback()
            raise
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error(f"db.session: {type(exc).__name__}, rolled back")
            raise InfrastructureError("database_error") from exc
        except Exception:
            logger.debug("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            self._sessions.remove()

    def init_db(self) -> None:
        from notes_api.infrastructure.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def check(self) -> bool:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self._sessions.remove()
        self.engine.dispose()
