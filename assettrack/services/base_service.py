"""Shared service base with all-or-nothing unit-of-work behavior."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import assettrack.database.db as db_module
from assettrack.database.errors import translate_db_error


class BaseService:
    """Base class for services that open one session per unit of work."""

    def __init__(self, session_factory: Callable[[], Session] | None = None) -> None:
        self._session_factory = session_factory or db_module.get_session_factory()

    @contextmanager
    def unit_of_work(self) -> Iterator[Session]:
        """Commit when the block completes; roll back on any exception, cancellation included."""
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise translate_db_error(exc) from exc
        except BaseException:
            db.rollback()
            raise
        finally:
            db.close()
