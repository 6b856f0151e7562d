"""Unit of work: one session, one batch of staged changes, one commit."""

from __future__ import annotations

from types import TracebackType
from typing import Any

from loguru import logger
from sqlalchemy import event
from sqlmodel import Session

from src.product_api.entities.service.product.repository import ProductRepository


class UnitOfWork:
    """Own a session for the lifetime of one request.

    Repositories bound to :attr:`session` stage inserts, updates and deletes;
    :meth:`commit` flushes them in a single transaction and reports how many
    rows were affected. Closing without committing discards staged work.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._affected = 0
        self._closed = False
        self.products = ProductRepository(session)
        event.listen(session, "after_flush", self._count_flushed_rows)

    @property
    def session(self) -> Session:
        return self._session

    def _count_flushed_rows(self, session: Session, flush_context: Any) -> None:
        # new/dirty/deleted still describe the pre-flush state at this point.
        # A staged update counts even when every value was rewritten unchanged.
        self._affected += len(session.new) + len(session.dirty) + len(session.deleted)

    def commit(self) -> int:
        """Commit staged changes and return the number of affected rows."""
        try:
            self._session.commit()
        except Exception:
            self._affected = 0
            self._session.rollback()
            raise

        affected, self._affected = self._affected, 0
        logger.debug("Unit of work committed", affected_rows=affected)
        return affected

    def rollback(self) -> None:
        """Discard every change staged since the last commit."""
        self._session.rollback()
        self._affected = 0

    def close(self) -> None:
        """Release the session, discarding anything not yet committed."""
        if self._closed:
            return
        if self._session.new or self._session.dirty or self._session.deleted:
            logger.warning("Unit of work closed with uncommitted changes; rolling back")
        self.rollback()
        event.remove(self._session, "after_flush", self._count_flushed_rows)
        self._session.close()
        self._closed = True

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
