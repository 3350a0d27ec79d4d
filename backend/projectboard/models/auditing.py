"""
ProjectBoard Backend: Audit Trail
==================================

What:  Shared created/modified columns for every table, filled in by
       SQLAlchemy mapper events.
How:   `AuditingFields` is a declarative mixin. `before_insert` stamps all
       four fields; `before_update` only refreshes modified_at/modified_by,
       so the creation stamp is immutable after the first flush.
Who:   Inherited by UserAccount and Article.

Auditor Resolution:
    The acting user is read from a ContextVar (coroutine-local, like the
    request id). With no authentication layer, nothing binds it during a
    normal request and settings.default_auditor is used.

        with use_auditor("admin"):
            await service.update_article(1, dto)
"""

from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import TIMESTAMP, String, event
from sqlalchemy.orm import Mapped, mapped_column

from projectboard.config import settings

current_auditor_var: ContextVar[Optional[str]] = ContextVar("current_auditor", default=None)


def resolve_auditor() -> str:
    """Name to record as created_by/modified_by for the current context."""
    return current_auditor_var.get() or settings.default_auditor


@contextmanager
def use_auditor(name: str) -> Iterator[None]:
    """Bind `name` as the auditor for writes flushed inside the block."""
    token = current_auditor_var.set(name)
    try:
        yield
    finally:
        current_auditor_var.reset(token)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditingFields:
    """Mixin adding the audit trail columns."""

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        comment="When the row was inserted (UTC)",
    )
    created_by: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Auditor that inserted the row",
    )
    modified_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        comment="When the row was last written (UTC)",
    )
    modified_by: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Auditor that last wrote the row",
    )


@event.listens_for(AuditingFields, "before_insert", propagate=True)
def _stamp_created(mapper, connection, target: AuditingFields) -> None:
    now = _utcnow()
    auditor = resolve_auditor()
    target.created_at = now
    target.created_by = auditor
    target.modified_at = now
    target.modified_by = auditor


@event.listens_for(AuditingFields, "before_update", propagate=True)
def _stamp_modified(mapper, connection, target: AuditingFields) -> None:
    target.modified_at = _utcnow()
    target.modified_by = resolve_auditor()
