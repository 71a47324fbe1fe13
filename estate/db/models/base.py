"""
Shared SQLAlchemy base and helpers.
"""
from datetime import datetime, UTC

from sqlalchemy import Column, DateTime, Integer, event
from sqlalchemy.orm import Session, declarative_base, with_loader_criteria


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


Base = declarative_base()


class SoftDeleteMixin:
    """Integer key, audit timestamps and a ``deleted_at`` marker.

    Rows with ``deleted_at`` set are hidden from every ORM select issued
    through a ``Session`` (including relationship loads) unless the query
    carries ``execution_options(include_deleted=True)``.
    """
    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)


@event.listens_for(Session, "do_orm_execute")
def _hide_soft_deleted(execute_state):
    if (
        execute_state.is_select
        and not execute_state.is_column_load
        and not execute_state.is_relationship_load
        and not execute_state.execution_options.get("include_deleted", False)
    ):
        execute_state.statement = execute_state.statement.options(
            with_loader_criteria(
                SoftDeleteMixin,
                lambda cls: cls.deleted_at.is_(None),
                include_aliases=True,
            )
        )
