"""SQLAlchemy mixins for common model patterns.

Provides IdentityMixin (store-assigned integer key) and TimestampMixin
(created_at / updated_at written explicitly by repositories).
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class IdentityMixin:
    """Integer primary key assigned by the database.

    BIGINT on Postgres; INTEGER on SQLite so the column aliases the rowid
    (pair with sqlite_autoincrement so deleted ids are never handed out again).
    """

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        )


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware).

    No column defaults: the repository stamps both at the moment of the write
    so that created_at == updated_at on insert.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), nullable=False, index=True)

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), nullable=False)
