from datetime import datetime, timezone
from typing import Annotated

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Python-side defaults keep sub-second resolution on SQLite, where CURRENT_TIMESTAMP is whole seconds.
Timestamp = Annotated[datetime, mapped_column(DateTime(timezone=True), default=utcnow, index=True, nullable=False)]


class TimestampMixin:
    created_at: Mapped[Timestamp]
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )
