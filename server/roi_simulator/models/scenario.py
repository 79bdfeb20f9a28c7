from __future__ import annotations

import uuid
from typing import Annotated, Any

from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from roi_simulator.db.base import Base
from roi_simulator.models.mixins import TimestampMixin

Identifier = Annotated[str, mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))]

# JSONB on PostgreSQL, plain JSON text elsewhere.
Document = JSON().with_variant(JSONB(), "postgresql")


class Scenario(TimestampMixin, Base):
    __tablename__ = "scenarios"

    id: Mapped[Identifier]
    scenario_name: Mapped[str] = mapped_column(String(255), nullable=False, default="", index=True)
    inputs: Mapped[dict[str, Any]] = mapped_column(Document, nullable=False)
    results: Mapped[dict[str, Any]] = mapped_column(Document, nullable=False)

    def __repr__(self) -> str:
        return f"<Scenario {self.id} {self.scenario_name!r}>"
