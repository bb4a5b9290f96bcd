"""SQLAlchemy ORM model for one key-value slot."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bizdesk.infrastructure.database.base import Base


class KeyValueSlotModel(Base):
    """ORM model — maps to the 'kv_slots' table."""

    __tablename__ = "kv_slots"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<KeyValueSlotModel(key='{self.key}', size={len(self.value)})>"
