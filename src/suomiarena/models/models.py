"""Database models for local progress storage."""
from sqlalchemy import Column, String, Text

from suomiarena.models.base import Base, TimestampMixin


class StorageEntry(Base, TimestampMixin):
    """One key/value blob of device-local storage."""

    __tablename__ = "storage_entries"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<StorageEntry key={self.key!r} size={len(self.value or '')}>"
