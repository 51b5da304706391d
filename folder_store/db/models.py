"""SQLAlchemy models for the Folder Store schema."""

from sqlalchemy import Boolean, Column, DateTime, Index, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Create base class for models
Base = declarative_base()


class FolderRow(Base):
    """Folders table model."""
    __tablename__ = 'folders'

    id = Column(Uuid, primary_key=True)
    org_id = Column(Uuid, nullable=False)
    name = Column(Text, nullable=False)
    deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index('folders_org_created', 'org_id', 'created_at', 'id'),
    )
