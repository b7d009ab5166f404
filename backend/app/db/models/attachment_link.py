import datetime
from sqlalchemy import Column, Integer, String, DateTime
from ..database import Base


class AttachmentLink(Base):
    __tablename__ = "attachments_table"

    id = Column(Integer, primary_key=True, index=True)
    table_id = Column(String, index=True, nullable=False)
    record_id = Column(String, index=True, nullable=False)
    field_id = Column(String, index=True, nullable=False)
    attachment_id = Column(String, unique=True, index=True, nullable=False)
    token = Column(String, nullable=False)
    name = Column(String, nullable=False)
    created_by = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.datetime.now(datetime.timezone.utc))
