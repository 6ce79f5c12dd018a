import datetime
import uuid

from sqlalchemy import Column, DateTime, String, Text
from app.db.session import Base


class Consultation(Base):
    __tablename__ = "consultations"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(30), nullable=True)
    message = Column(Text, nullable=True)
    property_id = Column(String(36), nullable=True)  # not a foreign key, listings may be deleted
    status = Column(String(30), default="pending")  # pending | contacted | scheduled | closed
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.datetime.now(datetime.timezone.utc),
        index=True,
    )
