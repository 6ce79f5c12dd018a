import datetime
import uuid

from sqlalchemy import BigInteger, Boolean, Column, DateTime, Integer, String, Text
from app.db.session import Base


def _utcnow():
    return datetime.datetime.now(datetime.timezone.utc)


class Property(Base):
    __tablename__ = "properties"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    full_address = Column(String(500))
    price = Column(BigInteger, nullable=False, default=0)
    type = Column(String(30), nullable=False, default="House")  # see PropertyType
    status = Column(String(50), default="For Sale")
    beds = Column(Integer, nullable=False, default=1)
    baths = Column(Integer, nullable=False, default=1)
    sqft = Column(Integer, nullable=False, default=1000)
    garage = Column(Integer, nullable=False, default=1)
    description = Column(Text, nullable=False)
    is_rental = Column(Boolean, nullable=False, default=False)
    image_url = Column(String(1000))
    image = Column(String(1000))  # mirrors image_url for older clients
    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True)
