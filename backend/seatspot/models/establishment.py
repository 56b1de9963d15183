"""Establishment ORM model — local cache of a business-search provider venue."""
import uuid
from sqlalchemy import Column, String, Float, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from seatspot.database import Base


class Establishment(Base):
    __tablename__ = "establishments"

    establishment_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    external_id = Column(String(100), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    zip_code = Column(String(20), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    external_rating = Column(Float, nullable=True)
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    reviews = relationship("Review", back_populates="establishment")
