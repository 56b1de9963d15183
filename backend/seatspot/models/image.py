"""Image ORM model — photo attached to a review, gated by moderation."""
import enum
import uuid
from sqlalchemy import Column, String, Boolean, Integer, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from seatspot.database import Base
from seatspot.models.review import utcnow


class ModerationStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class Image(Base):
    __tablename__ = "images"

    image_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    review_id = Column(String(36), ForeignKey("reviews.review_id"), nullable=False, index=True)
    url = Column(String(1000), nullable=False)
    storage_key = Column(String(255), nullable=False)
    width = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    format = Column(String(20), nullable=True)
    moderation_status = Column(SAEnum(ModerationStatus), nullable=False, default=ModerationStatus.pending)
    moderated_by = Column(String(36), ForeignKey("users.user_id"), nullable=True)
    moderated_at = Column(DateTime(timezone=True), nullable=True)
    is_visible = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    review = relationship("Review", back_populates="images")
