"""Review ("seat") ORM model."""
import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, Boolean, Integer, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from seatspot.database import Base
from seatspot.services.ranking import relevance_score


class SeatType(str, enum.Enum):
    chair = "chair"
    sofa = "sofa"
    bench = "bench"
    stool = "stool"
    booth = "booth"


class ComfortRating(str, enum.Enum):
    comfortable = "Comfortable"
    moderate = "Moderate"
    hard = "Hard"
    torn = "Torn"


class NoiseLevel(str, enum.Enum):
    quiet = "Quiet"
    moderate = "Moderate"
    loud = "Loud"


class ReviewStatus(str, enum.Enum):
    active = "active"
    deleted = "deleted"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Review(Base):
    __tablename__ = "reviews"

    review_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    establishment_id = Column(
        String(36), ForeignKey("establishments.establishment_id"), nullable=False, index=True
    )
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    seat_type = Column(SAEnum(SeatType), nullable=False)
    capacity = Column(Integer, nullable=False)
    comfort_rating = Column(SAEnum(ComfortRating), nullable=False)
    has_power_outlet = Column(Boolean, nullable=False, default=False)
    noise_level = Column(SAEnum(NoiseLevel), nullable=True)
    description = Column(Text, nullable=True)
    upvotes = Column(Integer, nullable=False, default=0)
    downvotes = Column(Integer, nullable=False, default=0)
    is_visible = Column(Boolean, nullable=False, default=True)
    status = Column(SAEnum(ReviewStatus), nullable=False, default=ReviewStatus.active)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    establishment = relationship("Establishment", back_populates="reviews")
    author = relationship("User")
    edit_requests = relationship("EditRequest", back_populates="review")
    images = relationship("Image", back_populates="review")

    @property
    def score(self) -> float:
        return relevance_score(self.upvotes or 0, self.downvotes or 0)
