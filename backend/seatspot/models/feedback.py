"""Feedback ORM model — site feedback with its own vote counters."""
import enum
import uuid
from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from seatspot.database import Base
from seatspot.models.review import utcnow


class FeedbackCategory(str, enum.Enum):
    general = "general"
    bug = "bug"
    feature = "feature"
    improvement = "improvement"


class FeedbackStatus(str, enum.Enum):
    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"
    declined = "declined"


class Feedback(Base):
    __tablename__ = "feedback"

    feedback_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(SAEnum(FeedbackCategory), nullable=False, default=FeedbackCategory.general)
    upvotes = Column(Integer, nullable=False, default=0)
    downvotes = Column(Integer, nullable=False, default=0)
    status = Column(SAEnum(FeedbackStatus), nullable=False, default=FeedbackStatus.pending)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    author = relationship("User")
