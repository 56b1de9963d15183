"""EditRequest ORM model — staged change to a review awaiting admin approval."""
import uuid
import enum
from sqlalchemy import Column, String, Text, Boolean, Integer, DateTime, JSON, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from seatspot.database import Base
from seatspot.models.review import SeatType, ComfortRating, NoiseLevel, utcnow


class RequestType(str, enum.Enum):
    edit = "edit"
    delete = "delete"


class RequestStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# Review columns an edit request may propose.
PROPOSABLE_FIELDS = (
    "seat_type",
    "capacity",
    "comfort_rating",
    "has_power_outlet",
    "noise_level",
    "description",
)

# Subset that may be explicitly cleared to NULL.
CLEARABLE_FIELDS = ("noise_level", "description")


class EditRequest(Base):
    __tablename__ = "edit_requests"

    request_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    review_id = Column(String(36), ForeignKey("reviews.review_id"), nullable=False, index=True)
    requester_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    request_type = Column(SAEnum(RequestType), nullable=False)

    # NULL means "not proposed" unless the column name is in cleared_fields.
    seat_type = Column(SAEnum(SeatType), nullable=True)
    capacity = Column(Integer, nullable=True)
    comfort_rating = Column(SAEnum(ComfortRating), nullable=True)
    has_power_outlet = Column(Boolean, nullable=True)
    noise_level = Column(SAEnum(NoiseLevel), nullable=True)
    description = Column(Text, nullable=True)
    cleared_fields = Column(JSON, nullable=False, default=list)

    status = Column(SAEnum(RequestStatus), nullable=False, default=RequestStatus.pending, index=True)
    admin_id = Column(String(36), ForeignKey("users.user_id"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    review = relationship("Review", back_populates="edit_requests")
    requester = relationship("User", foreign_keys=[requester_id])
    admin = relationship("User", foreign_keys=[admin_id])

    def proposed_changes(self) -> dict:
        """Column values this request would write to its review."""
        changes = {}
        for field in PROPOSABLE_FIELDS:
            value = getattr(self, field)
            if value is not None:
                changes[field] = value
            elif field in (self.cleared_fields or []):
                changes[field] = None
        return changes
