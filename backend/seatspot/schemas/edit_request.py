"""Pydantic schemas for EditRequests."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from seatspot.models.edit_request import RequestType, RequestStatus
from seatspot.models.review import SeatType, ComfortRating, NoiseLevel
from seatspot.schemas.review import ReviewDetailOut, ReviewOut
from seatspot.schemas.user import UserBrief


class EditRequestCreate(BaseModel):
    """Edit or delete submission.

    For ``edit`` only the fields present in the body are proposed.  Sending
    ``noise_level`` or ``description`` as an explicit ``null`` clears it;
    leaving a field out keeps the current value.
    """

    request_type: RequestType
    seat_type: Optional[SeatType] = None
    capacity: Optional[int] = Field(default=None, ge=1)
    comfort_rating: Optional[ComfortRating] = None
    has_power_outlet: Optional[bool] = None
    noise_level: Optional[NoiseLevel] = None
    description: Optional[str] = Field(default=None, max_length=2000)

    def submitted_fields(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"request_type"})


class EditRequestOut(BaseModel):
    request_id: str
    review_id: str
    requester_id: str
    request_type: RequestType
    seat_type: Optional[SeatType] = None
    capacity: Optional[int] = None
    comfort_rating: Optional[ComfortRating] = None
    has_power_outlet: Optional[bool] = None
    noise_level: Optional[NoiseLevel] = None
    description: Optional[str] = None
    cleared_fields: list[str] = []
    status: RequestStatus
    admin_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class EditRequestDetailOut(EditRequestOut):
    review: ReviewDetailOut
    requester: UserBrief


class WriteResultOut(BaseModel):
    """Outcome of an edit/delete submission.

    ``applied`` is true when the change went straight to the review (admins);
    otherwise ``edit_request`` holds the pending request awaiting approval.
    """

    applied: bool
    message: str
    review: Optional[ReviewOut] = None
    edit_request: Optional[EditRequestOut] = None


class UserReviewOut(ReviewDetailOut):
    pending_requests: list[EditRequestOut] = []
