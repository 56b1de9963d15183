"""Pydantic schemas for Reviews, Establishments and Images."""
from __future__ import annotations
from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field, StrictBool

from seatspot.models.review import SeatType, ComfortRating, NoiseLevel, ReviewStatus
from seatspot.models.image import ModerationStatus
from seatspot.schemas.user import UserBrief


class EstablishmentOut(BaseModel):
    establishment_id: str
    external_id: str
    name: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    external_rating: Optional[float] = None
    phone: Optional[str] = None

    model_config = {"from_attributes": True}


class ReviewCreate(BaseModel):
    seat_type: SeatType
    capacity: int = Field(ge=1)
    comfort_rating: ComfortRating
    has_power_outlet: bool
    noise_level: Optional[NoiseLevel] = None
    description: Optional[str] = Field(default=None, max_length=2000)


class ReviewOut(BaseModel):
    review_id: str
    establishment_id: str
    user_id: str
    seat_type: SeatType
    capacity: int
    comfort_rating: ComfortRating
    has_power_outlet: bool
    noise_level: Optional[NoiseLevel] = None
    description: Optional[str] = None
    upvotes: int
    downvotes: int
    score: float = 0.0
    is_visible: bool
    status: ReviewStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ReviewDetailOut(ReviewOut):
    establishment: EstablishmentOut
    author: UserBrief


class VoteRequest(BaseModel):
    vote_type: str  # upvote, downvote


class VoteOut(BaseModel):
    review_id: str
    upvotes: int
    downvotes: int
    score: float


class VisibilityUpdate(BaseModel):
    is_visible: StrictBool


class ImageCreate(BaseModel):
    url: str = Field(min_length=1, max_length=1000)
    storage_key: str = Field(min_length=1, max_length=255)
    width: Optional[int] = Field(default=None, ge=1)
    height: Optional[int] = Field(default=None, ge=1)
    format: Optional[str] = Field(default=None, max_length=20)


class ImageOut(BaseModel):
    image_id: str
    review_id: str
    url: str
    storage_key: str
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None
    moderation_status: ModerationStatus
    moderated_by: Optional[str] = None
    moderated_at: Optional[datetime] = None
    is_visible: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class ImageModeration(BaseModel):
    status: Literal["approved", "rejected"]
