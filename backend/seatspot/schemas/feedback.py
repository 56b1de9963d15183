"""Pydantic schemas for Feedback."""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, Field

from seatspot.models.feedback import FeedbackCategory, FeedbackStatus
from seatspot.schemas.user import UserBrief


class FeedbackCreate(BaseModel):
    content: str = Field(min_length=1, max_length=5000)
    category: FeedbackCategory = FeedbackCategory.general


class FeedbackOut(BaseModel):
    feedback_id: str
    user_id: str
    content: str
    category: FeedbackCategory
    upvotes: int
    downvotes: int
    status: FeedbackStatus
    created_at: datetime
    author: UserBrief

    model_config = {"from_attributes": True}


class FeedbackVote(BaseModel):
    type: str  # up, down


class FeedbackStatusUpdate(BaseModel):
    status: str  # pending, in-progress, completed, declined
