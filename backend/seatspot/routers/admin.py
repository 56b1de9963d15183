"""Admin-only routes: review visibility, image moderation, feedback triage, stats."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from seatspot.auth import require_admin
from seatspot.database import get_db
from seatspot.models.edit_request import EditRequest
from seatspot.models.establishment import Establishment
from seatspot.models.feedback import Feedback
from seatspot.models.image import Image
from seatspot.models.review import Review
from seatspot.models.user import User
from seatspot.schemas.feedback import FeedbackOut, FeedbackStatusUpdate
from seatspot.schemas.review import ImageModeration, ImageOut, ReviewOut, VisibilityUpdate
from seatspot.services import feedback_service, image_service, review_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.patch("/reviews/{review_id}/visibility", response_model=ReviewOut)
def set_review_visibility(
    review_id: str,
    payload: VisibilityUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return review_service.set_visibility(db, review_id, admin, payload.is_visible)


@router.get("/images", response_model=list[ImageOut])
def list_images(
    status_filter: Optional[str] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Moderation queue — pass ``?status=pending`` for images awaiting review."""
    return image_service.list_by_status(db, status_filter)


@router.patch("/images/{image_id}", response_model=ImageOut)
def moderate_image(
    image_id: str,
    payload: ImageModeration,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return image_service.moderate_image(db, image_id, admin, payload.status)


@router.get("/feedback", response_model=list[FeedbackOut])
def list_feedback(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return feedback_service.list_feedback(db)


@router.patch("/feedback/{feedback_id}", response_model=FeedbackOut)
def update_feedback_status(
    feedback_id: str,
    payload: FeedbackStatusUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return feedback_service.set_status(db, feedback_id, admin, payload.status)


@router.get("/database/stats")
def database_stats(db: Session = Depends(get_db), admin: User = Depends(require_admin)) -> dict[str, int]:
    """Row counts per table."""
    tables = {
        "users": User.user_id,
        "establishments": Establishment.establishment_id,
        "reviews": Review.review_id,
        "images": Image.image_id,
        "edit_requests": EditRequest.request_id,
        "feedback": Feedback.feedback_id,
    }
    return {name: db.query(func.count(pk)).scalar() for name, pk in tables.items()}
