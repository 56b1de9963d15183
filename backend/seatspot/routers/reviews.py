"""Single-review routes: detail, votes, edit/delete submissions and images."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from seatspot.auth import get_current_user_optional, require_user
from seatspot.database import get_db
from seatspot.models.review import ReviewStatus
from seatspot.models.user import User
from seatspot.schemas.edit_request import EditRequestCreate, EditRequestOut, WriteResultOut
from seatspot.schemas.review import ImageCreate, ImageOut, ReviewDetailOut, ReviewOut, VoteOut, VoteRequest
from seatspot.services import edit_request_service, image_service, review_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/{review_id}", response_model=ReviewDetailOut)
def get_review(
    review_id: str,
    db: Session = Depends(get_db),
    viewer: Optional[User] = Depends(get_current_user_optional),
):
    return review_service.get_visible_review(db, review_id, viewer)


@router.post("/{review_id}/vote", response_model=VoteOut)
def vote(
    review_id: str,
    payload: VoteRequest,
    db: Session = Depends(get_db),
    user: User = Depends(require_user),
):
    """Up- or downvote a review.  Every call counts."""
    review = review_service.vote_on_review(db, review_id, user, payload.vote_type)
    return VoteOut(
        review_id=review.review_id,
        upvotes=review.upvotes,
        downvotes=review.downvotes,
        score=review.score,
    )


@router.post("/{review_id}/requests", response_model=WriteResultOut)
def submit_request(
    review_id: str,
    payload: EditRequestCreate,
    response: Response,
    db: Session = Depends(get_db),
    user: User = Depends(require_user),
):
    """Edit or delete a review.

    Admins write through directly.  Authors get a pending edit request that
    an admin must approve.
    """
    review = review_service.get_review(db, review_id)
    outcome = edit_request_service.resolve_write_request(
        db, user, review, payload.request_type, payload.submitted_fields()
    )
    if outcome.applied:
        message = "Review deleted successfully" if outcome.review.status == ReviewStatus.deleted else "Review updated"
        return WriteResultOut(applied=True, message=message, review=ReviewOut.model_validate(outcome.review))

    response.status_code = status.HTTP_201_CREATED
    return WriteResultOut(
        applied=False,
        message="Your edit request has been submitted for admin approval",
        edit_request=EditRequestOut.model_validate(outcome.edit_request),
    )


@router.get("/{review_id}/images", response_model=list[ImageOut])
def list_images(
    review_id: str,
    db: Session = Depends(get_db),
    viewer: Optional[User] = Depends(get_current_user_optional),
):
    review = review_service.get_visible_review(db, review_id, viewer)
    return image_service.list_images(db, review, viewer)


@router.post("/{review_id}/images", response_model=ImageOut, status_code=status.HTTP_201_CREATED)
def add_image(
    review_id: str,
    payload: ImageCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_user),
):
    """Attach an already-hosted photo.  It stays hidden from the public until approved."""
    review = review_service.get_visible_review(db, review_id, user)
    return image_service.add_image(db, review, user, payload.model_dump())
