"""User-scoped routes."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from seatspot.auth import require_user
from seatspot.database import get_db
from seatspot.models.user import User
from seatspot.schemas.edit_request import EditRequestOut, UserReviewOut
from seatspot.services import review_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/reviews", response_model=list[UserReviewOut])
def list_my_reviews(db: Session = Depends(get_db), user: User = Depends(require_user)):
    """The caller's reviews, newest first, with pending edit requests.

    Admins get every active review, including hidden ones. Deleted reviews
    are never listed.
    """
    return [
        UserReviewOut.model_validate(review).model_copy(
            update={"pending_requests": [EditRequestOut.model_validate(er) for er in pending]}
        )
        for review, pending in review_service.list_user_reviews(db, user)
    ]
