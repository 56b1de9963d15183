"""Site feedback routes."""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from seatspot.auth import require_user
from seatspot.database import get_db
from seatspot.models.user import User
from seatspot.schemas.feedback import FeedbackCreate, FeedbackOut, FeedbackVote
from seatspot.services import feedback_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=FeedbackOut, status_code=status.HTTP_201_CREATED)
def create_feedback(payload: FeedbackCreate, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return feedback_service.create_feedback(db, user, payload.content, payload.category)


@router.get("/", response_model=list[FeedbackOut])
def list_feedback(db: Session = Depends(get_db)):
    return feedback_service.list_feedback(db)


@router.post("/{feedback_id}/vote", response_model=FeedbackOut)
def vote(feedback_id: str, payload: FeedbackVote, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return feedback_service.vote_on_feedback(db, feedback_id, user, payload.type)
