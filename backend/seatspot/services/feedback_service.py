"""Site feedback — submissions, votes and admin status."""
import logging

from sqlalchemy.orm import Session

from seatspot.errors import InvalidInput, NotFound
from seatspot.models.feedback import Feedback, FeedbackCategory, FeedbackStatus
from seatspot.models.user import User
from seatspot.services import voting

logger = logging.getLogger(__name__)


def create_feedback(db: Session, author: User, content: str, category: FeedbackCategory) -> Feedback:
    feedback = Feedback(
        user_id=author.user_id,
        content=content,
        category=category,
        upvotes=0,
        downvotes=0,
        status=FeedbackStatus.pending,
    )
    db.add(feedback)
    db.commit()
    db.refresh(feedback)
    logger.info("Feedback %s (%s) submitted by user %s", feedback.feedback_id, category.value, author.user_id)
    return feedback


def list_feedback(db: Session) -> list[Feedback]:
    return db.query(Feedback).order_by(Feedback.created_at.desc()).all()


def vote_on_feedback(db: Session, feedback_id: str, voter: User, vote_type: str) -> Feedback:
    direction = voting.parse_direction(vote_type)
    return voting.cast_vote(db, Feedback, Feedback.feedback_id, feedback_id, direction, "Feedback")


def set_status(db: Session, feedback_id: str, admin: User, new_status: str) -> Feedback:
    """Informational status; any value may follow any other."""
    try:
        status_value = FeedbackStatus(new_status)
    except ValueError:
        raise InvalidInput(f"Invalid feedback status: {new_status}")

    feedback = db.query(Feedback).filter(Feedback.feedback_id == feedback_id).first()
    if not feedback:
        raise NotFound("Feedback not found")

    feedback.status = status_value
    db.commit()
    db.refresh(feedback)
    logger.info("Admin %s set feedback %s to %s", admin.user_id, feedback_id, status_value.value)
    return feedback
