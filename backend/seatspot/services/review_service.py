"""Review store — creation, projected listings, visibility and votes."""
import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from seatspot.errors import InvalidInput, NotFound
from seatspot.models.edit_request import EditRequest, RequestStatus
from seatspot.models.establishment import Establishment
from seatspot.models.review import Review, ReviewStatus
from seatspot.models.user import User
from seatspot.services import voting
from seatspot.services.ranking import rank_reviews
from seatspot.services.visibility import can_view_review, visible_reviews

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("seat_type", "capacity", "comfort_rating", "has_power_outlet")


def create_review(db: Session, establishment: Establishment, author: User, fields: dict[str, Any]) -> Review:
    missing = [f for f in REQUIRED_FIELDS if fields.get(f) is None]
    if missing:
        raise InvalidInput(f"Missing required fields: {', '.join(missing)}")
    if fields["capacity"] < 1:
        raise InvalidInput("Capacity must be at least 1")

    review = Review(
        establishment_id=establishment.establishment_id,
        user_id=author.user_id,
        seat_type=fields["seat_type"],
        capacity=fields["capacity"],
        comfort_rating=fields["comfort_rating"],
        has_power_outlet=fields["has_power_outlet"],
        noise_level=fields.get("noise_level"),
        description=fields.get("description"),
        upvotes=0,
        downvotes=0,
        is_visible=True,
        status=ReviewStatus.active,
    )
    db.add(review)
    db.commit()
    db.refresh(review)
    logger.info("Review %s created at %s by user %s", review.review_id, establishment.external_id, author.user_id)
    return review


def get_review(db: Session, review_id: str) -> Review:
    review = db.query(Review).filter(Review.review_id == review_id).first()
    if not review:
        raise NotFound("Review not found")
    return review


def get_visible_review(db: Session, review_id: str, viewer: Optional[User]) -> Review:
    """Like ``get_review`` but hidden and deleted reviews look absent."""
    review = get_review(db, review_id)
    if not can_view_review(review, viewer):
        raise NotFound("Review not found")
    return review


def list_reviews(db: Session, establishment: Establishment, viewer: Optional[User]) -> list[Review]:
    reviews = (
        db.query(Review)
        .filter(
            Review.establishment_id == establishment.establishment_id,
            Review.status == ReviewStatus.active,
        )
        .all()
    )
    return rank_reviews(visible_reviews(reviews, viewer))


def list_user_reviews(db: Session, user: User) -> list[tuple[Review, list[EditRequest]]]:
    """A user's active reviews (every active review for admins) with their pending requests."""
    query = db.query(Review).filter(Review.status == ReviewStatus.active)
    if not user.is_admin:
        query = query.filter(Review.user_id == user.user_id)
    reviews = query.order_by(Review.created_at.desc()).all()
    return [
        (r, [er for er in r.edit_requests if er.status == RequestStatus.pending])
        for r in reviews
    ]


def set_visibility(db: Session, review_id: str, admin: User, is_visible: bool) -> Review:
    """Admin-only; setting the current value again is a no-op."""
    review = get_review(db, review_id)
    if review.is_visible != is_visible:
        review.is_visible = is_visible
        db.commit()
        db.refresh(review)
        logger.info("Admin %s set review %s visibility to %s", admin.user_id, review_id, is_visible)
    return review


def vote_on_review(db: Session, review_id: str, voter: User, vote_type: str) -> Review:
    direction = voting.parse_direction(vote_type)
    get_visible_review(db, review_id, voter)
    return voting.cast_vote(db, Review, Review.review_id, review_id, direction, "Review")
