"""Visibility projection — what a given viewer may see.

``viewer`` is a ``User`` or ``None`` for anonymous callers.  Every read path
that returns reviews or images goes through these helpers.
"""
from typing import Optional

from seatspot.models.image import Image, ModerationStatus
from seatspot.models.review import Review, ReviewStatus
from seatspot.models.user import User


def _is_admin(viewer: Optional[User]) -> bool:
    return viewer is not None and viewer.is_admin


def _is_author(review: Review, viewer: Optional[User]) -> bool:
    return viewer is not None and review.user_id == viewer.user_id


def can_view_review(review: Review, viewer: Optional[User]) -> bool:
    if review.status != ReviewStatus.active:
        return False
    return review.is_visible or _is_author(review, viewer) or _is_admin(viewer)


def can_view_image(image: Image, viewer: Optional[User]) -> bool:
    review = image.review
    if not can_view_review(review, viewer):
        return False
    if _is_admin(viewer) or _is_author(review, viewer):
        return True
    return image.moderation_status == ModerationStatus.approved and image.is_visible


def visible_reviews(reviews: list[Review], viewer: Optional[User]) -> list[Review]:
    return [r for r in reviews if can_view_review(r, viewer)]


def visible_images(images: list[Image], viewer: Optional[User]) -> list[Image]:
    return [i for i in images if can_view_image(i, viewer)]
