"""Review images and their moderation."""
import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from seatspot.errors import Forbidden, InvalidInput, NotFound
from seatspot.models.image import Image, ModerationStatus
from seatspot.models.review import Review, utcnow
from seatspot.models.user import User
from seatspot.services.visibility import visible_images

logger = logging.getLogger(__name__)


def add_image(db: Session, review: Review, uploader: User, fields: dict[str, Any]) -> Image:
    """Register an image already stored at the image host.  Starts pending."""
    if review.user_id != uploader.user_id and not uploader.is_admin:
        raise Forbidden("Only the review author can add images")

    image = Image(
        review_id=review.review_id,
        moderation_status=ModerationStatus.pending,
        is_visible=True,
        **fields,
    )
    db.add(image)
    db.commit()
    db.refresh(image)
    logger.info("Image %s added to review %s by user %s", image.image_id, review.review_id, uploader.user_id)
    return image


def list_images(db: Session, review: Review, viewer: Optional[User]) -> list[Image]:
    images = (
        db.query(Image)
        .filter(Image.review_id == review.review_id)
        .order_by(Image.created_at)
        .all()
    )
    return visible_images(images, viewer)


def list_by_status(db: Session, moderation_status: Optional[str] = None) -> list[Image]:
    query = db.query(Image)
    if moderation_status:
        try:
            query = query.filter(Image.moderation_status == ModerationStatus(moderation_status))
        except ValueError:
            raise InvalidInput(f"Invalid moderation status: {moderation_status}")
    return query.order_by(Image.created_at).all()


def moderate_image(db: Session, image_id: str, admin: User, moderation_status: str) -> Image:
    """Set an image's moderation outcome.  Already-moderated images may be re-moderated."""
    if not admin.is_admin:
        raise Forbidden("Only admins can moderate images")
    try:
        new_status = ModerationStatus(moderation_status)
    except ValueError:
        raise InvalidInput(f"Invalid moderation status: {moderation_status}")
    if new_status == ModerationStatus.pending:
        raise InvalidInput("Moderation status must be approved or rejected")

    image = db.query(Image).filter(Image.image_id == image_id).first()
    if not image:
        raise NotFound("Image not found")

    image.moderation_status = new_status
    image.moderated_by = admin.user_id
    image.moderated_at = utcnow()
    db.commit()
    db.refresh(image)
    logger.info("Image %s %s by admin %s", image_id, new_status.value, admin.user_id)
    return image
