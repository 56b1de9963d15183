"""Edit-request workflow — the only path by which reviews change after creation.

Writes against a review go through ``resolve_write_request``, which picks a
policy from the actor's capabilities:

- ``DirectMutationPolicy`` (admins): the change is applied to the review at
  once and no EditRequest row is written.
- ``ProposalPolicy`` (everyone else): only the review's author may submit,
  and the change is staged as a pending EditRequest.

Pending requests are settled by ``resolve_edit_request``.  The state machine
is ``pending -> approved | rejected``; both outcomes are terminal.  The
pending -> resolved step is a conditional UPDATE guarded on the current
status, so two admins racing on the same request cannot both apply it.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy.orm import Session

from seatspot.errors import Conflict, Forbidden, InvalidInput, NotFound
from seatspot.models.edit_request import (
    CLEARABLE_FIELDS,
    PROPOSABLE_FIELDS,
    EditRequest,
    RequestStatus,
    RequestType,
)
from seatspot.models.review import Review, ReviewStatus, utcnow
from seatspot.models.user import User

logger = logging.getLogger(__name__)

RESOLVE_ACTIONS = {
    "approve": RequestStatus.approved,
    "reject": RequestStatus.rejected,
}


@dataclass
class WriteOutcome:
    """Result of a write attempt: either an applied review or a staged request."""

    applied: bool
    review: Review
    edit_request: Optional[EditRequest] = None


def _validate_changes(request_type: RequestType, changes: dict[str, Any]) -> dict[str, Any]:
    """Check an edit payload; absent keys mean unchanged, None means clear."""
    if request_type == RequestType.delete:
        return {}

    unknown = set(changes) - set(PROPOSABLE_FIELDS)
    if unknown:
        raise InvalidInput(f"Unknown fields: {', '.join(sorted(unknown))}")
    if not changes:
        raise InvalidInput("An edit request must propose at least one change")

    for field, value in changes.items():
        if value is None and field not in CLEARABLE_FIELDS:
            raise InvalidInput(f"Field '{field}' cannot be cleared")
        if field == "capacity" and value is not None and value < 1:
            raise InvalidInput("Capacity must be at least 1")
    return changes


def _apply_changes(review: Review, changes: dict[str, Any]) -> None:
    for field, value in changes.items():
        setattr(review, field, value)
    review.updated_at = utcnow()


def _soft_delete(review: Review) -> None:
    review.status = ReviewStatus.deleted
    review.updated_at = utcnow()


def _require_active(review: Review) -> None:
    if review.status != ReviewStatus.active:
        raise Conflict("Review has been deleted")


class WritePolicy(ABC):
    """How a given actor's write against a review is carried out."""

    @abstractmethod
    def submit(
        self,
        db: Session,
        actor: User,
        review: Review,
        request_type: RequestType,
        changes: dict[str, Any],
    ) -> WriteOutcome:
        """Carry out the write, or stage it, and report which happened."""


class DirectMutationPolicy(WritePolicy):
    """Write-through: the change lands on the review immediately."""

    def submit(
        self,
        db: Session,
        actor: User,
        review: Review,
        request_type: RequestType,
        changes: dict[str, Any],
    ) -> WriteOutcome:
        _require_active(review)
        if request_type == RequestType.delete:
            _soft_delete(review)
        else:
            _apply_changes(review, changes)
        db.commit()
        db.refresh(review)
        logger.info(
            "Admin %s applied %s directly to review %s", actor.user_id, request_type.value, review.review_id
        )
        return WriteOutcome(applied=True, review=review)


class ProposalPolicy(WritePolicy):
    """Write-behind-approval: the author's change is staged for an admin."""

    def submit(
        self,
        db: Session,
        actor: User,
        review: Review,
        request_type: RequestType,
        changes: dict[str, Any],
    ) -> WriteOutcome:
        if review.user_id != actor.user_id:
            raise Forbidden("Not authorized to modify this review")
        _require_active(review)

        edit_request = EditRequest(
            review_id=review.review_id,
            requester_id=actor.user_id,
            request_type=request_type,
            status=RequestStatus.pending,
            cleared_fields=[f for f, v in changes.items() if v is None],
            **{f: v for f, v in changes.items() if v is not None},
        )
        db.add(edit_request)
        db.commit()
        db.refresh(edit_request)
        logger.info(
            "EditRequest %s (%s) submitted for review %s by user %s",
            edit_request.request_id, request_type.value, review.review_id, actor.user_id,
        )
        return WriteOutcome(applied=False, review=review, edit_request=edit_request)


DIRECT_MUTATION = DirectMutationPolicy()
PROPOSAL = ProposalPolicy()


def can_write_directly(actor: User) -> bool:
    return actor.is_admin


def policy_for(actor: User) -> WritePolicy:
    return DIRECT_MUTATION if can_write_directly(actor) else PROPOSAL


def resolve_write_request(
    db: Session,
    actor: User,
    review: Review,
    request_type: RequestType,
    changes: dict[str, Any],
) -> WriteOutcome:
    """Single entry point for edit/delete submissions against a review."""
    changes = _validate_changes(request_type, changes)
    return policy_for(actor).submit(db, actor, review, request_type, changes)


def get_edit_request(db: Session, request_id: str) -> EditRequest:
    cr = db.query(EditRequest).filter(EditRequest.request_id == request_id).first()
    if not cr:
        raise NotFound("Edit request not found")
    return cr


def list_pending(db: Session) -> list[EditRequest]:
    return (
        db.query(EditRequest)
        .filter(EditRequest.status == RequestStatus.pending)
        .order_by(EditRequest.created_at.desc())
        .all()
    )


def resolve_edit_request(db: Session, request_id: str, admin: User, action: str) -> EditRequest:
    """Approve or reject a pending request.  Callers must already be admins."""
    if not admin.is_admin:
        raise Forbidden("Only admins can moderate edit requests")
    new_status = RESOLVE_ACTIONS.get(action)
    if new_status is None:
        raise InvalidInput(f"Invalid action: {action}")

    cr = get_edit_request(db, request_id)
    if cr.status != RequestStatus.pending:
        raise Conflict(f"Edit request has already been {cr.status.value}")

    claimed = (
        db.query(EditRequest)
        .filter(EditRequest.request_id == request_id, EditRequest.status == RequestStatus.pending)
        .update(
            {
                EditRequest.status: new_status,
                EditRequest.admin_id: admin.user_id,
                EditRequest.updated_at: utcnow(),
            },
            synchronize_session=False,
        )
    )
    if claimed != 1:
        db.rollback()
        raise Conflict("Edit request has already been processed")

    if new_status == RequestStatus.approved:
        review = db.query(Review).filter(Review.review_id == cr.review_id).first()
        if not review:
            db.rollback()
            raise NotFound("Associated review not found")
        if review.status != ReviewStatus.active:
            db.rollback()
            raise Conflict("Review has been deleted")
        if cr.request_type == RequestType.delete:
            _soft_delete(review)
        else:
            _apply_changes(review, cr.proposed_changes())

    db.commit()
    db.refresh(cr)
    logger.info("EditRequest %s %s by admin %s", request_id, new_status.value, admin.user_id)
    return cr
