"""EditRequest moderation routes — admin approval queue."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from seatspot.auth import require_admin
from seatspot.database import get_db
from seatspot.models.user import User
from seatspot.schemas.edit_request import EditRequestDetailOut, EditRequestOut
from seatspot.services import edit_request_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=list[EditRequestDetailOut])
def list_pending_requests(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    """Pending requests, newest first, with review, establishment and usernames."""
    return edit_request_service.list_pending(db)


@router.get("/{request_id}", response_model=EditRequestDetailOut)
def get_request(request_id: str, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return edit_request_service.get_edit_request(db, request_id)


@router.post("/{request_id}/{action}", response_model=EditRequestOut)
def resolve_request(
    request_id: str,
    action: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Approve or reject a pending request.

    Approval applies the proposed change (or soft delete) to the review.
    A request that is no longer pending returns 409 and changes nothing.
    """
    return edit_request_service.resolve_edit_request(db, request_id, admin, action)
