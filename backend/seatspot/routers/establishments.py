"""Establishment search and per-establishment review routes."""
import logging
from typing import Any, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from seatspot.auth import get_current_user_optional, require_user
from seatspot.database import get_db
from seatspot.errors import InvalidInput, NotFound
from seatspot.models.user import User
from seatspot.schemas.review import ReviewCreate, ReviewOut
from seatspot.services import establishment_service, review_service
from seatspot.services.yelp_client import YelpClient, get_yelp_client

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/search")
def search_establishments(
    latitude: Optional[float] = Query(None),
    longitude: Optional[float] = Query(None),
    location: Optional[str] = Query(None),
    radius: Optional[int] = Query(None, ge=1, le=40000),
    limit: Optional[int] = Query(None, ge=1, le=50),
    term: Optional[str] = Query(None),
    yelp: YelpClient = Depends(get_yelp_client),
):
    """Search the business directory by free-text location or coordinates."""
    if not location and (latitude is None or longitude is None):
        raise InvalidInput("Either location or coordinates (latitude/longitude) must be provided")
    return yelp.search(
        latitude=latitude,
        longitude=longitude,
        location=location,
        radius=radius,
        limit=limit,
        term=term,
    )


@router.get("/nearby")
def nearby_establishments(
    latitude: Optional[float] = Query(None),
    longitude: Optional[float] = Query(None),
    radius: int = Query(1000, ge=1, le=40000),
    yelp: YelpClient = Depends(get_yelp_client),
):
    """Restaurants and cafes around a point, closest first."""
    if latitude is None or longitude is None:
        raise InvalidInput("Latitude and longitude are required")
    return yelp.search(latitude=latitude, longitude=longitude, radius=radius, sort_by="distance")


@router.get("/{external_id}")
def get_establishment(
    external_id: str,
    db: Session = Depends(get_db),
    yelp: YelpClient = Depends(get_yelp_client),
) -> dict[str, Any]:
    """Fresh provider details merged with the local establishment id."""
    business = yelp.business(external_id)
    establishment = establishment_service.find_or_create(
        db, establishment_service.establishment_fields(business)
    )
    return {**business, "establishment_id": establishment.establishment_id}


@router.get("/{external_id}/reviews", response_model=list[ReviewOut])
def list_reviews(
    external_id: str,
    db: Session = Depends(get_db),
    viewer: Optional[User] = Depends(get_current_user_optional),
):
    """Reviews the caller may see, most relevant first."""
    establishment = establishment_service.get_by_external_id(db, external_id)
    if not establishment:
        raise NotFound("Establishment not found")
    return review_service.list_reviews(db, establishment, viewer)


@router.post("/{external_id}/reviews", response_model=ReviewOut, status_code=status.HTTP_201_CREATED)
def create_review(
    external_id: str,
    payload: ReviewCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_user),
    yelp: YelpClient = Depends(get_yelp_client),
):
    """Rate a seat.  The establishment is cached on first review."""
    establishment = establishment_service.resolve_establishment(db, yelp, external_id)
    return review_service.create_review(db, establishment, user, payload.model_dump())
