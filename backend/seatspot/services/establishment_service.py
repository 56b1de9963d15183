"""Establishment cache — find-or-create keyed by the provider's business id."""
import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from seatspot.errors import DependencyFailure
from seatspot.models.establishment import Establishment
from seatspot.services.yelp_client import YelpClient

logger = logging.getLogger(__name__)


def _float_or_none(value: Any):
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def establishment_fields(business: dict[str, Any]) -> dict[str, Any]:
    """Map a provider business payload to Establishment columns."""
    if not business.get("id") or not business.get("name"):
        raise DependencyFailure("Business search returned an incomplete record")
    location = business.get("location") or {}
    coordinates = business.get("coordinates") or {}
    return {
        "external_id": business["id"],
        "name": business["name"],
        "address": location.get("address1") or "",
        "city": location.get("city"),
        "state": location.get("state"),
        "zip_code": location.get("zip_code"),
        "latitude": _float_or_none(coordinates.get("latitude")),
        "longitude": _float_or_none(coordinates.get("longitude")),
        "external_rating": _float_or_none(business.get("rating")),
        "phone": business.get("phone"),
    }


def get_by_external_id(db: Session, external_id: str) -> Establishment | None:
    return db.query(Establishment).filter(Establishment.external_id == external_id).first()


def find_or_create(db: Session, fields: dict[str, Any]) -> Establishment:
    """Idempotent insert guarded by the unique ``external_id`` constraint.

    A concurrent first lookup that wins the insert shows up here as an
    IntegrityError; the row it created is re-read instead.
    """
    existing = get_by_external_id(db, fields["external_id"])
    if existing:
        return existing

    establishment = Establishment(**fields)
    db.add(establishment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        establishment = get_by_external_id(db, fields["external_id"])
        if establishment is None:
            raise
        return establishment
    db.refresh(establishment)
    logger.info("Cached establishment '%s' (%s)", establishment.name, establishment.external_id)
    return establishment


def resolve_establishment(db: Session, yelp: YelpClient, external_id: str) -> Establishment:
    """Local establishment for ``external_id``, fetched from the provider if missing."""
    existing = get_by_external_id(db, external_id)
    if existing:
        return existing
    return find_or_create(db, establishment_fields(yelp.business(external_id)))
