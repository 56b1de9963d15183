"""Vote ledger — atomic counter increments for reviews and feedback.

Counters are bumped with ``UPDATE ... SET col = col + 1`` so concurrent
votes never lose an increment.  There is no per-user de-duplication: the
same user voting twice counts twice.
"""
import enum
import logging

from sqlalchemy.orm import Session

from seatspot.errors import InvalidInput, NotFound

logger = logging.getLogger(__name__)


class VoteDirection(str, enum.Enum):
    up = "up"
    down = "down"


# Accepted spellings from the different clients.
_ALIASES = {
    "up": VoteDirection.up,
    "upvote": VoteDirection.up,
    "down": VoteDirection.down,
    "downvote": VoteDirection.down,
}


def parse_direction(value: str) -> VoteDirection:
    try:
        return _ALIASES[value]
    except (KeyError, TypeError):
        raise InvalidInput(f"Invalid vote type: {value}")


def cast_vote(db: Session, model, pk_column, pk: str, direction: VoteDirection, label: str):
    """Increment ``upvotes`` or ``downvotes`` on the row ``pk`` and return it."""
    counter = model.upvotes if direction == VoteDirection.up else model.downvotes
    updated = (
        db.query(model)
        .filter(pk_column == pk)
        .update({counter: counter + 1}, synchronize_session=False)
    )
    if updated == 0:
        db.rollback()
        raise NotFound(f"{label} not found")
    db.commit()
    row = db.query(model).filter(pk_column == pk).first()
    db.refresh(row)
    logger.info("Recorded %svote on %s %s", direction.value, label.lower(), pk)
    return row
