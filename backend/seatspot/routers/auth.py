"""Registration and login routes."""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from seatspot.auth import require_user
from seatspot.database import get_db
from seatspot.models.user import User
from seatspot.schemas.user import UserCreate, UserLogin, UserOut, TokenOut
from seatspot.services import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    """Create a regular user account."""
    return auth_service.register_user(db, payload.username, payload.password)


@router.post("/login", response_model=TokenOut)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    """Exchange credentials for a bearer token."""
    user = auth_service.authenticate(db, payload.username, payload.password)
    logger.info("User %s logged in", user.user_id)
    return TokenOut(access_token=auth_service.create_access_token(user.user_id), user=UserOut.model_validate(user))


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(require_user)):
    return user
