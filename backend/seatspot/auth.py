"""Request principal resolution.

``get_current_user_optional`` fails closed: any problem with the token yields
an anonymous (``None``) principal instead of an error.  ``require_user`` and
``require_admin`` build on it for endpoints that need a role.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from seatspot.database import get_db
from seatspot.errors import Forbidden, Unauthenticated
from seatspot.models.user import User
from seatspot.services.auth_service import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_current_user_optional(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Optional[User]:
    if not token:
        return None
    user_id = decode_access_token(token)
    if not user_id:
        return None
    return db.query(User).filter(User.user_id == user_id).first()


def require_user(user: Optional[User] = Depends(get_current_user_optional)) -> User:
    if user is None:
        raise Unauthenticated()
    return user


def require_admin(user: User = Depends(require_user)) -> User:
    if not user.is_admin:
        raise Forbidden("Admin privileges required")
    return user
