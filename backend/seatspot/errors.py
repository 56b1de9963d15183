"""Error taxonomy shared by services and routers.

Each error is an ``HTTPException`` so it can be raised from anywhere in the
request path (services included) and FastAPI turns it into a response.  The
``kind`` attribute is added to the JSON body by the handlers in ``main``.
"""
from fastapi import HTTPException, status


class ServiceError(HTTPException):
    kind = "internal"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, headers: dict | None = None):
        super().__init__(status_code=self.status_code, detail=detail, headers=headers)


class Unauthenticated(ServiceError):
    kind = "unauthenticated"
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(ServiceError):
    kind = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(ServiceError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class InvalidInput(ServiceError):
    kind = "invalid_input"
    status_code = status.HTTP_400_BAD_REQUEST


class Conflict(ServiceError):
    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT


class DependencyFailure(ServiceError):
    kind = "dependency_failure"
    status_code = status.HTTP_502_BAD_GATEWAY
