"""ORM models. Importing the package registers every table with Base.metadata."""
from seatspot.models.user import User, UserRole
from seatspot.models.establishment import Establishment
from seatspot.models.review import Review
from seatspot.models.edit_request import EditRequest
from seatspot.models.image import Image
from seatspot.models.feedback import Feedback

__all__ = ["User", "UserRole", "Establishment", "Review", "EditRequest", "Image", "Feedback"]
