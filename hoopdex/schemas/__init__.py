from .error import (
    ErrorResponse,
    FailureResponse,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from .favorites import (
    FavoriteCreate,
    FavoriteMutationResponse,
    FavoriteRead,
    SubjectType,
)

__all__ = [
    "ErrorResponse",
    "FailureResponse",
    "FavoriteCreate",
    "FavoriteMutationResponse",
    "FavoriteRead",
    "SubjectType",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
]
