from domain.errors import (
    ApiError,
    LocalValidationError,
    MergeAssistantError,
    ResponseFormatError,
)
from domain.models import Branch, Repository

__all__ = [
    "ApiError",
    "Branch",
    "LocalValidationError",
    "MergeAssistantError",
    "Repository",
    "ResponseFormatError",
]
