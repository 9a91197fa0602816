"""Domain layer: errors, schemas, constants."""

from .errors import (
    ConfigError,
    DocumentQueryError,
    ErrorCodes,
    InferenceFailed,
    ValidationError,
)
from .schemas import (
    InferenceRequest,
    InferenceResult,
    InlineData,
    UploadedArtifact,
)

__all__ = [
    "DocumentQueryError",
    "ValidationError",
    "InferenceFailed",
    "ConfigError",
    "ErrorCodes",
    "UploadedArtifact",
    "InlineData",
    "InferenceRequest",
    "InferenceResult",
]
