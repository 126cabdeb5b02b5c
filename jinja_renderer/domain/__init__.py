"""Domain layer: errors, constants and schemas."""

from .errors import ErrorCodes, InvalidInputError, RendererError
from .schemas import (
    JsonSerializable,
    Mappable,
    RenderLog,
    WarningLog,
    WritableBody,
)

__all__ = [
    "ErrorCodes",
    "InvalidInputError",
    "RendererError",
    "JsonSerializable",
    "Mappable",
    "WritableBody",
    "RenderLog",
    "WarningLog",
]
