"""Error types for book assembly."""

from fourword_core.errors.types import (
    BookConsistencyError,
    ErrorType,
    GlossaryClosureError,
    GlossaryDataError,
    IdSpaceExhaustedError,
    UndefinedWordError,
)

__all__ = [
    "BookConsistencyError",
    "ErrorType",
    "GlossaryClosureError",
    "GlossaryDataError",
    "IdSpaceExhaustedError",
    "UndefinedWordError",
]
