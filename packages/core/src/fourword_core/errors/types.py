"""
Error taxonomy for book assembly.

Every error here is fatal: it signals an inconsistency between the static
glossary data and the dynamic word universe, or an identifier space that is
too small for the requested document. None of them is retried.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional


class ErrorType(str, Enum):
    """Machine-interpretable error types."""

    GLOSSARY_CLOSURE = "GLOSSARY_CLOSURE"
    """A glossary definition uses a word that is not itself a glossary key."""

    GLOSSARY_DATA = "GLOSSARY_DATA"
    """The static glossary data lists the same word more than once."""

    UNDEFINED_WORD = "UNDEFINED_WORD"
    """Rendered content uses a word the glossary never anticipated."""

    ID_SPACE_EXHAUSTED = "ID_SPACE_EXHAUSTED"
    """No free section identifier found within the attempt limit."""


class BookConsistencyError(Exception):
    """Base class for fatal book assembly errors."""

    error_type: ErrorType

    def __init__(self, message: str, *, word: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.word = word

    def to_log_message(self) -> str:
        """Format error for logging."""
        loc = f" '{self.word}'" if self.word else ""
        return f"[{self.error_type.value}]{loc}: {self.message}"


class GlossaryClosureError(BookConsistencyError):
    error_type = ErrorType.GLOSSARY_CLOSURE

    def __init__(self, words: Iterable[str]):
        self.words = sorted(set(words))
        quoted = ", ".join(f"'{w}'" for w in self.words)
        super().__init__(
            f"glossary definitions use words that are not glossary entries: {quoted}",
            word=self.words[0] if self.words else None,
        )


class GlossaryDataError(BookConsistencyError):
    error_type = ErrorType.GLOSSARY_DATA

    def __init__(self, word: str):
        super().__init__(f"'{word}' is listed more than once", word=word)


class UndefinedWordError(BookConsistencyError):
    error_type = ErrorType.UNDEFINED_WORD

    def __init__(self, word: str):
        super().__init__(f"'{word}' is not defined", word=word)


class IdSpaceExhaustedError(BookConsistencyError):
    error_type = ErrorType.ID_SPACE_EXHAUSTED

    def __init__(self, *, bits: int, attempts: int, used: int):
        self.bits = bits
        self.attempts = attempts
        self.used = used
        super().__init__(
            f"no free {bits}-bit section id after {attempts} attempts "
            f"({used} ids already allocated)"
        )
