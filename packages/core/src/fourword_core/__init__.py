"""
Fourword Core Package

Word interning, annotated text, the closed global glossary and section
identity for self-referential book generation.
"""

__version__ = "0.1.0"

from fourword_core.interner import Word, WordInterner
from fourword_core.text import AnnotatedText, annotate, tokenize
from fourword_core.identity import SectionIdAllocator, allocate_section_id
from fourword_core.models import GENERATED_KINDS, Section, SectionKind
from fourword_core.glossary import RANDOM_SIGNAL, Glossary, build_glossary
from fourword_core.errors import (
    BookConsistencyError,
    ErrorType,
    GlossaryClosureError,
    GlossaryDataError,
    IdSpaceExhaustedError,
    UndefinedWordError,
)

__all__ = [
    # Words
    "Word",
    "WordInterner",
    "AnnotatedText",
    "annotate",
    "tokenize",
    # Sections
    "SectionIdAllocator",
    "allocate_section_id",
    "GENERATED_KINDS",
    "Section",
    "SectionKind",
    # Glossary
    "RANDOM_SIGNAL",
    "Glossary",
    "build_glossary",
    # Errors
    "BookConsistencyError",
    "ErrorType",
    "GlossaryClosureError",
    "GlossaryDataError",
    "IdSpaceExhaustedError",
    "UndefinedWordError",
]
