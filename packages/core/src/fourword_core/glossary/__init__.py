"""Global glossary: static data, construction and closure check."""

from fourword_core.glossary.builder import ClosureResult, Glossary, build_glossary, check_closure
from fourword_core.glossary.data import DEFINED, RANDOM_SIGNAL, UNDEFINED

__all__ = [
    "ClosureResult",
    "DEFINED",
    "Glossary",
    "RANDOM_SIGNAL",
    "UNDEFINED",
    "build_glossary",
    "check_closure",
]
