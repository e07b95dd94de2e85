"""Global glossary construction and closure check.

The glossary is built once per run. Renderers trust that it is closed: every
word used inside a definition is itself an entry, defined or not. The check
runs after all entries are inserted and before the glossary is returned, so a
gap in the static data fails the run at startup instead of deep inside a
render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Optional

from fourword_core.errors import GlossaryClosureError, GlossaryDataError, UndefinedWordError
from fourword_core.glossary.data import DEFINED, RANDOM_SIGNAL, UNDEFINED
from fourword_core.interner import Word, WordInterner
from fourword_core.text import AnnotatedText, annotate

logger = logging.getLogger(__name__)


class Glossary:
    """Closed mapping from word to optional definition."""

    def __init__(self, interner: WordInterner, entries: Mapping[Word, Optional[AnnotatedText]]):
        self.interner = interner
        self._entries = dict(entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __iter__(self) -> Iterator[Word]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def definition_of(self, word: Word) -> Optional[AnnotatedText]:
        """Return the definition of `word`, or None if it is left undefined."""
        try:
            return self._entries[word]
        except KeyError:
            raise UndefinedWordError(self.interner.resolve(word)) from None

    def defined_words(self) -> list[Word]:
        return [w for w, d in self._entries.items() if d is not None]

    def undefined_words(self) -> list[Word]:
        return [w for w, d in self._entries.items() if d is None]

    @staticmethod
    def is_random_reference(definition: AnnotatedText) -> bool:
        """True if the definition stands for a random word picked at render time."""
        return definition.content == RANDOM_SIGNAL


@dataclass
class ClosureResult:
    """Result of the closure check."""
    missing: list[str] = field(default_factory=list)
    checked_definitions: int = 0

    @property
    def is_closed(self) -> bool:
        return not self.missing


def check_closure(interner: WordInterner, entries: Mapping[Word, Optional[AnnotatedText]]) -> ClosureResult:
    """Collect every word used in a definition that is not an entry itself."""
    result = ClosureResult()
    seen: set[Word] = set()
    for definition in entries.values():
        if definition is None:
            continue
        result.checked_definitions += 1
        for word in definition.words:
            if word not in entries and word not in seen:
                seen.add(word)
                result.missing.append(interner.resolve(word))
    return result


def build_glossary(
    interner: WordInterner,
    defined: Iterable[tuple[str, str]] = DEFINED,
    undefined: Iterable[str] = UNDEFINED,
) -> Glossary:
    """
    Build the global glossary and verify it is closed.

    Args:
        interner: Word interner shared with the rest of the run
        defined: (term, definition) pairs
        undefined: terms deliberately left without a definition

    Returns:
        Glossary ready to hand to renderers

    Raises:
        GlossaryDataError: a term is listed twice
        GlossaryClosureError: a definition uses a word that is not a term
    """
    entries: dict[Word, Optional[AnnotatedText]] = {}

    for term, text in defined:
        word = interner.intern(term)
        if word in entries:
            raise GlossaryDataError(term)
        entries[word] = annotate(interner, text)

    for term in undefined:
        word = interner.intern(term)
        if word in entries:
            raise GlossaryDataError(term)
        entries[word] = None

    # Make sure the glossary never uses a word without explicitly defining or not defining it
    result = check_closure(interner, entries)
    if not result.is_closed:
        raise GlossaryClosureError(result.missing)

    glossary = Glossary(interner, entries)
    logger.debug(
        "glossary built: %d entries (%d defined, %d definitions checked)",
        len(glossary),
        len(glossary.defined_words()),
        result.checked_definitions,
    )
    return glossary
