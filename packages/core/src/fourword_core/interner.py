"""
Word interning.

Words are deduplicated into dense integer handles in first-seen order. The
table only grows: handles stay valid for the lifetime of the interner.
"""

from __future__ import annotations

import re
from typing import NewType

import numpy as np

Word = NewType("Word", int)

# Same shape the tokenizer matches, restricted to lowercase.
_INTERNABLE = re.compile(r"[a-z]+(?:'[a-z]+)*")


class WordInterner:
    """Append-only arena of word strings with a reverse mapping."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._mapping: dict[str, Word] = {}

    def intern(self, text: str) -> Word:
        """Return the handle for `text`, allocating one on first sight."""
        word = self._mapping.get(text)
        if word is not None:
            return word
        if not _INTERNABLE.fullmatch(text):
            raise ValueError(f"cannot intern {text!r}: expected a lowercase word")
        word = Word(len(self._names))
        self._names.append(text)
        self._mapping[text] = word
        return word

    def resolve(self, word: Word) -> str:
        return self._names[word]

    def lookup(self, text: str) -> Word | None:
        """Return the handle for `text` without interning it."""
        return self._mapping.get(text)

    def pick_random(self, rng: np.random.Generator) -> str:
        """Pick uniformly among all words interned so far."""
        if not self._names:
            raise LookupError("no words have been interned yet")
        return self._names[int(rng.integers(len(self._names)))]

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, text: object) -> bool:
        return text in self._mapping
