"""
Tokenization and annotated text.

A word is a run of letters optionally followed by apostrophe-joined runs of
letters ("it's", "NaNoGenMo"). Digits, punctuation and whitespace separate
words and never belong to one.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from fourword_core.interner import Word, WordInterner

WORD_PATTERN = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)*")


def tokenize(raw: str) -> list[str]:
    """Return the lowercased word tokens of `raw` in source order."""
    return [m.group(0).lower() for m in WORD_PATTERN.finditer(raw)]


class AnnotatedText(BaseModel):
    """Raw text plus the ordered word occurrences found in it."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Raw text")
    words: tuple[Word, ...] = Field(
        default=(), description="Word occurrences in source order, duplicates kept"
    )

    def word_count(self) -> int:
        return len(self.words)

    def __str__(self) -> str:
        return self.content


def annotate(interner: WordInterner, raw: str) -> AnnotatedText:
    """Find all the words in `raw` and intern them."""
    words = tuple(interner.intern(token) for token in tokenize(raw))
    return AnnotatedText(content=raw, words=words)
