"""
Section - One titled, id-tagged unit of generated content.

Sections are created by exactly one renderer call and are immutable
afterwards. Their kind decides the heading label and which end of the
registry they are inserted at.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from fourword_core.text import AnnotatedText


class SectionKind(str, Enum):
    """Kinds of section a book is made of."""

    DEDICATION = "dedication"
    FOURWORD = "fourword"
    TABLE_OF_CONTENTS = "table_of_contents"
    CHAPTER_1 = "chapter_1"
    GLOSSARY = "glossary"
    LIST_OF_FIGURES = "list_of_figures"
    INDEX = "index"
    AFTERWORD = "afterword"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def at_front(self) -> bool:
        """True if sections of this kind are pushed to the front of the book."""
        return self in _FRONT_MATTER


_LABELS = {
    SectionKind.DEDICATION: "Dedication",
    SectionKind.FOURWORD: "Fourword",
    SectionKind.TABLE_OF_CONTENTS: "Table of Contents",
    SectionKind.CHAPTER_1: "Chapter 1",
    SectionKind.GLOSSARY: "Glossary",
    SectionKind.LIST_OF_FIGURES: "List of Figures",
    SectionKind.INDEX: "Index",
    SectionKind.AFTERWORD: "Afterword",
}

_FRONT_MATTER = frozenset(
    {SectionKind.DEDICATION, SectionKind.FOURWORD, SectionKind.TABLE_OF_CONTENTS}
)

# Kinds the assembly loop chooses between; Chapter 1 only seeds the book.
GENERATED_KINDS: tuple[SectionKind, ...] = (
    SectionKind.DEDICATION,
    SectionKind.FOURWORD,
    SectionKind.TABLE_OF_CONTENTS,
    SectionKind.GLOSSARY,
    SectionKind.LIST_OF_FIGURES,
    SectionKind.INDEX,
    SectionKind.AFTERWORD,
)


class Section(BaseModel):
    """A rendered section of the book."""

    model_config = ConfigDict(frozen=True)

    section_id: int = Field(..., ge=0, description="Unique section identifier")
    kind: SectionKind
    content: AnnotatedText

    def word_count(self) -> int:
        return self.content.word_count()

    def __str__(self) -> str:
        return self.content.content
