"""Section registry: the ordered, growing collection of generated sections."""

from __future__ import annotations

from collections import Counter, deque
from typing import Iterator

import numpy as np

from fourword_core.models import Section, SectionKind

SECTION_SEPARATOR = "\n\n"


class SectionRegistry:
    """
    Double-ended sequence of sections.

    Sections are pushed to the front or the back and never removed or
    reordered. Renderers read it; only the assembly loop inserts into it.
    """

    def __init__(self) -> None:
        self._sections: deque[Section] = deque()
        self._word_count = 0

    def push_front(self, section: Section) -> None:
        self._sections.appendleft(section)
        self._word_count += section.word_count()

    def push_back(self, section: Section) -> None:
        self._sections.append(section)
        self._word_count += section.word_count()

    def insert(self, section: Section) -> None:
        """Insert at the end the section's kind belongs to."""
        if section.kind.at_front:
            self.push_front(section)
        else:
            self.push_back(section)

    @property
    def word_count(self) -> int:
        """Total words over all registered sections."""
        return self._word_count

    def section_ids(self) -> list[int]:
        return [s.section_id for s in self._sections]

    def random_section_id(self, rng: np.random.Generator) -> int:
        """Pick uniformly among the ids of sections registered right now."""
        if not self._sections:
            raise LookupError("registry is empty")
        return self._sections[int(rng.integers(len(self._sections)))].section_id

    def kind_counts(self) -> Counter[SectionKind]:
        return Counter(s.kind for s in self._sections)

    def distinct_word_count(self) -> int:
        return len({w for s in self._sections for w in s.content.words})

    def render(self) -> str:
        """Concatenate all sections in order, separated by a blank line."""
        return SECTION_SEPARATOR.join(s.content.content for s in self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __getitem__(self, index: int) -> Section:
        return self._sections[index]
