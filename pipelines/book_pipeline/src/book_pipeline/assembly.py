"""
Book assembly loop.

Starts from a single Chapter 1 and keeps adding uniformly chosen sections
until the book holds at least the requested number of words:

1. Build the word interner and the closed global glossary
2. Seed the registry with Chapter 1
3. While the word count is below the minimum:
   - pick one of the seven other section kinds
   - render it against the registry as it is now
   - insert it at the front or back, depending on its kind

Nothing is re-rendered at the end: every table of contents, glossary and
index describes the book as it stood when that section was written.
"""

from __future__ import annotations

import logging

import numpy as np

from fourword_core.glossary import Glossary, build_glossary
from fourword_core.identity import SectionIdAllocator
from fourword_core.interner import WordInterner
from fourword_core.models import GENERATED_KINDS, Section, SectionKind

from book_pipeline.registry import SectionRegistry
from book_pipeline.renderers import BookRenderer
from book_pipeline.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class BookAssembler:
    """Owns the state of one generation run."""

    def __init__(self, settings: Settings | None = None, rng: np.random.Generator | None = None):
        self.settings = settings or get_settings()
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.seed)
        self.interner = WordInterner()
        self.glossary: Glossary = build_glossary(self.interner)
        self.allocator = SectionIdAllocator(
            self.rng,
            bits=self.settings.id_bits,
            max_attempts=self.settings.id_max_attempts,
        )
        self.renderer = BookRenderer(
            self.interner, self.glossary, self.allocator, self.rng, self.settings
        )
        self.registry = SectionRegistry()
        # Sections in creation order; the registry holds them in book order.
        self.created: list[Section] = []

    def render(self, kind: SectionKind) -> Section:
        """Render one section of `kind` against the current registry."""
        registry = self.registry
        if kind is SectionKind.CHAPTER_1:
            return self.renderer.chapter_1()
        if kind is SectionKind.DEDICATION:
            return self.renderer.dedication()
        if kind is SectionKind.FOURWORD:
            return self.renderer.fourword()
        if kind is SectionKind.TABLE_OF_CONTENTS:
            return self.renderer.table_of_contents(registry)
        if kind is SectionKind.GLOSSARY:
            return self.renderer.glossary_section(registry)
        if kind is SectionKind.LIST_OF_FIGURES:
            return self.renderer.list_of_figures(registry.random_section_id(self.rng))
        if kind is SectionKind.INDEX:
            return self.renderer.index(registry)
        if kind is SectionKind.AFTERWORD:
            return self.renderer.afterword(lambda: registry.random_section_id(self.rng))
        raise ValueError(f"unknown section kind: {kind!r}")

    def add(self, kind: SectionKind) -> Section:
        """Render a section and insert it into the registry."""
        section = self.render(kind)
        self.registry.insert(section)
        self.created.append(section)
        return section

    def choose_kind(self) -> SectionKind:
        return GENERATED_KINDS[int(self.rng.integers(len(GENERATED_KINDS)))]

    def run(self, word_minimum: int) -> SectionRegistry:
        """Grow the book until it holds at least `word_minimum` words."""
        if not self.registry:
            self.add(SectionKind.CHAPTER_1)

        while self.registry.word_count < word_minimum:
            section = self.add(self.choose_kind())
            logger.debug(
                "added %s #%d: %d sections, %d words",
                section.kind.label,
                section.section_id,
                len(self.registry),
                self.registry.word_count,
            )

        logger.info(
            "book assembled: %d sections, %d words", len(self.registry), self.registry.word_count
        )
        return self.registry


def generate(
    word_minimum: int,
    *,
    seed: int | None = None,
    settings: Settings | None = None,
) -> SectionRegistry:
    """
    Generate a book of at least `word_minimum` words.

    Args:
        word_minimum: Minimum total word count
        seed: Random seed; None draws fresh entropy
        settings: Pipeline settings (defaults to environment configuration)

    Returns:
        SectionRegistry with the sections in final book order
    """
    settings = settings or get_settings()
    rng = np.random.default_rng(seed if seed is not None else settings.seed)
    return BookAssembler(settings, rng).run(word_minimum)
