"""
Section renderers.

Each renderer reads the sections registered so far (never mutating them),
allocates a fresh id and returns one new Section. Derived sections (table of
contents, glossary, index) are snapshots: they describe the book as it was at
the moment they were rendered.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Iterable

import numpy as np

from fourword_core.glossary import Glossary
from fourword_core.identity import SectionIdAllocator
from fourword_core.interner import Word, WordInterner
from fourword_core.models import Section, SectionKind
from fourword_core.text import annotate

from book_pipeline import templates
from book_pipeline.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class BookRenderer:
    """Renders every section kind against shared run state."""

    def __init__(
        self,
        interner: WordInterner,
        glossary: Glossary,
        allocator: SectionIdAllocator,
        rng: np.random.Generator,
        settings: Settings | None = None,
    ):
        self.interner = interner
        self.glossary = glossary
        self.allocator = allocator
        self.rng = rng
        self.settings = settings or get_settings()

    def _section(self, kind: SectionKind, render: Callable[[int], str]) -> Section:
        section_id = self.allocator.allocate()
        content = annotate(self.interner, render(section_id))
        logger.debug("rendered %s #%d (%d words)", kind.label, section_id, content.word_count())
        return Section(section_id=section_id, kind=kind, content=content)

    def chapter_1(self) -> Section:
        return self._section(
            SectionKind.CHAPTER_1,
            lambda sid: templates.render_chapter_1(section_id=sid),
        )

    def dedication(self) -> Section:
        return self._section(
            SectionKind.DEDICATION,
            lambda sid: templates.render_dedication(section_id=sid),
        )

    def fourword(self) -> Section:
        # Four independent draws; repeats are allowed.
        words = [self.interner.pick_random(self.rng) for _ in range(4)]
        return self._section(
            SectionKind.FOURWORD,
            lambda sid: templates.render_fourword(section_id=sid, words=words),
        )

    def table_of_contents(self, sections: Iterable[Section]) -> Section:
        body = "".join(
            templates.render_contents_entry(label=s.kind.label, section_id=s.section_id)
            for s in sections
        )
        return self._section(
            SectionKind.TABLE_OF_CONTENTS,
            lambda sid: templates.render_section(
                label=SectionKind.TABLE_OF_CONTENTS.label, section_id=sid, body=body
            ),
        )

    def glossary_section(self, sections: Iterable[Section]) -> Section:
        """
        Define every distinct word used so far.

        Undefined entries are skipped. A word missing from the glossary
        altogether raises UndefinedWordError.
        """
        words: set[Word] = set()
        for section in sections:
            words.update(section.content.words)

        parts = []
        for word in sorted(words):
            definition = self.glossary.definition_of(word)
            if definition is None:
                continue
            if self.glossary.is_random_reference(definition):
                text = templates.render_random_reference(word=self.interner.pick_random(self.rng))
            else:
                text = definition.content
            parts.append(templates.render_glossary_entry(word=self.interner.resolve(word), definition=text))
        body = "".join(parts)

        return self._section(
            SectionKind.GLOSSARY,
            lambda sid: templates.render_section(
                label=SectionKind.GLOSSARY.label, section_id=sid, body=body
            ),
        )

    def list_of_figures(self, random_section_id: int) -> Section:
        """
        Random figures, some flagged as doubtful.

        `random_section_id` must belong to a section that already exists; it
        is only mentioned if at least one figure is flagged.
        """
        cfg = self.settings
        quantity = int(self.rng.integers(cfg.figures_min, cfg.figures_max))
        parts = []
        note = False
        for _ in range(quantity):
            value = float(self.rng.normal(0.0, cfg.figure_spread))
            footnote = int(self.rng.integers(cfg.footnote_odds)) == 0
            note = note or footnote
            parts.append(templates.render_figure(value=value, footnote=footnote))
        if note:
            parts.append(templates.render_figures_disclaimer(section_id=random_section_id))
        body = "".join(parts)

        return self._section(
            SectionKind.LIST_OF_FIGURES,
            lambda sid: templates.render_section(
                label=SectionKind.LIST_OF_FIGURES.label, section_id=sid, body=body
            ),
        )

    def index(self, sections: Iterable[Section]) -> Section:
        """List, for every word used so far, the sections it occurs in."""
        word_uses: dict[Word, set[int]] = defaultdict(set)
        for section in sections:
            for word in section.content.words:
                word_uses[word].add(section.section_id)

        body = "".join(
            templates.render_index_entry(
                word=self.interner.resolve(word), section_ids=sorted(word_uses[word])
            )
            for word in sorted(word_uses)
        )
        return self._section(
            SectionKind.INDEX,
            lambda sid: templates.render_section(
                label=SectionKind.INDEX.label, section_id=sid, body=body
            ),
        )

    def afterword(self, random_section_id: Callable[[], int]) -> Section:
        """
        A single random word, or, very rarely, a note from the narrator.

        `random_section_id` is called once per lucky number and must return
        ids of sections that already exist.
        """
        cfg = self.settings
        if int(self.rng.integers(cfg.afterword_meta_odds)) == 0:
            quantity = int(self.rng.integers(cfg.lucky_min, cfg.lucky_max))
            lucky = [random_section_id() for _ in range(quantity)]
            body = templates.NARRATOR_MESSAGE + templates.render_lucky_numbers(section_ids=lucky)
            logger.info("the narrator speaks (%d lucky numbers)", quantity)
        else:
            body = templates.capitalize(self.interner.pick_random(self.rng))

        return self._section(
            SectionKind.AFTERWORD,
            lambda sid: templates.render_afterword(section_id=sid, body=body),
        )
