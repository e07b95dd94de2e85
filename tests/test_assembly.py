"""Tests for the registry and the assembly loop."""

import re

import numpy as np
import pytest

from fourword_core.errors import IdSpaceExhaustedError
from fourword_core.models import GENERATED_KINDS, SectionKind

from book_pipeline.assembly import BookAssembler, generate
from book_pipeline.registry import SectionRegistry
from book_pipeline.settings import Settings


# ─── Registry ──────────────────────────────────────────────────────────────

class TestSectionRegistry:
    def test_insertion_sides(self, renderer):
        registry = SectionRegistry()
        chapter = renderer.chapter_1()
        registry.insert(chapter)
        registry.insert(renderer.index(registry))
        registry.insert(renderer.dedication())
        assert [s.kind for s in registry] == [
            SectionKind.DEDICATION,
            SectionKind.CHAPTER_1,
            SectionKind.INDEX,
        ]

    def test_running_word_count(self, renderer):
        registry = SectionRegistry()
        sections = [renderer.chapter_1(), renderer.dedication(), renderer.fourword()]
        for section in sections:
            registry.insert(section)
        assert registry.word_count == sum(s.word_count() for s in sections)

    def test_render_separates_with_blank_line(self, renderer):
        registry = SectionRegistry()
        chapter = renderer.chapter_1()
        dedication = renderer.dedication()
        registry.insert(chapter)
        registry.insert(dedication)
        assert registry.render() == str(dedication) + "\n\n" + str(chapter)

    def test_random_section_id_is_registered(self, renderer, rng):
        registry = SectionRegistry()
        for _ in range(5):
            registry.insert(renderer.dedication())
        ids = set(registry.section_ids())
        assert all(registry.random_section_id(rng) in ids for _ in range(50))

    def test_random_section_id_empty(self, rng):
        with pytest.raises(LookupError):
            SectionRegistry().random_section_id(rng)


# ─── Assembly loop ─────────────────────────────────────────────────────────

class TestGenerate:
    def test_zero_minimum_is_just_chapter_1(self, settings):
        registry = generate(0, seed=1, settings=settings)
        assert len(registry) == 1
        assert registry[0].kind is SectionKind.CHAPTER_1

    def test_reaches_fifty_thousand_words(self, settings):
        registry = generate(50_000, seed=3, settings=settings)
        assert registry.word_count >= 50_000
        assert registry.word_count == sum(s.word_count() for s in registry)
        ids = registry.section_ids()
        assert len(ids) == len(set(ids))

    def test_stops_as_soon_as_minimum_is_reached(self, settings):
        assembler = BookAssembler(settings, np.random.default_rng(5))
        registry = assembler.run(2_000)
        assert registry.word_count >= 2_000
        assert registry.word_count - assembler.created[-1].word_count() < 2_000

    def test_seeded_runs_are_reproducible(self, settings):
        assert generate(3_000, seed=42, settings=settings).render() == generate(
            3_000, seed=42, settings=settings
        ).render()

    def test_seed_from_settings(self):
        settings = Settings(seed=9)
        assert generate(1_000, settings=settings).render() == generate(1_000, settings=settings).render()

    def test_front_and_back_matter(self, settings):
        registry = generate(5_000, seed=11, settings=settings)
        kinds = [s.kind for s in registry]
        chapter = kinds.index(SectionKind.CHAPTER_1)
        assert kinds.count(SectionKind.CHAPTER_1) == 1
        assert all(k.at_front for k in kinds[:chapter])
        assert not any(k.at_front for k in kinds[chapter + 1:])

    def test_every_kind_appears(self, settings):
        registry = generate(20_000, seed=2, settings=settings)
        assert set(registry.kind_counts()) == set(GENERATED_KINDS) | {SectionKind.CHAPTER_1}


class TestReferentialIntegrity:
    @pytest.fixture
    def assembler(self, settings):
        assembler = BookAssembler(settings, np.random.default_rng(7))
        assembler.run(10_000)
        return assembler

    def test_every_word_is_a_glossary_entry(self, assembler):
        for section in assembler.registry:
            for word in section.content.words:
                assert word in assembler.glossary, assembler.interner.resolve(word)

    def test_glossary_over_final_book(self, assembler):
        """A glossary of the finished book renders without missing entries."""
        section = assembler.renderer.glossary_section(assembler.registry)
        assert section.kind is SectionKind.GLOSSARY

    def test_mentioned_ids_exist(self, assembler):
        ids = set(assembler.registry.section_ids())
        mentioned = {int(m) for m in re.findall(r"#(\d+)", assembler.registry.render())}
        assert mentioned <= ids

    def test_mentions_only_earlier_sections(self, assembler):
        """No section refers to a section created after it."""
        rank = {s.section_id: i for i, s in enumerate(assembler.created)}
        for section in assembler.registry:
            for m in re.findall(r"#(\d+)", str(section)):
                assert rank[int(m)] <= rank[section.section_id]


class TestIdSpace:
    def test_tiny_id_space_is_fatal(self):
        settings = Settings(id_bits=2, id_max_attempts=200)
        with pytest.raises(IdSpaceExhaustedError):
            generate(10_000, seed=0, settings=settings)
