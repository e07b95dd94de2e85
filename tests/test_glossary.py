"""Tests for global glossary construction and the closure invariant."""

import pytest

from fourword_core.errors import (
    ErrorType,
    GlossaryClosureError,
    GlossaryDataError,
    UndefinedWordError,
)
from fourword_core.glossary import (
    DEFINED,
    RANDOM_SIGNAL,
    UNDEFINED,
    build_glossary,
    check_closure,
)
from fourword_core.interner import WordInterner
from fourword_core.text import annotate, tokenize


# ─── Default data ──────────────────────────────────────────────────────────

class TestDefaultGlossary:
    def test_default_data_is_closed(self, interner):
        """Regression: every word used by a definition is a glossary entry."""
        glossary = build_glossary(interner)
        for word in glossary:
            definition = glossary.definition_of(word)
            if definition is None:
                continue
            for used in definition.words:
                assert used in glossary, interner.resolve(used)

    def test_entry_counts(self, glossary):
        assert len(glossary.defined_words()) == len(DEFINED)
        assert len(glossary.undefined_words()) == len(UNDEFINED)
        assert len(glossary) == len(DEFINED) + len(UNDEFINED)

    def test_exactly_one_random_reference(self, glossary):
        refs = [
            w for w in glossary.defined_words()
            if glossary.is_random_reference(glossary.definition_of(w))
        ]
        assert len(refs) == 1
        assert glossary.interner.resolve(refs[0]) == "random"

    def test_sentinel_has_no_words(self):
        assert tokenize(RANDOM_SIGNAL) == []

    def test_definitions_are_annotated(self, interner, glossary):
        definition = glossary.definition_of(interner.lookup("word"))
        assert definition.content == "You're reading them."
        assert [interner.resolve(w) for w in definition.words] == ["you're", "reading", "them"]

    def test_undefined_word_has_no_definition(self, interner, glossary):
        assert glossary.definition_of(interner.lookup("the")) is None

    def test_unknown_word_raises(self, interner, glossary):
        zebra = interner.intern("zebra")
        with pytest.raises(UndefinedWordError) as exc:
            glossary.definition_of(zebra)
        assert exc.value.word == "zebra"
        assert exc.value.error_type is ErrorType.UNDEFINED_WORD


# ─── Construction failures ─────────────────────────────────────────────────

class TestClosureViolations:
    def test_missing_word_is_fatal(self):
        interner = WordInterner()
        with pytest.raises(GlossaryClosureError) as exc:
            build_glossary(interner, defined=[("cat", "A small tiger.")], undefined=["a", "small"])
        assert exc.value.words == ["tiger"]
        assert "'tiger'" in str(exc.value)
        assert exc.value.to_log_message().startswith("[GLOSSARY_CLOSURE]")

    def test_all_missing_words_are_reported(self):
        interner = WordInterner()
        with pytest.raises(GlossaryClosureError) as exc:
            build_glossary(interner, defined=[("cat", "Not a dog."), ("dog", "Not a cat.")], undefined=[])
        assert exc.value.words == ["a", "not"]

    def test_self_reference_is_closed(self):
        glossary = build_glossary(WordInterner(), defined=[("cat", "Cat.")], undefined=[])
        assert len(glossary) == 1

    def test_undefined_entries_count_as_keys(self):
        glossary = build_glossary(
            WordInterner(), defined=[("cat", "A pet.")], undefined=["a", "pet"]
        )
        assert len(glossary.undefined_words()) == 2

    def test_duplicate_defined_term(self):
        with pytest.raises(GlossaryDataError) as exc:
            build_glossary(WordInterner(), defined=[("cat", "Cat."), ("cat", "Cat.")], undefined=[])
        assert exc.value.word == "cat"

    def test_term_both_defined_and_undefined(self):
        with pytest.raises(GlossaryDataError):
            build_glossary(WordInterner(), defined=[("cat", "Cat.")], undefined=["cat"])


class TestCheckClosure:
    def test_reports_without_raising(self):
        interner = WordInterner()
        entries = {interner.intern("cat"): annotate(interner, "a dog"), interner.intern("a"): None}
        result = check_closure(interner, entries)
        assert not result.is_closed
        assert result.missing == ["dog"]
        assert result.checked_definitions == 1

    def test_closed(self):
        interner = WordInterner()
        entries = {interner.intern("cat"): annotate(interner, "cat"), interner.intern("dog"): None}
        assert check_closure(interner, entries).is_closed
