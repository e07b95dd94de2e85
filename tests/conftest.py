import os

import numpy as np
import pytest

from fourword_core.glossary import build_glossary
from fourword_core.identity import SectionIdAllocator
from fourword_core.interner import WordInterner

from book_pipeline.renderers import BookRenderer
from book_pipeline.settings import Settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep FOURWORD_* variables and stray .env files out of the tests."""
    for key in list(os.environ):
        if key.startswith("FOURWORD_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("book_pipeline.settings._settings", None)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def interner():
    return WordInterner()


@pytest.fixture
def glossary(interner):
    return build_glossary(interner)


@pytest.fixture
def renderer(interner, glossary, rng, settings):
    allocator = SectionIdAllocator(rng, bits=settings.id_bits)
    return BookRenderer(interner, glossary, allocator, rng, settings)
