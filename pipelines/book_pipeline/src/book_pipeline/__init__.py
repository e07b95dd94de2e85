"""Book pipeline: section renderers, registry and the assembly loop."""

__version__ = "0.1.0"

from book_pipeline.assembly import BookAssembler, generate
from book_pipeline.registry import SectionRegistry
from book_pipeline.renderers import BookRenderer
from book_pipeline.settings import Settings, get_settings

__all__ = [
    "BookAssembler",
    "BookRenderer",
    "SectionRegistry",
    "Settings",
    "generate",
    "get_settings",
]
