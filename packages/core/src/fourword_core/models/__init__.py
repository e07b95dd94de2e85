"""Book data models."""

from fourword_core.models.section import GENERATED_KINDS, Section, SectionKind

__all__ = ["GENERATED_KINDS", "Section", "SectionKind"]
