"""Literal prose of each section kind.

Every word these templates can produce must be a glossary entry
(see fourword_core.glossary.data).
"""

from __future__ import annotations

from typing import Sequence


def heading(*, label: str, section_id: int) -> str:
    return f"## {label} (#{section_id})"


def render_chapter_1(*, section_id: int) -> str:
    return heading(label="Chapter 1", section_id=section_id) + "\n\n\\<Insert academia joke here>"


def render_dedication(*, section_id: int) -> str:
    return (
        heading(label="Dedication", section_id=section_id) + "\n\n"
        "All material following this dedication is dedicated to the NaNoGenMo 2019 community, "
        f"with the exception of sections with an ID higher than this one (#{section_id})."
    )


def render_fourword(*, section_id: int, words: Sequence[str]) -> str:
    first, *rest = words
    return (
        heading(label="Fourword", section_id=section_id) + "\n\n"
        + " ".join([capitalize(first), *rest]) + "."
    )


def render_contents_entry(*, label: str, section_id: int) -> str:
    return f"\n- **{label}** (#{section_id})"


def render_glossary_entry(*, word: str, definition: str) -> str:
    return f"\n- **{word}** - {definition}"


def render_random_reference(*, word: str) -> str:
    return f"See '{word}.'"


def render_figure(*, value: float, footnote: bool) -> str:
    return f"\n- {value:.3f}" + (" (*)" if footnote else "")


def render_figures_disclaimer(*, section_id: int) -> str:
    return (
        "\n\n(*) The accuracy of these numbers is not known. It is recommended not to trust them "
        f"when reading section #{section_id}."
    )


def render_index_entry(*, word: str, section_ids: Sequence[int]) -> str:
    return f"\n- **{word}** - " + ", ".join(f"#{i}" for i in section_ids)


NARRATOR_MESSAGE = (
    "Hello, dear reader! I'm the author of the text you're reading. Not @Reconcyl, but the narrator. "
    "The character they're playing.\n\n"
    "I have a suggestion for you. Go into this book's source code and find the part that generates "
    "this message. What's the probability it would appear? Go on, look. I can wait. "
    "It's in `renderers.py`.\n\n"
    "It's pretty low, isn't it? Do you think the one I submitted to the NaNoGenMo issue just happened "
    "to have it? Or do you think Reconcyl chose one that did on purpose?\n\n"
    "This entire book *could*, in theory, have been generated by precisely the code I shared. "
    "But *was* it?\n\n"
    "Are the section IDs I used *really* random? What about the fourwords? "
    "Or is there something else going on?\n\n"
    "Have fun.\n\n"
)


def render_lucky_numbers(*, section_ids: Sequence[int]) -> str:
    parts = []
    last = len(section_ids) - 1
    for i, section_id in enumerate(section_ids):
        if i == 0:
            parts.append("P.S. your lucky section numbers are ")
        elif i == last:
            parts.append(", and ")
        else:
            parts.append(", ")
        parts.append(f"#{section_id}")
    return "".join(parts) + "."


def render_afterword(*, section_id: int, body: str) -> str:
    return heading(label="Afterword", section_id=section_id) + "\n\n" + body


def render_section(*, label: str, section_id: int, body: str) -> str:
    """Heading followed by a body that starts with its own line breaks."""
    return heading(label=label, section_id=section_id) + "\n" + body


def capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]
