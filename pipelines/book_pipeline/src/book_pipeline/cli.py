"""
Command-line interface for the book pipeline.

Usage:
    fourword generate                      # Generate a book on stdout
    fourword generate --words 1000 --seed 7 --output book.md --stats
    fourword glossary                      # Check and summarise the global glossary
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from fourword_core.errors import BookConsistencyError
from fourword_core.glossary import build_glossary
from fourword_core.interner import WordInterner

from book_pipeline.assembly import BookAssembler
from book_pipeline.registry import SectionRegistry
from book_pipeline.settings import get_settings

app = typer.Typer(
    name="fourword",
    help="Self-referential book generator",
)
console = Console(stderr=True)


def _configure_logging(level: Optional[str]) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _abort(err: BookConsistencyError) -> None:
    console.print(f"[red]✗ {escape(err.to_log_message())}[/red]")
    raise typer.Exit(code=1)


def _print_stats(registry: SectionRegistry) -> None:
    table = Table(title="Book")
    table.add_column("Section", style="cyan")
    table.add_column("Count", justify="right")
    for kind, count in sorted(registry.kind_counts().items(), key=lambda kv: kv[0].label):
        table.add_row(kind.label, str(count))
    table.add_section()
    table.add_row("[bold]Sections[/bold]", str(len(registry)))
    table.add_row("[bold]Words[/bold]", str(registry.word_count))
    table.add_row("[bold]Distinct words[/bold]", str(registry.distinct_word_count()))
    console.print(table)


@app.command()
def generate(
    words: Optional[int] = typer.Option(
        None, "--words", "-w", min=0, help="Minimum total word count (default from settings)"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", "-s", help="Random seed for a reproducible book"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the book here instead of stdout"
    ),
    stats: bool = typer.Option(False, "--stats", help="Print section and word counts to stderr"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
):
    """
    Generate a book of at least the given number of words.

    Sections are separated by a blank line.
    """
    _configure_logging(log_level)
    settings = get_settings()
    if seed is not None:
        settings = settings.model_copy(update={"seed": seed})
    word_minimum = settings.word_minimum if words is None else words

    try:
        registry = BookAssembler(settings).run(word_minimum)
    except BookConsistencyError as err:
        _abort(err)

    text = registry.render()
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"[green]✓ wrote {registry.word_count} words to {output}[/green]")

    if stats:
        _print_stats(registry)


@app.command()
def glossary(
    show_undefined: bool = typer.Option(
        False, "--show-undefined", help="Also list the words left undefined"
    ),
):
    """
    Build the global glossary and check that it is closed.
    """
    interner = WordInterner()
    try:
        gloss = build_glossary(interner)
    except BookConsistencyError as err:
        _abort(err)

    table = Table(title="Global glossary")
    table.add_column("Entries", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Defined", str(len(gloss.defined_words())))
    table.add_row("Undefined", str(len(gloss.undefined_words())))
    table.add_row("Total", str(len(gloss)))
    console.print(table)

    if show_undefined:
        names = sorted(interner.resolve(w) for w in gloss.undefined_words())
        console.print(", ".join(names))

    console.print("[green]✓ Glossary is closed[/green]")


if __name__ == "__main__":
    app()
