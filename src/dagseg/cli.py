"""CLI adapter for dagseg using Typer."""

import json

import typer

from .core.config import get_settings
from .core.dictionary import Dictionary
from .core.dictionary_loader import load_bundled_dictionary, load_entries
from .core.exceptions import DagsegError
from .core.keywords import extract_keywords
from .core.log import configure_logging
from .core.segmenter import Segmenter

app = typer.Typer(
    name="dagseg",
    help="Dictionary-driven Chinese text segmentation.",
    add_completion=False,
)

DICT_OPTION_HELP = "Dictionary file or http(s) URL (overrides DAGSEG_DICT_PATH/URL)"


@app.callback()
def main(
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level (default: DAGSEG_LOG_LEVEL or WARNING)"
    ),
) -> None:
    """Dictionary-driven Chinese text segmentation."""
    configure_logging(log_level)


def _make_segmenter(dict_source: str | None, full: bool) -> Segmenter:
    """Build a segmenter from the requested or configured dictionary source."""
    segmenter = Segmenter()
    source = dict_source or get_settings().dictionary_source
    if source is None and not full:
        return segmenter

    if not segmenter.load_dictionary(source):
        typer.echo(
            typer.style(
                f"Error: could not load dictionary from {source or 'bundled jieba dictionary'}",
                fg=typer.colors.RED,
            )
        )
        raise typer.Exit(1)
    return segmenter


@app.command()
def cut(
    text: str = typer.Argument(..., help="Text to segment"),
    hmm: bool = typer.Option(False, "--hmm", help="Use the HMM strategy (currently DAG-only)"),
    cut_all: bool = typer.Option(
        False, "--all", "-a", help="Print every dictionary match instead of the best path"
    ),
    sep: str = typer.Option(" / ", "--sep", help="Token separator for plain output"),
    as_json: bool = typer.Option(False, "--json", help="Print tokens as a JSON array"),
    dict_source: str = typer.Option(None, "--dict", "-d", help=DICT_OPTION_HELP),
    full: bool = typer.Option(False, "--full", help="Load the bundled jieba dictionary"),
) -> None:
    """Segment TEXT into tokens."""
    segmenter = _make_segmenter(dict_source, full)

    tokens = segmenter.cut_all(text) if cut_all else segmenter.cut(text, use_hmm=hmm)

    if as_json:
        typer.echo(json.dumps(tokens, ensure_ascii=False))
    else:
        typer.echo(sep.join(tokens))


@app.command()
def keywords(
    text: str = typer.Argument(..., help="Text to extract keywords from"),
    top_k: int = typer.Option(10, "--top-k", "-k", help="Number of keywords to return"),
    dict_source: str = typer.Option(None, "--dict", "-d", help=DICT_OPTION_HELP),
    full: bool = typer.Option(False, "--full", help="Load the bundled jieba dictionary"),
) -> None:
    """Extract the most frequent multi-character words from TEXT."""
    segmenter = _make_segmenter(dict_source, full)

    words = extract_keywords(segmenter, text, top_k=top_k)
    if not words:
        typer.echo("No keywords found")
        return

    for i, word in enumerate(words, 1):
        typer.echo(f"{i}. {word}")


@app.command()
def stats(
    dict_source: str = typer.Option(None, "--dict", "-d", help=DICT_OPTION_HELP),
    full: bool = typer.Option(False, "--full", help="Load the bundled jieba dictionary"),
    as_json: bool = typer.Option(False, "--json", help="Print statistics as JSON"),
) -> None:
    """Show dictionary statistics."""
    segmenter = _make_segmenter(dict_source, full)
    result = segmenter.stats()

    if as_json:
        typer.echo(json.dumps(result.to_dict()))
        return

    kind = "full" if result.is_full_dictionary else "default"
    typer.echo(f"Dictionary: {typer.style(kind, fg=typer.colors.CYAN)}")
    typer.echo(f"Words: {result.word_count}")
    typer.echo(f"Total frequency: {result.total:g}")
    typer.echo(f"Min log frequency: {result.min_log_freq:.4f}")


@app.command()
def doctor() -> None:
    """Validate that the bundled and configured dictionaries can be loaded."""
    settings = get_settings()
    all_ok = True

    # Check bundled jieba dictionary
    typer.echo("Checking bundled jieba dictionary... ", nl=False)
    try:
        dictionary = Dictionary.build(load_bundled_dictionary())
        typer.echo(
            typer.style("OK", fg=typer.colors.GREEN) + f" ({dictionary.word_count} words)"
        )
    except (DagsegError, OSError) as e:
        typer.echo(typer.style("FAILED", fg=typer.colors.RED) + f" ({e})")
        all_ok = False

    # Check configured dictionary source
    source = settings.dictionary_source
    typer.echo("Checking configured dictionary... ", nl=False)
    if source is None:
        typer.echo(typer.style("NOT SET", fg=typer.colors.YELLOW) + " (using defaults)")
    else:
        try:
            entries = load_entries(
                source, timeout=settings.http_timeout, retries=settings.http_retries
            )
            dictionary = Dictionary.build(entries)
            typer.echo(
                typer.style("OK", fg=typer.colors.GREEN)
                + f" ({source}, {dictionary.word_count} words)"
            )
        except (DagsegError, OSError) as e:
            typer.echo(typer.style("FAILED", fg=typer.colors.RED) + f" ({e})")
            all_ok = False

    # Summary
    typer.echo()
    if all_ok:
        typer.echo(typer.style("All checks passed!", fg=typer.colors.GREEN, bold=True))
    else:
        typer.echo(typer.style("Some checks failed.", fg=typer.colors.RED, bold=True))
        raise typer.Exit(1)
