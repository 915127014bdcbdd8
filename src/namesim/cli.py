"""Command line interface for namesim."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from namesim.config import ScanConfig
from namesim.index.finder import FindResult, find_similar
from namesim.models import ConfigurationError


console = Console()
app = typer.Typer(help="namesim - find files with similar names")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _render_table(result: FindResult) -> None:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Score")
    table.add_column("Size", justify="right")
    table.add_column("File A", overflow="fold")
    table.add_column("File B", overflow="fold")

    for pair in result.pairs:
        table.add_row(
            f"{pair.score:.4f}",
            str(pair.combined_size),
            Text(str(pair.path_a)),
            Text(str(pair.path_b)),
        )

    console.print(table)


def _render_lines(result: FindResult) -> None:
    # One unwrapped line per pair so piped paths stay whole.
    for pair in result.pairs:
        console.print(
            Text(f"{pair.score:.4f}  {pair.combined_size}  {pair.path_a}  {pair.path_b}"),
            soft_wrap=True,
        )


def _render(result: FindResult) -> None:
    if not result.pairs:
        console.print("[yellow]No similar filenames found.[/yellow]")
    elif console.is_terminal:
        _render_table(result)
    else:
        _render_lines(result)
    console.print(f"total count = {result.count}")


@app.command()
def main(
    roots: List[Path] = typer.Argument(
        ..., help="Start points for file-name locating.", resolve_path=True
    ),
    threshold: float = typer.Option(
        ScanConfig().threshold, "--threshold", "-t", help="Minimum similarity to consider a match"
    ),
    reverse: bool = typer.Option(
        False, "--reverse", "-r", help="Reverse display direction of results"
    ),
    trie_len: int = typer.Option(
        ScanConfig().trie_len,
        "--trie-len",
        "-l",
        help="Length of n-word tuple to use as basis vector components (1-4)",
    ),
    filename_pattern: str = typer.Option(
        ScanConfig().filename_pattern,
        "--filename-pattern",
        "-f",
        help="File-names must match this pattern",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Report pairs of files whose names are similar."""
    try:
        config = ScanConfig(
            threshold=threshold,
            reverse=reverse,
            trie_len=trie_len,
            filename_pattern=filename_pattern,
        )
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _setup_logging(verbose)
    result = find_similar(roots, config)
    if verbose:
        console.print(f"Scanned {result.scanned} files, skipped {len(result.warnings)} entries.")
    _render(result)
