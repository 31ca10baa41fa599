"""CLI entry point for docprint."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from docprint.loader import DocLoadError, load_doc_nodes
from docprint.models import DocNode
from docprint.printer import DocPrinter, WriteFailure


def _load_all(files: list[Path]) -> list[DocNode]:
    """Load every input file into one root node list, in argument order."""
    nodes: list[DocNode] = []
    for path in files:
        try:
            nodes.extend(load_doc_nodes(path))
        except (OSError, DocLoadError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
    return nodes


def _resolve_color(color: bool | None) -> bool:
    """Use the explicit flag, or color only when stdout is a terminal."""
    if color is not None:
        return color
    return sys.stdout.isatty()


app = typer.Typer(
    name="docprint",
    help="Print a text report of documentation nodes from JSON.",
    no_args_is_help=False,
)


@app.command()
def main(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="JSON documents holding arrays of documentation nodes.",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    private: Annotated[
        bool,
        typer.Option(
            "--private",
            help="Include class members marked private.",
        ),
    ] = False,
    color: Annotated[
        bool | None,
        typer.Option(
            "--color/--no-color",
            help="Force ANSI styling on or off (default: only on a terminal).",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            dir_okay=False,
            help="Write the report to this file instead of stdout.",
        ),
    ] = None,
) -> None:
    """Render documentation nodes and print the report."""
    nodes = _load_all(files)
    if not nodes:
        typer.echo("No documentation nodes found.", err=True)
        raise typer.Exit(1)

    use_color = _resolve_color(color) if output is None else bool(color)
    printer = DocPrinter(nodes, use_color=use_color, include_private=private)

    try:
        if output is None:
            typer.echo(printer.render(), nl=False, color=use_color)
        else:
            with output.open("w", encoding="utf-8") as fh:
                printer.format(fh)
    except (OSError, WriteFailure) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
