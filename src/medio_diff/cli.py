"""
Command-line interface for medio-diff.

Compares two text files and prints the source file with its differences
highlighted, plus a change summary.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .change_summary import DiffSummary, build_summary, format_summary_dict, log_summary
from .config import DiffConfig
from .diff_engine import DiffEngine
from .panes import as_target_view
from .render import render_html, render_rich

console = Console()


def _read_text(path: Path) -> str:
    """Read a file as UTF-8, keeping line endings as they are."""
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("target", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--mode",
    type=click.Choice(["auto", "code", "prose"]),
    default="auto",
    help="Force code or prose comparison (default: auto-detect from SOURCE).",
)
@click.option(
    "--offset-unit",
    type=click.Choice(["utf16", "codepoint"]),
    default="utf16",
    help="Unit for reported ranges (default: utf16).",
)
@click.option(
    "--code-threshold",
    type=float,
    default=None,
    help="Minimum code similarity to pair two lines (default: 0.5).",
)
@click.option(
    "--prose-threshold",
    type=float,
    default=None,
    help="Minimum prose similarity to pair two lines (default: 0.3).",
)
@click.option(
    "--merge-adjacent",
    is_flag=True,
    default=False,
    help="Merge neighbouring changed tokens into one highlight.",
)
@click.option(
    "--both",
    is_flag=True,
    default=False,
    help="Also show the TARGET pane.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the diff as JSON instead of highlighted text.",
)
@click.option(
    "--html",
    "as_html",
    is_flag=True,
    default=False,
    help="Print the highlighted text as HTML spans.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(
    source: Path,
    target: Path,
    mode: str,
    offset_unit: str,
    code_threshold: Optional[float],
    prose_threshold: Optional[float],
    merge_adjacent: bool,
    both: bool,
    as_json: bool,
    as_html: bool,
    verbose: bool,
) -> None:
    """
    medio-diff - Compare two texts line by line and token by token.

    Lines of SOURCE are paired with lines of TARGET (verbatim matches first,
    then by similarity), and the tokens of each SOURCE line missing from
    its partner are highlighted. Unpaired lines are marked as deleted.

    Examples:

        medio-diff old.js new.js

        medio-diff draft.txt final.txt --both --mode prose

        medio-diff a.py b.py --json --offset-unit codepoint

        medio-diff draft.txt final.txt --html --both > diff.html
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )

    try:
        overrides = {}
        if code_threshold is not None:
            overrides["code_threshold"] = code_threshold
        if prose_threshold is not None:
            overrides["prose_threshold"] = prose_threshold
        config = DiffConfig(
            mode=mode,
            offset_unit=offset_unit,
            merge_adjacent=merge_adjacent,
            **overrides,
        )

        source_text = _read_text(source)
        target_text = _read_text(target)

        engine = DiffEngine(config)
        text_mode = engine.classify(source_text)
        source_diffs = engine.compute(source_text, target_text)
        target_diffs = as_target_view(engine.compute(target_text, source_text)) if both else None

        summary = build_summary(source_diffs, text_mode)
        log_summary(summary)

        if as_json:
            payload = {
                "mode": text_mode.value,
                "offset_unit": config.offset_unit,
                "source": [d.to_dict() for d in source_diffs],
                "target": [d.to_dict() for d in target_diffs] if target_diffs is not None else None,
                "summary": format_summary_dict(summary),
            }
            click.echo(json.dumps(payload, indent=2))
            return

        if as_html:
            click.echo(render_html(source_text, source_diffs, "left", config.offset_unit))
            if target_diffs is not None:
                click.echo(render_html(target_text, target_diffs, "right", config.offset_unit))
            return

        console.print(Panel(
            render_rich(source_text, source_diffs, "left", config.offset_unit),
            title=f"[bold]{source.name}[/bold]",
            border_style="red",
        ))
        if target_diffs is not None:
            console.print(Panel(
                render_rich(target_text, target_diffs, "right", config.offset_unit),
                title=f"[bold]{target.name}[/bold]",
                border_style="green",
            ))

        _display_summary(summary, verbose)

    except UnicodeDecodeError as e:
        console.print(f"[red]Error:[/red] File is not valid UTF-8 text: {e}")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)


def _display_summary(summary: DiffSummary, verbose: bool) -> None:
    """Display diff summary."""
    table = Table(title="Diff Summary", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="yellow")

    if summary.mode:
        table.add_row("Mode", summary.mode.value)
    table.add_row("Lines", str(summary.total_lines))
    table.add_row("Different", str(summary.different_lines))
    table.add_row("Modified", str(summary.modified_lines))
    table.add_row("Deleted", str(summary.deleted_lines))
    if verbose:
        table.add_row("Changed tokens", str(summary.modification_count))
    table.add_row("Change ratio", f"{summary.change_ratio:.1f}%")

    console.print(table)


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
