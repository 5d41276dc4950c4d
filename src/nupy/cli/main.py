# src/nupy/cli/main.py
import dataclasses
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..config import config as nupy_config
from ..error_reporter import ErrorReporter, print_error
from ..nupy_token import display_text
from ..parser import parse
from ..scanner import Scanner

console = Console()
logger = logging.getLogger("nupy.cli")


def _open_input(file):
    """Return (stream, keyboard) for FILE, or stdin when no file was given."""
    if file is None:
        click.echo("nuPython input (enter $ when you're done)>")
        return sys.stdin, True
    return open(file, "r"), False


@click.group()
@click.version_option(version=__version__, prog_name="nupy")
@click.option("--debug", is_flag=True, help="Log every token and grammar rule.")
@click.option("--legacy-comments", is_flag=True,
              help="Count the line twice when a '#' comment ends in a newline.")
@click.pass_context
def cli(ctx, debug, legacy_comments):
    """nuPython front end - scan and syntax-check nuPython programs"""
    cfg = dataclasses.replace(nupy_config, keywords=dict(nupy_config.keywords))
    if legacy_comments:
        cfg.legacy_comment_line_count = True
    if debug:
        cfg.enable_debug_logs = True
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )
        logger.debug("debug logging enabled")
    ctx.obj = cfg


@cli.command()
@click.argument('file', type=click.Path(exists=True), required=False)
@click.option("--table", "as_table", is_flag=True, help="Render tokens as a table.")
@click.pass_obj
def tokens(cfg, file, as_table):
    """Show the tokens of a nuPython file (or keyboard input)"""
    stream, keyboard = _open_input(file)
    try:
        scanner = Scanner(stream, filename=file, reporter=ErrorReporter(), config=cfg)
        pairs = list(scanner)
    finally:
        if not keyboard:
            stream.close()

    if not as_table:
        for token, text in pairs:
            shown = display_text(token.kind, text)
            click.echo(f"Token {int(token.kind)} ('{shown}') @ ({token.line}, {token.col})")
        return

    table = Table(title="Tokens")
    table.add_column("Id", style="magenta", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Text", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")
    for token, text in pairs:
        table.add_row(str(int(token.kind)), token.kind.name, Text(repr(text)),
                      str(token.line), str(token.col))
    console.print(table)


@cli.command()
@click.argument('file', type=click.Path(exists=True), required=False)
@click.option("--show-tokens", is_flag=True, help="Print the accepted token stream.")
@click.option("--context", "show_context", is_flag=True,
              help="Also show the offending source line on stderr.")
@click.pass_obj
def check(cfg, file, show_tokens, show_context):
    """Check syntax of a nuPython file (or keyboard input)"""
    reporter = ErrorReporter()
    if file is None:
        stream, _ = _open_input(None)
    else:
        # whole text, so the reporter can quote the offending line
        stream = Path(file).read_text(encoding="utf-8")
    result = parse(stream, filename=file, reporter=reporter, config=cfg)

    if result is None:
        if show_context:
            for error in reporter.errors:
                print_error(error, reporter=reporter)
        sys.exit(1)

    console.print("[bold green]Syntax is valid![/bold green]")
    if show_tokens:
        for token, text in result:
            shown = display_text(token.kind, text)
            click.echo(f"{token.kind.name:<14} {shown!r:<20} ({token.line},{token.col})")


if __name__ == "__main__":
    cli()
