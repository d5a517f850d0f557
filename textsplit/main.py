import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from typing_extensions import Annotated

from textsplit.app import TextSplitApp
from textsplit.config import Config
from textsplit.document_loader import DocumentLoader, DocumentLoadError

cli = typer.Typer(
    help="TextSplit CLI – split text into word-bounded parts with a character limit",
    invoke_without_command=True,
    add_completion=False,  # hide completion install/show options
)

ConfigOption = Annotated[Path, typer.Option("--config", help="YAML config file", dir_okay=False)]
SizeOption = Annotated[Optional[int], typer.Option("--size", "-s", help="Maximum characters per part")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")]


def build_config(config_file: Path, size: Optional[int]) -> Config:
    cfg = Config.load(config_file)
    if size is not None:
        cfg.chunk_size = size
    return cfg


def read_input(text: Optional[str], file: Optional[Path]) -> Optional[str]:
    """Pick the text source: argument first, then file, then piped stdin."""
    if text is not None:
        return text
    if file is not None:
        return DocumentLoader().load_document(str(file))
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return None


@cli.command()
def split(
    text: Annotated[Optional[str], typer.Argument(help="Text to split (reads --file or stdin when omitted)")] = None,
    file: Annotated[Optional[Path], typer.Option("--file", "-f", help="Read text from a .txt, .md, .csv or .pdf file", exists=True, dir_okay=False, readable=True, resolve_path=True)] = None,
    size: SizeOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print parts as a JSON array")] = False,
    copy: Annotated[Optional[int], typer.Option("--copy", "-c", help="Copy part N (1-based) to the clipboard")] = None,
    config_file: ConfigOption = Path("config.yaml"),
    verbose: VerboseOption = False,
):
    """Split text into parts and print each one with its character count."""
    cfg = build_config(config_file, size)
    try:
        source = read_input(text, file)
    except DocumentLoadError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    if source is None:
        typer.secho("No text to split. Pass TEXT, --file, or pipe text on stdin.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    # Keep stdout clean for the JSON document
    console = Console(stderr=True) if as_json else None
    app = TextSplitApp(cfg, verbose=verbose, console=console)
    chunks = app.split(source)

    if copy is not None:
        try:
            app.copy(copy)
        except IndexError as e:
            typer.secho(str(e), fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(chunks, ensure_ascii=False))
    else:
        app.show()


@cli.command()
def interactive(
    size: SizeOption = None,
    config_file: ConfigOption = Path("config.yaml"),
    verbose: VerboseOption = False,
):
    """Start an interactive session: enter text, set the size, split and copy parts."""
    cfg = build_config(config_file, size)
    app = TextSplitApp(cfg, verbose=verbose)
    app.run()


@cli.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context):
    """Show help when no subcommand is supplied."""
    if ctx.invoked_subcommand is not None:
        return
    typer.echo(ctx.get_help())


if __name__ == "__main__":
    cli()
