import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from textsplit.chunking import TextChunker
from textsplit.clipboard import ClipboardService
from textsplit.config import Config
from textsplit.logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)

TEXT_TERMINATOR = "."

HELP_TEXT = """[bold]Commands[/]
  text \\[TEXT] set the text; without TEXT, paste lines and end with a lone '.'
  size N      set the maximum characters per part
  split       split the current text
  show        show the current parts again
  copy N      copy part N to the clipboard
  clear       clear text and parts
  help        show this help
  exit, quit  leave"""


@dataclass(frozen=True)
class ChunkView:
    index: int
    text: str
    copied: bool = False

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def label(self) -> str:
        return f"Part {self.index + 1} ({self.length} characters)"


class SplitSession:
    """Form state: the text, the size limit, the produced parts and their copied flags."""

    def __init__(self, chunk_size: int, clipboard: ClipboardService):
        self.text = ""
        self.chunker = TextChunker(chunk_size=chunk_size)
        self.chunks: List[str] = []
        self.clipboard = clipboard

    @property
    def chunk_size(self) -> int:
        return self.chunker.chunk_size

    def set_text(self, text: str) -> None:
        self.text = text

    def set_chunk_size(self, value: Union[str, int, float]) -> int:
        """Coerce a user-supplied size to int. Raises ValueError if it is not numeric."""
        try:
            size = int(float(value))
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"Not a number: {value!r}")
        self.chunker.chunk_size = size
        return size

    @property
    def can_split(self) -> bool:
        return bool(self.text)

    @property
    def can_clear(self) -> bool:
        return bool(self.text) or bool(self.chunks)

    def split(self) -> List[str]:
        self.clipboard.clear()
        self.chunks = self.chunker.chunk_text(self.text)
        logger.info("Split text into %d parts (max %d chars)", len(self.chunks), self.chunk_size)
        return self.chunks

    def clear(self) -> None:
        self.text = ""
        self.chunks = []
        self.clipboard.clear()

    def copy(self, index: int) -> bool:
        """Copy the part at 0-based ``index``. Raises IndexError when out of range."""
        if not 0 <= index < len(self.chunks):
            raise IndexError(f"No part {index + 1}; there are {len(self.chunks)} parts")
        return self.clipboard.copy(index, self.chunks[index])

    def views(self) -> List[ChunkView]:
        return [ChunkView(i, chunk, self.clipboard.is_copied(i)) for i, chunk in enumerate(self.chunks)]


def render_chunks(console: Console, views: List[ChunkView]) -> None:
    """Print each part in a panel with its character count and copy state."""
    if not views:
        return
    console.print(f"\n[bold]Results[/] [magenta]({len(views)} parts)[/]")
    for view in views:
        subtitle = "[bold green]Copied![/]" if view.copied else "[dim]Copy[/]"
        console.print(
            Panel(
                Text(view.text),
                title=f"[bold]{view.label}[/]",
                title_align="left",
                subtitle=subtitle,
                subtitle_align="right",
                border_style="green" if view.copied else "magenta",
            )
        )


class TextSplitApp:
    """Main application class for TextSplit."""

    def __init__(
        self,
        config: Config,
        verbose: bool = False,
        console: Optional[Console] = None,
        copy_func: Optional[Callable[[str], None]] = None,
    ):
        self.config = config
        level = logging.DEBUG if verbose else level_from_name(config.log_level)
        setup_logging(config.log_dir, level=level, console_level=logging.DEBUG if verbose else logging.WARNING, force=True)
        self.console = console or Console()
        self.clipboard = ClipboardService(reset_after=config.copy_reset_seconds, copy_func=copy_func)
        self.session = SplitSession(chunk_size=config.chunk_size, clipboard=self.clipboard)

    def split(self, text: str) -> List[str]:
        self.session.set_text(text)
        if self.session.chunk_size <= 0:
            self.console.print("[yellow]Maximum size must be a positive number; nothing to split.[/]")
        return self.session.split()

    def show(self) -> None:
        render_chunks(self.console, self.session.views())

    def copy(self, number: int) -> bool:
        """Copy part ``number`` (1-based) and report the result."""
        copied = self.session.copy(number - 1)
        if copied:
            self.console.print(f"[green]Copied part {number}.[/]")
        else:
            self.console.print(f"[yellow]Could not copy part {number} to the clipboard.[/]")
        return copied

    def run(self, read_line: Callable[[str], str] = input) -> None:
        """Interactive loop mirroring the split form."""
        logger.info("Starting TextSplit interactive session")
        self.console.print("[bold magenta]TextSplit[/]: split text into parts with a character limit.")
        self.console.print(HELP_TEXT)
        while True:
            self.console.print(f"\n[bold cyan]textsplit[/] [dim](size {self.session.chunk_size})[/]> ", end="")
            try:
                line = read_line("").strip()
            except (KeyboardInterrupt, EOFError):
                break
            if not line:
                continue
            command, _, arg = line.partition(" ")
            command = command.lower()
            arg = arg.strip()

            if command in ("exit", "quit"):
                break
            elif command == "help":
                self.console.print(HELP_TEXT)
            elif command == "text":
                self.session.set_text(arg or self._read_text(read_line))
                self.console.print(f"[dim]{len(self.session.text)} characters entered.[/]")
            elif command == "size":
                try:
                    size = self.session.set_chunk_size(arg)
                except ValueError as e:
                    self.console.print(f"[red]{escape(str(e))}[/]")
                    continue
                self.console.print(f"[dim]Maximum size set to {size}.[/]")
            elif command == "split":
                if not self.session.can_split:
                    self.console.print("[yellow]Enter some text first.[/]")
                    continue
                self.split(self.session.text)
                self.show()
            elif command == "show":
                self.show()
            elif command == "copy":
                try:
                    self.copy(int(arg))
                except ValueError:
                    self.console.print("[red]Usage: copy N[/]")
                    continue
                except IndexError as e:
                    self.console.print(f"[red]{escape(str(e))}[/]")
                    continue
                self.show()
            elif command == "clear":
                if self.session.can_clear:
                    self.session.clear()
                self.console.print("[dim]Cleared.[/]")
            else:
                self.console.print(f"[red]Unknown command: {escape(command)}[/] (type 'help')")

        self.clipboard.clear()
        logger.info("Exiting TextSplit")

    def _read_text(self, read_line: Callable[[str], str]) -> str:
        lines: List[str] = []
        self.console.print(f"[dim]Paste text, then a line with only '{TEXT_TERMINATOR}'.[/]")
        while True:
            try:
                line = read_line("")
            except (KeyboardInterrupt, EOFError):
                break
            if line.strip() == TEXT_TERMINATOR:
                break
            lines.append(line)
        return "\n".join(lines)
