"""stderr status and error output."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn


class ConsoleHandler:
    """handles human-facing status and error output on stderr."""

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self._console = Console(stderr=True)

    @contextmanager
    def status(self, description: str) -> Iterator[None]:
        """shows a transient spinner while the block runs (nothing when quiet)."""
        if self.quiet:
            yield
            return

        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self._console,
            transient=True,
        )
        with progress:
            progress.add_task(escape(description), total=None)
            yield

    def log_error(self, message: str) -> None:
        """prints error message (always shown, even in quiet mode)."""
        self._console.print(
            f"[red]ERROR:[/red] {escape(message)}", highlight=False, soft_wrap=True
        )
