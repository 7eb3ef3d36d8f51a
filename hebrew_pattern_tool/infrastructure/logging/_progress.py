# hebrew_pattern_tool/infrastructure/logging/_progress.py

"""Progress bar management for CLI output"""

# Standard library imports
from logging import getLogger

# Third party imports
from rich.console import Console
from rich.progress import BarColumn
from rich.progress import MofNCompleteColumn
from rich.progress import Progress
from rich.progress import SpinnerColumn
from rich.progress import TaskID
from rich.progress import TextColumn
from rich.progress import TimeElapsedColumn

logger = getLogger(__name__)


class ProgressBarManager:
    """Manages one progress bar per searched source"""

    def __init__(self, enabled: bool = True, console: Console | None = None) -> None:
        """Initialize progress bar manager

        Args:
            enabled: Whether to show progress bars
            console: Console to draw on, stderr by default
        """
        self.enabled = enabled
        self.progress: Progress | None = None
        self.console: Console | None = None
        self.tasks: dict[str, TaskID] = {}

        if self.enabled:
            self.console = console or Console(stderr=True)
            self.progress = Progress(
                SpinnerColumn(),
                TextColumn("[bold blue]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                TimeElapsedColumn(),
                console=self.console,
                expand=False,
            )

    def start(self) -> None:
        """Start the progress display"""
        if self.enabled and self.progress:
            self.progress.start()

    def stop(self) -> None:
        """Stop the progress display"""
        if self.enabled and self.progress:
            self.progress.stop()

    def __enter__(self) -> "ProgressBarManager":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def update_chunks(self, source_key: str, current: int, total: int) -> None:
        """Record that chunk current of total has been scanned for a source

        Creates the source's task on first use.
        """
        if not self.enabled or not self.progress:
            logger.debug(f"{source_key}: chunk {current}/{total}")
            return

        task_id = self.tasks.get(source_key)
        if task_id is None:
            task_id = self.progress.add_task(source_key, total=total)
            self.tasks[source_key] = task_id
        self.progress.update(task_id, completed=current, total=total)

    def log_message(self, message: str, style: str | None = None) -> None:
        """Log a message outside the progress display

        Args:
            message: Message to display
            style: Rich style string (e.g., "bold red")
        """
        if self.enabled and self.console:
            if style:
                self.console.print(f"[{style}]{message}[/{style}]")
            else:
                self.console.print(message)
        else:
            logger.info(message)
