from typing import List, Optional

from rich import box
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TaskProgressColumn, TextColumn
from rich.table import Table

from .sorter import ProgressReporter, Sorter
from .types import Config, RunError


class RichProgressReporter(ProgressReporter):
    """Forwards run progress to a rich progress bar."""

    def __init__(self, progress: Progress):
        self.progress = progress
        self.task: Optional[TaskID] = None

    def start(self, total: int) -> None:
        self.task = self.progress.add_task("", total=total)

    def set_message(self, message: str) -> None:
        if self.task is not None:
            self.progress.update(self.task, description=message)

    def advance(self) -> None:
        if self.task is not None:
            self.progress.advance(self.task)


def build_error_table(errors: List[RunError]) -> Table:
    table = Table(box=box.ROUNDED, expand=False)
    table.add_column("Error", overflow="fold")
    table.add_column("Path", overflow="fold")
    for error in errors:
        table.add_row(*error.row())
    return table


def run_tui(config: Config, console: Optional[Console] = None) -> int:
    console = console or Console()
    console.print("[bold green]Ebook Sorter[/bold green]")

    sorter = Sorter(config)

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(bar_width=None, style="blue", complete_style="cyan"),
        MofNCompleteColumn(),
        TaskProgressColumn(),
        console=console
    ) as progress:
        errors = sorter.run(RichProgressReporter(progress))

    console.print(build_error_table(errors))
    console.print(f"Placed {sorter.placed} files, {len(errors)} errors")

    return 0
