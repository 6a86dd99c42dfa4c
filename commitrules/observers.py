"""Observer pattern for configuration exports."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path

from rich.console import Console


class ExportObserver(ABC):
    """Abstract base class for export observers."""

    @abstractmethod
    def on_config_written(self, path: Path, fmt: str) -> None:
        """Called after a configuration file is written."""
        pass

    @abstractmethod
    def on_config_checked(self, path: Path, up_to_date: bool) -> None:
        """Called after a configuration file is compared with its rendering."""
        pass


class ConsoleLogObserver(ExportObserver):
    """Observer that logs exports to the console."""

    def __init__(self, console: Console):
        self.console = console

    def on_config_written(self, path: Path, fmt: str) -> None:
        self.console.print(f"[green]Wrote {fmt} configuration to {path}[/green]")

    def on_config_checked(self, path: Path, up_to_date: bool) -> None:
        if up_to_date:
            self.console.print(f"[green]Up to date: {path}[/green]")
        else:
            self.console.print(f"[red]Out of date: {path}[/red]")


class FileLogObserver(ExportObserver):
    """Observer that logs exports to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_config_written(self, path: Path, fmt: str) -> None:
        self._log(f"Wrote {fmt} configuration to {path}")

    def on_config_checked(self, path: Path, up_to_date: bool) -> None:
        status = "up to date" if up_to_date else "out of date"
        self._log(f"Checked {path}: {status}")
