"""Writes the lint configuration into a repository."""
from pathlib import Path
from typing import List, Optional, Union

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from .errors import ConfigError
from .models import LintConfiguration
from .observers import ExportObserver
from .renderers import ConfigRenderer


def find_repo_root(path: Union[str, Path]) -> Path:
    """Return the working tree root of the repository containing ``path``.

    Outside a git repository ``path`` itself is returned.
    """
    path = Path(path).absolute()
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return path
    if repo.working_tree_dir is None:
        return path
    return Path(repo.working_tree_dir)


class ConfigExporter:
    """Renders a configuration and keeps its file in sync."""

    def __init__(self, path: Union[str, Path], renderer: ConfigRenderer):
        self.root = find_repo_root(path)
        self.renderer = renderer
        self.observers: List[ExportObserver] = []

    def add_observer(self, observer: ExportObserver) -> None:
        """Add an observer to be notified of exports."""
        self.observers.append(observer)

    def remove_observer(self, observer: ExportObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    def target(self, filename: Optional[Union[str, Path]] = None) -> Path:
        """Resolve the output file, relative to the repository root."""
        path = self.root / (filename or self.renderer.default_filename)
        try:
            path.resolve().relative_to(self.root.resolve())
        except ValueError:
            raise ConfigError(f"{path} is outside the repository at {self.root}") from None
        return path

    def export(
        self, configuration: LintConfiguration, filename: Optional[Union[str, Path]] = None
    ) -> Path:
        """Write the rendered configuration and return the file path."""
        path = self.target(filename)
        try:
            path.write_text(self.renderer.render(configuration), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not write {path}: {e}") from e

        for observer in self.observers:
            observer.on_config_written(path, self.renderer.name)
        return path

    def check(
        self, configuration: LintConfiguration, filename: Optional[Union[str, Path]] = None
    ) -> bool:
        """Check whether the file on disk matches the rendered configuration."""
        path = self.target(filename)
        up_to_date = False
        if path.is_file():
            try:
                up_to_date = path.read_text(encoding="utf-8") == self.renderer.render(configuration)
            except UnicodeDecodeError:
                up_to_date = False
            except OSError as e:
                raise ConfigError(f"Could not read {path}: {e}") from e

        for observer in self.observers:
            observer.on_config_checked(path, up_to_date)
        return up_to_date
