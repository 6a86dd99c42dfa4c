#!/usr/bin/env python3
import json
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_CONFIG_FILENAME, Settings
from .exporter import ConfigExporter, find_repo_root
from .models import LintConfiguration
from .observers import ConsoleLogObserver, FileLogObserver
from .renderers import DEFAULT_FILENAMES, get_renderer

console = Console()


def print_rules(configuration: LintConfiguration) -> None:
    """Print the preset, formatter and rule table."""
    console.print(f"extends:   {escape(', '.join(configuration.extends) or '-')}")
    console.print(f"formatter: {escape(configuration.formatter)}")

    console.print(f"\n{'Rule':<24} {'Severity':<10} {'Applicability':<14} {'Parameter':<20}")
    console.print("-" * 70)
    for name, setting in configuration.rules.items():
        parameter = "-" if setting.parameter is None else str(setting.parameter)
        console.print(
            f"{name:<24} {setting.severity.name.lower():<10} "
            f"{setting.applicability.value:<14} {escape(parameter):<20}"
        )


@click.command()
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path inside the git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(sorted(DEFAULT_FILENAMES), case_sensitive=False),
    help="Format of the exported configuration (overrides config setting)",
)
@click.option(
    "-o",
    "--output",
    help="Output file relative to the repository root (overrides config setting)",
)
@click.option(
    "-d", "--dry-run", is_flag=True, help="Print the rendered configuration instead of writing it"
)
@click.option(
    "--check",
    is_flag=True,
    help="Exit with status 1 if the exported file does not match the configuration",
)
@click.option("--rule", "rule_name", help="Print the setting of a single rule and exit")
@click.option(
    "--config-list", is_flag=True, help="Display the effective preset, formatter and rules"
)
@click.option(
    "--init",
    is_flag=True,
    help=f"Create {DEFAULT_CONFIG_FILENAME} with default values in the repository root",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log exports (overrides config setting)",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    path: Path,
    output_format: Optional[str],
    output: Optional[str],
    dry_run: bool,
    check: bool,
    rule_name: Optional[str],
    config_list: bool,
    init: bool,
    log_file: Optional[Path],
    version: bool,
):
    """
    Export the repository's commitlint configuration.

    The shipped configuration extends the conventional-commit preset and
    tunes body, reference and sign-off rules. Overrides can be set in
    .commitrules.toml in the repository root. Command line options
    override configuration file settings.
    """
    try:
        if version:
            from .version import display_version_info

            display_version_info()
            return

        repo_path = find_repo_root(path)
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if init:
            if config_path.exists():
                console.print(f"[yellow]{str(config_path).replace(os.sep, '/')} already exists[/yellow]")
            else:
                Settings().save(repo_path)
                console.print(f"[green]Created {str(config_path).replace(os.sep, '/')} with default values[/green]")
            return

        settings = Settings.load(repo_path)

        # Command line options override config
        overrides = {}
        if output_format is not None:
            overrides["output_format"] = output_format.lower()
        if output is not None:
            overrides["output_file"] = output
        if log_file is not None:
            overrides["log_file"] = str(log_file)
        if overrides:
            # Rebuild so command line paths get the same safety checks
            settings = Settings(**{**settings.model_dump(), **overrides})

        configuration = settings.build_configuration()

        if rule_name:
            setting = configuration.get_rule(rule_name)
            if setting is None:
                console.print(f"[red]Rule '{escape(rule_name)}' is not configured[/red]")
                sys.exit(1)
            click.echo(f"{rule_name}: {json.dumps(setting.as_list())}")
            return

        if config_list:
            if config_path.exists():
                console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
            else:
                console.print("[dim]Using shipped rules (no config file found)[/dim]")
            print_rules(configuration)
            return

        renderer = get_renderer(settings.output_format)

        if dry_run:
            click.echo(renderer.render(configuration), nl=False)
            return

        exporter = ConfigExporter(repo_path, renderer)
        exporter.add_observer(ConsoleLogObserver(console))

        log_file_path = settings.get_log_file()
        if log_file_path:
            exporter.add_observer(FileLogObserver(str(repo_path / log_file_path)))

        if check:
            if not exporter.check(configuration, settings.output_file):
                console.print("[yellow]Run commitrules to regenerate it[/yellow]")
                sys.exit(1)
            return

        exporter.export(configuration, settings.output_file)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()


if __name__ == "__main__":
    main()
