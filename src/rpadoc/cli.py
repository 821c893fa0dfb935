"""CLI interface for rpadoc using Typer framework."""

import json as jsonlib
import logging
import time
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from rpadoc import __description__, __version__
from rpadoc.batch import BatchReport, extract_workflows
from rpadoc.config import LogLevel, OutputFormat, RpaDocConfig, load_config
from rpadoc.constants import CONFIG_FILE_NAME, PROJECT_FILE_NAME
from rpadoc.errors import RpaDocError
from rpadoc.output import create_generator
from rpadoc.parser.discovery import XamlDiscovery
from rpadoc.parser.extractor import MetadataExtractor
from rpadoc.parser.project import ProjectParser

app = typer.Typer(
    name="rpadoc",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"rpadoc version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit")
    ] = False,
) -> None:
    """rpadoc - Generate documentation for UiPath projects."""


def _configure_logging(level: LogLevel | str, verbose: bool = False) -> None:
    """Route log records through rich on stderr."""
    level_name = level.value if isinstance(level, LogLevel) else str(level)
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVELS.get(level_name, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_project_path(path: Path) -> Path:
    """Resolve project path with smart detection of project.json vs directory.

    Raises:
        FileNotFoundError: If project.json cannot be found
    """
    resolved_path = path.resolve()

    if resolved_path.name.lower() == PROJECT_FILE_NAME:
        if not resolved_path.exists():
            raise FileNotFoundError(f"Project file not found: {resolved_path}")
        return resolved_path.parent

    if ProjectParser.find_project_file(resolved_path) is None:
        raise FileNotFoundError(f"No project.json found in directory: {resolved_path}")
    return resolved_path


def _apply_overrides(
    config: RpaDocConfig,
    out: Optional[Path],
    output_format: Optional[OutputFormat],
    recursive: Optional[bool],
    public_only: Optional[bool],
    fail_fast: bool,
) -> RpaDocConfig:
    if out is not None:
        config.output.dir = str(out)
    if output_format is not None:
        config.output.format = output_format
    if recursive is not None:
        config.scan.recursive = recursive
    if public_only is not None:
        config.scan.public_only = public_only
    if fail_fast:
        config.extraction.fail_fast = True
    return config


def _print_elapsed(start_time: float) -> None:
    console.print(f"[dim]Finished in {time.time() - start_time:.2f}s[/dim]")


def _print_failures(report: BatchReport) -> None:
    table = Table(show_header=True, header_style="bold red")
    table.add_column("File")
    table.add_column("Error")
    table.add_column("Message")

    for failure in report.failures:
        table.add_row(escape(failure.file_path), failure.error_type, escape(failure.message))

    console.print(table)


@app.command()
def info(
    path: Annotated[
        Path,
        typer.Argument(help="Path to UiPath project directory or project.json file")
    ] = Path("."),
) -> None:
    """Show the name and version of a UiPath project."""
    start_time = time.time()
    try:
        project_dir = _resolve_project_path(path)
        project = ProjectParser.parse_project_from_dir(project_dir)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[bold]rpadoc - {__version__}[/bold]")
    console.print(f"[blue]INFO:[/blue] Project name: {escape(project.name)}")
    console.print(f"[blue]INFO:[/blue] Project version: {escape(project.version)}")
    console.print(f"[blue]INFO:[/blue] Private workflows: {len(project.private_workflows)}")

    if not project.is_library:
        console.print("[yellow]WARN:[/yellow] This app works best with UiPath Library projects")

    _print_elapsed(start_time)

@app.command()
def generate(
    path: Annotated[
        Path,
        typer.Argument(help="Path to UiPath project directory or project.json file")
    ] = Path("."),
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output directory for documentation (default: docs)")
    ] = None,
    output_format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", "-f", help="Output format")
    ] = None,
    recursive: Annotated[
        Optional[bool],
        typer.Option("--recursive/--top-level", help="Include workflows in sub-folders")
    ] = None,
    public_only: Annotated[
        Optional[bool],
        typer.Option("--public-only/--all", help="Leave out workflows the project marks as private")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help=f"Configuration file path (default: <project>/{CONFIG_FILE_NAME})")
    ] = None,
    fail_fast: Annotated[
        bool,
        typer.Option("--fail-fast", help="Stop at the first workflow that cannot be read")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Generate documentation for the workflows of a UiPath project."""
    start_time = time.time()
    try:
        project_dir = _resolve_project_path(path)
        settings = load_config(config or project_dir / CONFIG_FILE_NAME)
        project = ProjectParser.parse_project_from_dir(project_dir)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    settings = _apply_overrides(settings, out, output_format, recursive, public_only, fail_fast)
    _configure_logging(settings.logging.level, verbose)

    console.print(f"[bold]rpadoc - {__version__}[/bold]")
    console.print(f"[blue]Project:[/blue] {escape(project.name)} {escape(project.version)}")
    if not project.is_library:
        console.print("[yellow]WARN:[/yellow] This app works best with UiPath Library projects")

    output_dir = Path(settings.output.dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        generator = create_generator(
            settings.output.format, output_dir, require_empty=settings.output.require_empty
        )
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    discovery = XamlDiscovery(
        project_dir,
        exclude_patterns=settings.scan.exclude,
        private_workflows=project.private_workflows,
    )
    try:
        files = discovery.find_xaml_files(
            recursive=settings.scan.recursive, public_only=settings.scan.public_only
        )
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"[dim]Found {len(files)} workflow files[/dim]")

    extractor = MetadataExtractor(settings.extraction.root_shapes)
    try:
        report = extract_workflows(
            files,
            extractor=extractor,
            project_root=project_dir,
            fail_fast=settings.extraction.fail_fast,
        )
    except (RpaDocError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        written = generator.write_all(report.workflows)
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]OK[/green] Documented {len(written)} of {report.total} workflows")
    console.print(f"[blue]Output:[/blue] {escape(str(output_dir))}")

    if report.failures:
        console.print(f"[yellow]WARN[/yellow] {len(report.failures)} workflows could not be read:")
        _print_failures(report)
        raise typer.Exit(1)

    _print_elapsed(start_time)


@app.command()
def inspect(
    file: Annotated[
        Path,
        typer.Argument(help="Path to a XAML workflow file")
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the metadata as JSON")
    ] = False,
) -> None:
    """Show the metadata extracted from a single workflow."""
    try:
        metadata = MetadataExtractor().get_metadata(file)
    except (RpaDocError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(jsonlib.dumps(metadata.to_dict()))
        return

    console.print(f"[bold]{escape(metadata.name)}[/bold]")
    if metadata.description:
        console.print(escape(metadata.description))

    if not metadata.arguments:
        console.print("[dim]This activity does not define any arguments.[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Name")
    table.add_column("Purpose")
    table.add_column("Direction")
    table.add_column("Type")
    table.add_column("Default Value")

    for argument in metadata.arguments.values():
        table.add_row(
            escape(argument.name),
            escape(argument.annotation),
            argument.direction.value,
            escape(argument.type),
            escape(argument.default_value),
        )

    console.print(table)


if __name__ == "__main__":
    app()
