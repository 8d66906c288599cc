"""Command-line interface for the XLIFF synchronization pipeline."""

import logging
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table
from rich.panel import Panel

from . import __version__
from .config import config
from .errors import LocalizationError
from .locale_mapping import locale_mapping
from .models.task_result import SyncOutcome
from .services.repository import discover_locales
from .services.sync import LocaleSyncOrchestrator
from .services.templates import TemplateBuilder

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Sync Xcode localizations with a Pontoon l10n repository."""
    _configure_logging(verbose)


project_path_option = click.option(
    "--project-path",
    required=True,
    type=click.Path(exists=True),
    help="Path to the .xcodeproj",
)
l10n_path_option = click.option(
    "--l10n-project-path",
    "l10n_path",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Path to the l10n repository",
)
locale_option = click.option(
    "--locale",
    "locale",
    default=None,
    help="Pontoon locale code for a single locale import/export",
)


@cli.command()
@project_path_option
@l10n_path_option
@locale_option
def export(project_path: str, l10n_path: str, locale: Optional[str]):
    """Export strings from the Xcode project into the l10n repository."""
    _validate_config()
    locales = _resolve_locales(l10n_path, locale)
    xcode_locales = [locale_mapping.to_xcode(code) for code in locales]
    console.print(f"[blue]Exporting:[/blue] {', '.join(xcode_locales)}")

    try:
        outcome = _run_with_progress(
            "Exporting",
            len(xcode_locales),
            lambda callback: LocaleSyncOrchestrator(
                project_path, l10n_path, progress_callback=callback
            ).export_locales(xcode_locales),
        )
    except LocalizationError as e:
        console.print(f"[red]Export failed:[/red] {escape(str(e))}")
        raise SystemExit(1)

    _print_outcome(outcome)

    # Templates are only regenerated on a full export.
    if locale is None and outcome.success:
        _build_templates(l10n_path)

    _exit_on_failure(outcome)


@cli.command("import")
@project_path_option
@l10n_path_option
@locale_option
def import_(project_path: str, l10n_path: str, locale: Optional[str]):
    """Import translations from the l10n repository into the Xcode project."""
    _validate_config()
    locales = _resolve_locales(l10n_path, locale)
    console.print(f"[blue]Importing:[/blue] {', '.join(locales)}")

    outcome = _run_with_progress(
        "Importing",
        len(locales),
        lambda callback: LocaleSyncOrchestrator(
            project_path, l10n_path, progress_callback=callback
        ).import_locales(locales),
    )

    _print_outcome(outcome)
    _exit_on_failure(outcome)


@cli.command()
@l10n_path_option
def templates(l10n_path: str):
    """Regenerate the blank template xliff from en-US."""
    _build_templates(l10n_path)


@cli.command()
@l10n_path_option
def locales(l10n_path: str):
    """Show the locales of an l10n repository and their Xcode codes."""
    codes = _resolve_locales(l10n_path, None)

    table = Table(title=f"Locales in {l10n_path}")
    table.add_column("Pontoon", style="cyan")
    table.add_column("Xcode")
    for code in codes:
        xcode_code = locale_mapping.to_xcode(code)
        style = "yellow" if xcode_code != code else ""
        table.add_row(code, f"[{style}]{xcode_code}[/{style}]" if style else xcode_code)

    console.print(table)


def _validate_config() -> None:
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()


def _resolve_locales(l10n_path: str, locale: Optional[str]) -> List[str]:
    if locale:
        return [locale]
    try:
        return discover_locales(l10n_path)
    except LocalizationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)


def _run_with_progress(description: str, total: int, run) -> SyncOutcome:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task(description, total=total)

        def update_progress(current, total, locale):
            progress.update(task, completed=current, description=f"{description} ({locale})")

        return run(update_progress)


def _build_templates(l10n_path: str) -> None:
    try:
        template = TemplateBuilder(l10n_path).build()
    except LocalizationError as e:
        console.print(f"[red]Template generation failed:[/red] {escape(str(e))}")
        raise SystemExit(1)
    console.print(f"[green]Template written:[/green] {template}")


def _print_outcome(outcome: SyncOutcome) -> None:
    """Print per-locale results."""
    table = Table(title=f"{outcome.direction.value.capitalize()} results")
    table.add_column("Locale", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Excluded", justify="right")
    table.add_column("Files dropped", justify="right")
    table.add_column("Filled / Notes", justify="right")

    for result in outcome.results:
        status = "[green]ok[/green]" if result.success else f"[red]{result.stage.value}[/red]"
        table.add_row(
            result.locale,
            status,
            str(result.units_removed),
            str(result.files_removed),
            str(result.targets_filled or result.notes_overridden),
        )

    console.print(table)


def _exit_on_failure(outcome: SyncOutcome) -> None:
    if outcome.success:
        console.print("[green]Done![/green]")
        return

    failures = outcome.failures
    panel_content = "\n".join(f"[red]-[/red] {escape(failure.describe())}" for failure in failures)
    console.print(Panel(
        panel_content,
        title=f"{len(failures)} of {len(outcome.results)} locale(s) failed",
        border_style="red",
    ))
    raise SystemExit(1)


if __name__ == "__main__":
    cli()
