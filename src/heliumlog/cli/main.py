"""
heliumlog CLI - Main entry point
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from heliumlog.cli.commands import template
from heliumlog.core.config.settings import Settings
from heliumlog.core.dispatch import Dispatcher
from heliumlog.core.exceptions.custom_exceptions import HeliumLogError
from heliumlog.core.logger import HeliumLogger
from heliumlog.core.logging.logger import get_logger, setup_logging
from heliumlog.core.severity import Severity

# Initialize CLI app
app = typer.Typer(
    name="heliumlog",
    help="Pluggable text-formatting logging backend",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# Initialize console and logger
console = Console()
logger = get_logger(__name__)

app.add_typer(template.app, name="template", help="Format template commands")


def _version_table(settings: Settings) -> Table:
    table = Table(title="heliumlog Version Information")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Environment", style="yellow")

    table.add_row("heliumlog", settings.APP_VERSION, settings.ENVIRONMENT)
    table.add_row("Python", "3.9+", "Required")
    table.add_row("Threshold", settings.THRESHOLD, "Default")
    return table


def version_callback(value: bool) -> None:
    """Handle version callback"""
    if value:
        console.print(_version_table(Settings()))
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show heliumlog diagnostics at DEBUG level"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show heliumlog version and exit",
    ),
) -> None:
    """
    heliumlog CLI - try out severities, templates and colors

    Run 'heliumlog --help' for available commands.
    """
    settings = Settings()
    if verbose:
        settings.LOG_LEVEL = "DEBUG"
    setup_logging(settings)
    if verbose:
        logger.debug("Verbose logging enabled")


@app.command()
def version() -> None:
    """Show heliumlog version information"""
    console.print(_version_table(Settings()))


@app.command()
def levels() -> None:
    """List severities with their rank, label and color"""
    table = Table(title="Severities")
    table.add_column("Rank", style="cyan", justify="right")
    table.add_column("Severity", style="green")
    table.add_column("Color", style="yellow")

    for severity in Severity:
        table.add_row(str(severity.rank), severity.description, severity.color.name)

    console.print(table)


@app.command()
def demo(
    threshold: Optional[str] = typer.Option(
        None, "--threshold", "-t", help="Lowest severity to show"
    ),
    colored: Optional[bool] = typer.Option(
        None, "--colored/--plain", help="ANSI colors (default from settings)"
    ),
) -> None:
    """Emit one line per severity through a stdout logger"""
    try:
        helium_logger = HeliumLogger.from_settings(Settings())
        if threshold is not None:
            helium_logger.threshold = Severity.parse(threshold)
    except HeliumLogError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    if colored is not None:
        helium_logger.colored = colored

    dispatcher = Dispatcher()
    dispatcher.use(logger=helium_logger)
    for severity in Severity:
        dispatcher.log(severity, f"This is a {severity.description.lower()} message")


if __name__ == "__main__":
    app()
