"""
Template commands for the heliumlog CLI.

Commands:
    parse   Show how a format template is split into literal and token
            segments
    render  Render a single log line with a given template and options

Example Usage:
    heliumlog template parse "(%date) [(%type)] (%msg)"
    heliumlog template render "Disk almost full" --level warning \\
        --format "[(%type)] (%file):(%line) (%msg)" --colored
"""

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from heliumlog.core.entry import prettify_metadata
from heliumlog.core.exceptions.custom_exceptions import HeliumLogError
from heliumlog.core.logger import HeliumLogger
from heliumlog.core.logging.logger import get_logger
from heliumlog.core.severity import Severity
from heliumlog.core.sinks import MemorySink
from heliumlog.core.template import Literal, parse_format

app = typer.Typer(help="Format template commands")
console = Console()
logger = get_logger(__name__)


@app.command()
def parse(
    format_string: str = typer.Argument(..., help="Template, e.g. '(%date) (%msg)'"),
) -> None:
    """Show the segments a format template compiles to"""
    template = parse_format(format_string)

    table = Table(title="Template Segments")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Kind", style="green")
    table.add_column("Value", style="yellow")

    for index, segment in enumerate(template, start=1):
        if isinstance(segment, Literal):
            table.add_row(str(index), "literal", escape(repr(segment.text)))
        else:
            table.add_row(
                str(index), "token", escape(f"{segment.field.name} {segment.field.value}")
            )

    console.print(table)
    console.print(f"{len(template)} segment(s), {len(template.fields)} token(s)")


def _parse_metadata(pairs: List[str]) -> dict:
    metadata = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key:
            raise typer.BadParameter(
                f"Metadata must look like key=value, got '{pair}'",
                param_hint="--meta",
            )
        metadata[key] = value
    return metadata


@app.command()
def render(
    message: str = typer.Argument(..., help="Log message"),
    level: str = typer.Option("info", "--level", "-l", help="Event severity"),
    format_string: Optional[str] = typer.Option(
        None, "--format", "-f", help="Format template"
    ),
    colored: bool = typer.Option(False, "--colored/--plain", help="ANSI colors"),
    details: bool = typer.Option(
        True, "--details/--short", help="Built-in layout when no template is set"
    ),
    full_path: bool = typer.Option(
        False, "--full-path", help="Keep the full source path"
    ),
    date_format: Optional[str] = typer.Option(
        None, "--date-format", help="strftime pattern for (%date)"
    ),
    time_zone: Optional[str] = typer.Option(
        None, "--time-zone", "-z", help="IANA time zone for (%date)"
    ),
    file: str = typer.Option("app/main.py", "--file", help="Source file"),
    function: str = typer.Option("main()", "--function", help="Function name"),
    line: int = typer.Option(1, "--line", help="Line number"),
    meta: List[str] = typer.Option(
        [], "--meta", "-m", help="Metadata as key=value, repeatable"
    ),
) -> None:
    """Render one log line"""
    metadata = _parse_metadata(meta)
    try:
        severity = Severity.parse(level)
        sink = MemorySink()
        helium_logger = HeliumLogger(
            Severity.ENTRY,
            sink,
            colored=colored,
            details=details,
            full_file_path=full_path,
            format=format_string,
            date_format=date_format,
            time_zone=time_zone,
        )
    except HeliumLogError as e:
        logger.warning("Invalid render options", error_code=e.error_code, **e.details)
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    helium_logger.write(
        helium_logger.format_entry(
            severity, message, function, line, file, prettify_metadata(metadata)
        )
    )
    for rendered in sink.lines:
        typer.echo(rendered)
