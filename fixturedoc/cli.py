"""
fixturedoc CLI - Fixture documentation generator

A command-line tool for generating keyword help for fixture classes:
1. Introspect fixture classes (Python modules or a JSON entity model)
2. Resolve usage templates, context help and doc tags
3. Write one JSON record per class
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fixturedoc.config import Settings
from fixturedoc.errors import FixtureDocError
from fixturedoc.generator import FixtureDocGenerator
from fixturedoc.introspection import PythonModelAdapter, dump_entity_model, load_entity_model
from fixturedoc.schemas import ClassModel, GenerationSummary
from fixturedoc.usage import context_help, resolve_constructor_usage, resolve_method_usage

app = typer.Typer(
    name="fixturedoc",
    help="Fixture Documentation Generator",
    add_completion=False,
)

console = Console()


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except FixtureDocError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _settings(output: Optional[str], ignore: Optional[List[str]], verbose: bool) -> Settings:
    settings = _load_settings()
    if output:
        settings.output_dir = Path(output)
    if ignore:
        settings.ignored_methods = sorted(set(settings.ignored_methods) | set(ignore))
    _configure_logging(settings.log_level, verbose)
    return settings


def _run(classes: List[ClassModel], settings: Settings) -> GenerationSummary:
    generator = FixtureDocGenerator(
        output_dir=settings.output_dir.resolve(),
        ignored_methods=settings.ignored_methods,
    )
    summary = generator.generate(classes)

    border = "green" if not summary.failed else "red"
    console.print(Panel.fit(
        "[bold]Fixture docs generated[/bold]\n\n"
        f"Classes: [cyan]{summary.total_classes}[/cyan]\n"
        f"Written: [green]{len(summary.written)}[/green]\n"
        f"Failed: [red]{len(summary.failed)}[/red]\n"
        f"Output: [yellow]{summary.output_dir}[/yellow]",
        border_style=border
    ))
    for name in summary.failed:
        console.print(f"   [red]✗[/red] {name}")

    if summary.failed:
        raise typer.Exit(1)
    return summary


@app.command()
def generate(
    modules: List[str] = typer.Argument(..., help="Python modules holding fixture classes"),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: $FIXTUREDOC_OUTPUT_DIR or .)",
    ),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Additional method name to skip (repeatable)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """
    Generate fixture docs for the classes of Python modules.

    Example:
        fixturedoc generate shop.fixtures shop.fixtures.checkout -o build/fixture-docs
    """
    settings = _settings(output, ignore, verbose)
    classes = PythonModelAdapter().load_modules(modules)
    if not classes:
        console.print("[red]❌ No classes found[/red]")
        raise typer.Exit(1)
    _run(classes, settings)


@app.command("from-model")
def from_model(
    model: Path = typer.Argument(..., help="JSON entity model"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output directory"),
    ignore: Optional[List[str]] = typer.Option(None, "--ignore", "-i", help="Additional method name to skip"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Generate fixture docs from a JSON entity model."""
    settings = _settings(output, ignore, verbose)
    try:
        classes = load_entity_model(model)
    except FixtureDocError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    _run(classes, settings)


@app.command("model")
def export_model(
    modules: List[str] = typer.Argument(..., help="Python modules holding fixture classes"),
    output: Path = typer.Option(..., "--output", "-o", help="JSON file to write"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Export the entity model of Python modules as JSON."""
    _configure_logging(_load_settings().log_level, verbose)
    classes = PythonModelAdapter().load_modules(modules)
    path = dump_entity_model(classes, output)
    console.print(f"[bold]📁 Entity model saved to:[/bold] [cyan]{path}[/cyan] ({len(classes)} classes)")


@app.command()
def usage(
    name: str = typer.Argument(..., help="Method or class name"),
    params: Optional[List[str]] = typer.Argument(None, help="Parameter names in order"),
    doc: str = typer.Option("", "--doc", "-d", help="Doc comment text"),
    constructor: bool = typer.Option(False, "--constructor", "-c", help="Treat NAME as a class"),
):
    """
    Preview the usage template and context help of an operation.

    Example:
        fixturedoc usage setValue amount
    """
    params = params or []
    if constructor:
        template = resolve_constructor_usage(name, params, doc)
    else:
        template = resolve_method_usage(name, params, doc)

    table = Table(title=name, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", style="cyan")
    table.add_row("usage", Text(template))
    table.add_row("contexthelp", Text(context_help(template)))
    console.print(table)


def main():
    app()


if __name__ == "__main__":
    main()
