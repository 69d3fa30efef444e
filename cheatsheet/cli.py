"""CLI entry point for cheatsheet."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from cheatsheet.config import CheatsheetConfig, load_config
from cheatsheet.config.loader import DEFAULT_CONFIG_TEMPLATE
from cheatsheet.content import discover_subjects, output_path
from cheatsheet.converter import MarkdownConverter, check_output_shape
from cheatsheet.errors import CheatsheetError
from cheatsheet.output import SheetValidator
from cheatsheet.pipeline import generate_all, generate_sheet

app = typer.Typer(
    name="cheatsheet",
    help="Turn markdown notes into print-ready, multi-column HTML cheat sheets.",
)

config_app = typer.Typer(help="Manage cheatsheet configuration.")
app.add_typer(config_app, name="config")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config: CheatsheetConfig | None = None


def _get_config() -> CheatsheetConfig:
    if _config is None:
        return load_config()
    return _config


def _setup_logging(level: str) -> None:
    """Route the package's loggers to stderr through rich."""
    pkg_logger = logging.getLogger("cheatsheet")
    pkg_logger.setLevel(_LOG_LEVELS[level])
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        )


def _with_content_dir(cfg: CheatsheetConfig, content_dir: str | None) -> CheatsheetConfig:
    if not content_dir:
        return cfg
    content = cfg.content.model_copy(update={"directory": content_dir})
    return cfg.model_copy(update={"content": content})


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to cheatsheet.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _setup_logging(_config.log_level)


@app.command()
def generate(
    subject: Annotated[
        str | None, typer.Argument(help="Subject to convert, e.g. 'python' (default from config)")
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the document instead of writing"),
    content_dir: Annotated[
        str | None, typer.Option("--content-dir", "-d", help="Override the content directory")
    ] = None,
) -> None:
    """Convert <content-dir>/<subject>.md into <content-dir>/<subject>.html."""
    cfg = _with_content_dir(_get_config(), content_dir)
    subject = subject or cfg.content.default_subject

    try:
        sheet = generate_sheet(subject, cfg, dry_run=dry_run)
    except CheatsheetError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if dry_run:
        rprint(Syntax(sheet.document.html, "html", theme="monokai"))
        rprint(f"[yellow](dry run: would write {escape(sheet.path)})[/yellow]")
        return

    typer.echo(f"Generated {sheet.path}")


@app.command()
def build(
    dry_run: bool = typer.Option(False, "--dry-run", help="Assemble without writing"),
    content_dir: Annotated[
        str | None, typer.Option("--content-dir", "-d", help="Override the content directory")
    ] = None,
) -> None:
    """Generate a cheat sheet for every subject in the content directory."""
    cfg = _with_content_dir(_get_config(), content_dir)
    report = generate_all(cfg, dry_run=dry_run)

    if not report.generated and not report.errors:
        rprint(f"[yellow]No markdown sources found in {escape(cfg.content.directory)}.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Build Results ({len(report.generated) + len(report.errors)} subjects)")
    table.add_column("Output", style="cyan")
    table.add_column("Status", justify="center")
    for path in report.generated:
        table.add_row(escape(path), "[green]OK[/green]")
    for err in report.errors:
        table.add_row(err.subject, "[red]FAIL[/red]")
    rprint(table)

    for err in report.errors:
        rprint(f"[red]error:[/red] {err.subject}: {escape(err.error)}")

    verb = "Would generate" if dry_run else "Generated"
    rprint(f"{verb} {len(report.generated)} sheet(s), {len(report.errors)} failed.")
    if report.errors:
        raise typer.Exit(1)


@app.command("list")
def list_subjects(
    content_dir: Annotated[
        str | None, typer.Option("--content-dir", "-d", help="Override the content directory")
    ] = None,
) -> None:
    """List subjects found in the content directory."""
    cfg = _with_content_dir(_get_config(), content_dir)
    subjects = discover_subjects(cfg.content)

    if not subjects:
        rprint(f"[yellow]No markdown sources found in {escape(cfg.content.directory)}.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Subjects ({len(subjects)})")
    table.add_column("Subject", style="cyan")
    table.add_column("HTML", justify="center")
    for subject in subjects:
        built = output_path(cfg.content, subject).is_file()
        table.add_row(subject, "[green]yes[/green]" if built else "[dim]no[/dim]")
    rprint(table)


@app.command()
def validate(
    path: Annotated[
        str | None, typer.Argument(help="Directory of generated sheets (default: content dir)")
    ] = None,
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: table or json")
    ] = "table",
) -> None:
    """Validate generated cheat sheets against the document layout contract."""
    cfg = _get_config()
    target = path or cfg.content.directory
    rprint(f"[bold]Validating[/bold] {escape(target)}...")

    validator = SheetValidator.from_config(cfg)
    results = validator.validate_directory(target, extension=cfg.content.output_extension)

    if not results:
        rprint("[yellow]No generated sheets found.[/yellow]")
        raise typer.Exit(0)

    any_invalid = any(not r.valid for r in results)

    if format == "json":
        rprint(json.dumps([r.model_dump() for r in results], indent=2))
    else:
        table = Table(title=f"Validation Results ({len(results)} files)")
        table.add_column("Path", style="cyan")
        table.add_column("Status", justify="center")
        table.add_column("Errors", justify="right", style="red")
        table.add_column("Warnings", justify="right", style="yellow")
        for r in results:
            status = "[green]PASS[/green]" if r.valid else "[red]FAIL[/red]"
            table.add_row(escape(r.path), status, str(len(r.errors)), str(len(r.warnings)))
        rprint(table)

        for r in results:
            if r.errors or r.warnings:
                rprint(f"\n[bold]{escape(r.path)}[/bold]")
                for err in r.errors:
                    rprint(f"  [red]error:[/red] {escape(err)}")
                for warn in r.warnings:
                    rprint(f"  [yellow]warn:[/yellow] {escape(warn)}")

    if any_invalid and cfg.output.validation == "strict":
        raise typer.Exit(1)


@app.command()
def check() -> None:
    """Check that the markdown engine still emits the shapes the stylesheet expects."""
    cfg = _get_config()
    problems = check_output_shape(MarkdownConverter(cfg.markdown))

    if problems:
        for problem in problems:
            rprint(f"[red]broken:[/red] {escape(problem)}")
        raise typer.Exit(1)

    rprint(
        Panel(
            f"[dim]Extensions:[/dim]  {', '.join(cfg.markdown.extensions) or 'none'}\n"
            f"[dim]Container:[/dim]   .{cfg.document.container_class}",
            title="Output shape contract OK",
            border_style="green",
        )
    )


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    import yaml

    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default cheatsheet.yaml in current directory."""
    target = Path("cheatsheet.yaml")
    if target.exists() and not force:
        rprint("[yellow]cheatsheet.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    rprint(f"[green]Created[/green] {target}")
