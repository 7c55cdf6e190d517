"""Main CLI interface for the cricket database bootstrap."""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

from ..bootstrap import apply_schema, ensure_database_exists, run_bootstrap, verify_schema
from ..config import get_settings
from ..database import create_admin_engine, create_target_engine
from ..ddl import CRICKET_SCHEMA_SQL

# Initialize rich console
console = Console()

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Console logging through rich plus a log file rolled over at midnight."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    log_settings = get_settings().logging

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console_handler = RichHandler(console=console, show_time=True, show_path=False)
    console_handler.setLevel(log_level)

    log_path = Path(log_file) if log_file else Path(log_settings.dir) / log_settings.file_name
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = TimedRotatingFileHandler(
        log_path,
        when="midnight",
        backupCount=log_settings.backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    logging.basicConfig(
        level=log_level,
        handlers=[console_handler, file_handler],
        force=True
    )


app = typer.Typer(
    name="cricket-db",
    help="Cricket Database Bootstrap - create the database and apply the cricket schema",
    no_args_is_help=True
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file path (rotated daily)"),
):
    """Cricket Database Bootstrap - create the database and apply the cricket schema."""
    log_level = "DEBUG" if verbose else get_settings().logging.level
    setup_logging(log_level, log_file)


@app.command()
def bootstrap():
    """Ensure the target database exists, then apply the schema."""
    console.print("[bold]Bootstrapping cricket database...[/bold]")
    try:
        report = run_bootstrap(get_settings().database)
    except Exception as e:
        logger.error(f"Bootstrap failed: {e}")
        console.print(f"[red]❌ Bootstrap failed: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Bootstrap Summary")
    table.add_column("Step", style="cyan")
    table.add_column("Result", style="green")
    table.add_row("Database", f"{report.database} ({report.database_status.value})")
    table.add_row(
        "Schema",
        f"{report.schema_result.statements_executed} statements "
        f"in {report.schema_result.duration_seconds:.2f}s",
    )
    console.print(table)
    console.print("[green]✅ Bootstrap completed[/green]")


@app.command("create-db")
def create_db():
    """Create the target database if it does not exist."""
    db_settings = get_settings().database
    engine = create_admin_engine(db_settings)
    try:
        status = ensure_database_exists(engine, db_settings.name)
    except Exception as e:
        logger.error(f"Database creation failed: {e}")
        console.print(f"[red]❌ Database creation failed: {e}[/red]")
        raise typer.Exit(1)
    finally:
        engine.dispose()
    console.print(f"[green]✅ Database '{db_settings.name}' {status.value}[/green]")


@app.command("apply-schema")
def apply_schema_cmd(
    dry_run: bool = typer.Option(False, "--dry-run", help="Count statements without touching the database")
):
    """Apply the cricket schema to the target database in one transaction."""
    console.print("[bold]Applying cricket schema...[/bold]")
    engine = create_target_engine(get_settings().database)
    try:
        result = apply_schema(engine, dry_run=dry_run)
    except Exception as e:
        logger.error(f"Schema application failed: {e}")
        console.print(f"[red]❌ Schema application failed: {e}[/red]")
        raise typer.Exit(1)
    finally:
        engine.dispose()

    if result.dry_run:
        console.print(f"[yellow]Dry-run: {result.statements_executed} statements, no DB changes[/yellow]")
    else:
        console.print(f"[green]✅ Applied {result.statements_executed} statements[/green]")


@app.command()
def verify():
    """Check that every expected table and index exists."""
    engine = create_target_engine(get_settings().database)
    try:
        check = verify_schema(engine)
    except Exception as e:
        logger.error(f"Verification failed: {e}")
        console.print(f"[red]❌ Verification failed: {e}[/red]")
        raise typer.Exit(1)
    finally:
        engine.dispose()

    table = Table(title="Schema Objects")
    table.add_column("Object", style="cyan", no_wrap=True)
    table.add_column("Kind", style="white")
    table.add_column("Present", justify="center")
    for name in check.present_tables:
        table.add_row(name, "table", "✅", style="green")
    for name in check.missing_tables:
        table.add_row(name, "table", "❌", style="red")
    for name in check.present_indexes:
        table.add_row(name, "index", "✅", style="green")
    for name in check.missing_indexes:
        table.add_row(name, "index", "❌", style="red")
    console.print(table)

    if not check.ok:
        console.print(
            f"[red]⚠️ Missing {len(check.missing_tables)} tables "
            f"and {len(check.missing_indexes)} indexes[/red]"
        )
        raise typer.Exit(1)
    console.print("[green]✅ Schema complete[/green]")


@app.command("show-schema")
def show_schema():
    """Print the DDL script applied by apply-schema."""
    console.print(Syntax(CRICKET_SCHEMA_SQL.strip(), "sql"))


if __name__ == "__main__":
    app()
