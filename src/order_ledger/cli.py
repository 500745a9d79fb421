"""Command line interface for the order ledger service."""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn
from sqlalchemy.engine import make_url

from .core.config import get_settings
from .crud import seed_menu_items
from .db.session import drop_db, init_db, session_scope
from .errors import StoreOperationFailed
from .logging_config import configure_logging
from .menu_seed import DEFAULT_MENU

app = typer.Typer(help="Manage and run the order ledger backend service.")


def _print_header(title: str) -> None:
    typer.secho(title, bold=True, fg=typer.colors.CYAN)


@app.command()
def run(
    host: Optional[str] = typer.Option(None, help="Hostname to bind"),
    port: Optional[int] = typer.Option(None, help="Port to expose"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
    log_level: Optional[str] = typer.Option(None, help="Log level for the service and Uvicorn"),
) -> None:
    """Start the FastAPI service using Uvicorn."""

    settings = get_settings()
    level = log_level or settings.log_level
    configure_logging(level)

    uvicorn.run(
        "order_ledger.main:create_application",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=level,
        log_config=None,
        factory=True,
    )


@app.command("init-db")
def init_db_cmd(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables and the history view first"),
) -> None:
    """Create tables, the bill number sequence and the order history view."""

    settings = get_settings()
    if drop:
        drop_db()
        typer.secho("Dropped existing schema", fg=typer.colors.YELLOW)
    init_db()
    typer.echo(f"Database initialised at {settings.database_url}")


@app.command("seed-menu")
def seed_menu(
    clear: bool = typer.Option(False, "--clear", help="Remove existing menu items before seeding"),
) -> None:
    """Insert the default menu, skipping names that already exist."""

    init_db()
    try:
        with session_scope() as session:
            created = seed_menu_items(session, DEFAULT_MENU, clear=clear)
            _print_header(f"Created {len(created)} menu item(s)")
            for item in created:
                typer.echo(f"- #{item.id} {item.item_name} | {item.rate}")
    except StoreOperationFailed as exc:
        typer.secho(exc.message, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


@app.command("show-config")
def show_config() -> None:
    """Print out the effective settings."""

    settings = get_settings()
    _print_header("Effective settings")
    for name, value in settings.model_dump().items():
        if name == "database_url":
            value = make_url(value).render_as_string(hide_password=True)
        typer.echo(f"{name}: {value}")


def main() -> None:
    """Entry-point for console scripts."""

    app()


if __name__ == "__main__":  # pragma: no cover
    main()
