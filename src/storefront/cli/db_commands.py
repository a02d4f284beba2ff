"""Database setup commands."""

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from src.storefront.api.utils.app_startup import configure_logging
from src.storefront.core.services import DbSessionService
from src.storefront.core.services.catalog import PlatformService
from src.storefront.runtime.init_db import init_db

console = Console()


def init_db_command() -> None:
    """Create all database tables."""
    configure_logging()
    try:
        init_db()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to create tables: {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print("[green]✅ Database tables created[/green]")


def seed_platforms_command() -> None:
    """Create or refresh the default platforms (Windows, Mac, iOS, Android)."""
    configure_logging()
    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            platforms = PlatformService(session).seed_defaults()
            table = Table(title="Platforms")
            table.add_column("Name", style="green")
            table.add_column("Icon", style="cyan")
            for platform in platforms:
                table.add_row(platform.name, platform.icon or "")
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to seed platforms: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    console.print(table)
