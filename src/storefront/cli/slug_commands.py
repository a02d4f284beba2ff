"""Slug maintenance commands."""

import signal
import threading

import typer
from rich.console import Console
from rich.table import Table

from src.storefront.api.utils.app_startup import configure_logging
from src.storefront.core.services import DbSessionService
from src.storefront.core.services.slug import (
    BackfillAbortedError,
    BackfillReport,
    SlugAssigner,
)
from src.storefront.entities.catalog.product import ProductRepository
from src.storefront.runtime.context import get_config

console = Console()


def _install_stop_handlers(stop_event: threading.Event) -> dict:
    def _request_stop(signum, _frame) -> None:
        console.print(
            f"[yellow]Received {signal.Signals(signum).name}, "
            "stopping after the current product...[/yellow]"
        )
        stop_event.set()

    previous = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, _request_stop)
    return previous


def _render_report(report: BackfillReport, *, aborted: bool) -> None:
    table = Table(title="Slug backfill")
    table.add_column("Processed", style="green")
    table.add_column("Skipped", style="yellow")
    table.add_column("Status", style="cyan")
    status = "aborted" if aborted else "stopped" if report.stopped else "complete"
    table.add_row(str(report.processed), str(report.skipped), status)
    console.print(table)

    if report.failures:
        failures = Table(title="Skipped products")
        failures.add_column("ID", style="cyan")
        failures.add_column("Name", style="magenta")
        failures.add_column("Error", style="red")
        for failure in report.failures:
            failures.add_row(failure.product_id, failure.name, failure.error)
        console.print(failures)


def backfill_slugs_command() -> None:
    """Assign slugs to every product that has none.

    Safe to re-run: products that already have a slug are never touched.
    Ctrl+C finishes the current product and stops.
    """
    configure_logging()
    stop_event = threading.Event()
    previous_handlers = _install_stop_handlers(stop_event)
    database_service = DbSessionService()

    try:
        with database_service.session_scope() as session:
            assigner = SlugAssigner(ProductRepository(session), config=get_config().slug)
            report = assigner.backfill_all_missing_slugs(stop_event)
    except BackfillAbortedError as e:
        console.print(f"[red]❌ Backfill aborted, storage unavailable: {e}[/red]")
        _render_report(e.report, aborted=True)
        raise typer.Exit(code=1) from e
    finally:
        for signum, handler in previous_handlers.items():
            signal.signal(signum, handler)
        database_service.dispose()

    _render_report(report, aborted=False)
