"""Main CLI application module."""

import typer

from .db_commands import init_db_command, seed_platforms_command
from .slug_commands import backfill_slugs_command

app = typer.Typer(
    help="Storefront maintenance commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("init-db")(init_db_command)
app.command("seed-platforms")(seed_platforms_command)
app.command("backfill-slugs")(backfill_slugs_command)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
