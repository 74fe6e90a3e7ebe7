"""Main CLI entry point."""

import logging

import click
from pledgebook.database.factories import create_sqlite_database
from pledgebook.domain.errors import StorageUnavailableError
from pledgebook.domain.reporting import ReportingService
from pledgebook.domain.store import DocumentStore
from pledgebook.cli.display import render_totals
from pledgebook.logging_utils import configure_root_logger

# Import and register all commands at module level
from pledgebook.cli.commands import (
    backup,
    cash,
    dashboard,
    expense,
    import_cmd,
    ledger,
    pledge,
    reset,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides PLEDGEBOOK_DB_PATH environment variable)",
    envvar="PLEDGEBOOK_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Pledgebook - Fundraising ledger.

    Record pledges, cash received and expenses, and see how collections
    compare with what was pledged.
    """
    ctx.ensure_object(dict)
    configure_root_logger(logging.DEBUG if verbose else logging.WARNING)

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            db = create_sqlite_database(database_path=db_path)
        except StorageUnavailableError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)

        store = DocumentStore(db)
        store.load()
        reporting = ReportingService(store)
        # Re-render the headline figures after every save
        store.subscribe(lambda _document: render_totals(reporting))

        ctx.obj["db"] = db
        ctx.obj["store"] = store


# Register all commands
dashboard.register_commands(cli)
pledge.register_commands(cli)
cash.register_commands(cli)
expense.register_commands(cli)
ledger.register_commands(cli)
import_cmd.register_commands(cli)
backup.register_commands(cli)
reset.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
