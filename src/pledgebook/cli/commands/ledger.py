"""Unified ledger command."""

import click
from pledgebook.cli.display import format_amount, format_entry_date
from pledgebook.domain.reporting import ReportingService
from pledgebook.utils.date_parser import parse_date


@click.command("ledger")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'this month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.pass_context
def view_ledger(ctx, start_date: str | None, end_date: str | None):
    """Show income and expenses together, newest first."""
    service = ReportingService(ctx.obj["store"])

    start = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    end = None
    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    entries = service.ledger_between(start_date=start, end_date=end)
    if not entries:
        click.echo("No ledger entries found.")
        return

    click.echo(f"\nFound {len(entries)} ledger entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 90)
    click.echo(f"{'Date':<12} {'Ref':<7} {'Name':<36} {'Type':<9} {'Amount':>20}")
    click.echo("-" * 90)
    for entry in entries:
        click.echo(
            f"{format_entry_date(entry.date):<12} {entry.short_id:<7} {entry.name[:36]:<36} "
            f"{entry.kind.value:<9} {format_amount(entry.amount):>20}"
        )


def register_commands(cli):
    """Register ledger command with main CLI."""
    cli.add_command(view_ledger)
