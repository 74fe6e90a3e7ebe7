"""Pledge commands."""

import click
from pledgebook.cli.display import format_amount
from pledgebook.cli.error_handling import handle_domain_error
from pledgebook.config import DEPARTMENTS
from pledgebook.domain.errors import DomainError
from pledgebook.domain.records import RecordService
from pledgebook.domain.reporting import ReportingService
from pledgebook.utils.amount_parser import parse_amount


@click.group()
def pledge_group():
    """Manage pledges."""
    pass


@pledge_group.command("add")
@click.argument("name", metavar="DONOR_NAME")
@click.option(
    "--department", required=True, type=click.Choice(DEPARTMENTS), help="Department credited"
)
@click.option("--amount", required=True, help="Pledged amount (e.g., 5000 or 'KES 5,000')")
@click.pass_context
def add_pledge(ctx, name: str, department: str, amount: str):
    """Record a pledge.

    Examples:
        pledgebook pledge add "Jane Wanjiru" --department Youth --amount 5000
    """
    service = RecordService(ctx.obj["store"])

    try:
        pledge_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        pledge = service.add_pledge(name=name, department=department, amount=pledge_amount)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created pledge {pledge.id}")
    click.echo(f"  Donor: {pledge.name}")
    click.echo(f"  Department: {pledge.department}")
    click.echo(f"  Amount: {format_amount(pledge.amount)}")


@pledge_group.command("list")
@click.pass_context
def list_pledges(ctx):
    """Show pledges with amount paid, balance and fulfillment status."""
    service = ReportingService(ctx.obj["store"])

    summaries = service.pledge_summaries()
    if not summaries:
        click.echo("No pledges found.")
        return

    click.echo(f"\nFound {len(summaries)} pledge(s):")
    click.echo("-" * 118)
    click.echo(
        f"{'ID':<34} {'Name':<22} {'Department':<20} {'Pledged':>12} "
        f"{'Paid':>12} {'Balance':>12}  Status"
    )
    click.echo("-" * 118)
    for row in summaries:
        click.echo(
            f"{row.pledge.id:<34} {row.pledge.name[:22]:<22} {row.pledge.department[:20]:<20} "
            f"{row.pledge.amount:>12,.2f} {row.paid:>12,.2f} {row.balance:>12,.2f}  "
            f"{row.status.value}"
        )


def register_commands(cli):
    """Register pledge commands with main CLI."""
    cli.add_command(pledge_group, name="pledge")
