"""Cash receipt commands."""

import click
from pledgebook.cli.display import format_amount
from pledgebook.cli.error_handling import handle_domain_error
from pledgebook.config import DEPARTMENTS
from pledgebook.domain.errors import DomainError
from pledgebook.domain.records import RecordService
from pledgebook.utils.amount_parser import parse_amount
from pledgebook.utils.date_parser import parse_date


@click.group()
def cash_group():
    """Record cash received."""
    pass


@cash_group.command("add")
@click.argument("name", metavar="PAYER_NAME", required=False)
@click.option("--department", type=click.Choice(DEPARTMENTS), help="Department credited")
@click.option("--amount", required=True, help="Amount received (e.g., 1500)")
@click.option("--pledge", "pledge_id", help="ID of the pledge this payment counts towards")
@click.option("--date", help="Date received (YYYY-MM-DD or relative like 'today'); defaults to now")
@click.pass_context
def add_cash(
    ctx,
    name: str | None,
    department: str | None,
    amount: str,
    pledge_id: str | None,
    date: str | None,
):
    """Record cash received, optionally against a pledge.

    When --pledge is given, the payer name and department default to the
    pledge's.

    Examples:
        pledgebook cash add "Walk-in donor" --department Guests --amount 200
        pledgebook cash add --pledge 3f2a9c... --amount 1000
    """
    service = RecordService(ctx.obj["store"])

    try:
        cash_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    on_date = None
    if date:
        try:
            on_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        transaction = service.record_cash(
            name=name,
            department=department,
            amount=cash_amount,
            on_date=on_date,
            pledge_id=pledge_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded cash {transaction.id}")
    click.echo(f"  Payer: {transaction.name}")
    click.echo(f"  Department: {transaction.department}")
    click.echo(f"  Amount: {format_amount(transaction.amount)}")
    if transaction.pledge_id:
        click.echo(f"  Pledge: {transaction.pledge_id}")


def register_commands(cli):
    """Register cash commands with main CLI."""
    cli.add_command(cash_group, name="cash")
