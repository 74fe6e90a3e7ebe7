"""Expense commands."""

import click
from pledgebook.cli.display import format_amount
from pledgebook.cli.error_handling import handle_domain_error
from pledgebook.domain.errors import DomainError
from pledgebook.domain.records import RecordService
from pledgebook.utils.amount_parser import parse_amount
from pledgebook.utils.date_parser import parse_date


@click.group()
def expense_group():
    """Record expenses."""
    pass


@expense_group.command("add")
@click.argument("description")
@click.option("--amount", required=True, help="Amount spent")
@click.option("--date", help="Date spent (YYYY-MM-DD or relative like 'yesterday'); defaults to now")
@click.pass_context
def add_expense(ctx, description: str, amount: str, date: str | None):
    """Record an expense.

    Examples:
        pledgebook expense add "Venue hire" --amount 12000 --date 2024-03-01
    """
    service = RecordService(ctx.obj["store"])

    try:
        expense_amount = parse_amount(amount)
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
        expense = service.add_expense(
            description=description, amount=expense_amount, on_date=on_date
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded expense {expense.id}")
    click.echo(f"  Description: {expense.description}")
    click.echo(f"  Amount: {format_amount(expense.amount)}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
