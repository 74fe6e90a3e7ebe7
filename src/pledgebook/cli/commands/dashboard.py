"""Dashboard and department summary commands."""

import click
from pledgebook.cli.display import format_amount
from pledgebook.domain.reporting import ReportingService


def _echo_departments(service: ReportingService) -> None:
    click.echo("\nCollections by Department:")
    click.echo("-" * 50)
    for row in service.department_totals():
        click.echo(f"{row.department:<30} {format_amount(row.total):>19}")


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show cash collected, expenses, net balance and department totals."""
    service = ReportingService(ctx.obj["store"])
    totals = service.dashboard_totals()

    click.echo("\nDashboard")
    click.echo("=" * 50)
    click.echo(f"{'Cash Collected':<30} {format_amount(totals.revenue):>19}")
    click.echo(f"{'Expenses':<30} {format_amount(totals.expenses):>19}")
    click.echo(f"{'Net Balance':<30} {format_amount(totals.net):>19}")
    _echo_departments(service)


@click.command("departments")
@click.pass_context
def departments(ctx):
    """Show cash collected per department."""
    service = ReportingService(ctx.obj["store"])
    _echo_departments(service)


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(dashboard)
    cli.add_command(departments)
