"""Shared output formatting for CLI commands."""

import click

from pledgebook.config import CURRENCY_LABEL
from pledgebook.domain.reporting import ReportingService
from pledgebook.utils.date_parser import parse_timestamp


def format_amount(amount: float, currency: str = CURRENCY_LABEL) -> str:
    """Format an amount with the currency label, e.g. 'KES 1,250.00'."""
    return f"{currency} {amount:,.2f}"


def format_entry_date(value: str) -> str:
    """Format a stored record date for display, or '-' if unparsable."""
    timestamp = parse_timestamp(value)
    if timestamp is None:
        return "-"
    return timestamp.date().isoformat()


def render_totals(reporting: ReportingService) -> None:
    """Echo the one-line revenue/expenses/net summary."""
    totals = reporting.dashboard_totals()
    click.echo(
        f"Revenue: {format_amount(totals.revenue)} | "
        f"Expenses: {format_amount(totals.expenses)} | "
        f"Net: {format_amount(totals.net)}"
    )
