"""Hard reset command."""

import click
from pledgebook.cli.error_handling import handle_domain_error
from pledgebook.domain.errors import DomainError


@click.command("reset")
@click.option("--yes", is_flag=True, help="Erase without asking for confirmation")
@click.pass_context
def reset(ctx, yes: bool):
    """Erase all pledges, transactions and expenses. Cannot be undone."""
    store = ctx.obj["store"]

    if not yes and not click.confirm("DELETE EVERYTHING?"):
        click.echo("Reset cancelled.")
        return

    try:
        store.clear()
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("All data erased.")


def register_commands(cli):
    """Register reset command with main CLI."""
    cli.add_command(reset)
