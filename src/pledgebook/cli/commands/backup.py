"""Backup export and restore commands."""

import click
from pledgebook.cli.error_handling import handle_domain_error
from pledgebook.domain.backup import BackupService
from pledgebook.domain.errors import DomainError


@click.group()
def backup_group():
    """Export or restore a full backup."""
    pass


@backup_group.command("export")
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, exists=True),
    default=".",
    show_default=True,
    help="Directory to write the backup file into",
)
@click.pass_context
def export_backup(ctx, output_dir: str):
    """Write all pledges, transactions and expenses to a dated JSON file."""
    service = BackupService(ctx.obj["store"])

    try:
        path = service.write_backup(output_dir)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Backup written to {path}")


@backup_group.command("restore")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", is_flag=True, help="Restore without asking for confirmation")
@click.pass_context
def restore_backup(ctx, backup_file: str, yes: bool):
    """Replace all current data with a backup file.

    This is destructive: pledges, transactions and expenses recorded since
    the backup are lost.
    """
    service = BackupService(ctx.obj["store"])

    def confirm() -> bool:
        return yes or click.confirm("Restore this backup? Current data will be replaced.")

    try:
        restored = service.restore_file(backup_file, confirm)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if restored:
        click.echo("Backup restored.")
    else:
        click.echo("Restore cancelled.")


def register_commands(cli):
    """Register backup commands with main CLI."""
    cli.add_command(backup_group, name="backup")
