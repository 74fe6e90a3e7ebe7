"""CSV pledge import command."""

import click
from pledgebook.domain.csv_import import CSVImportService


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_csv(ctx, csv_file: str):
    """Import pledges from a CSV file.

    The first line is a header; each following line is
    name,department,amount. Lines without a name or amount are skipped.
    """
    service = CSVImportService(ctx.obj["store"])

    try:
        result = service.import_file(csv_file)
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    click.echo("\nImport complete:")
    click.echo(f"  Imported: {result['imported']} pledges")
    click.echo(f"  Skipped: {result['skipped']} lines")
    for error in result["errors"]:
        click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
