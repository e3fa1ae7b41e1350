"""Exercise catalog command."""

import click

from .base import echo_error, echo_info, format_table, get_store


@click.command()
@click.option("--search", "-s", help="Show the catalog exercise closest to this name")
@click.pass_context
def exercises(ctx, search: str | None):
    """List the exercise catalog."""
    store = get_store(ctx)

    if search:
        match = store.find_exercise(search)
        if match is None:
            echo_error(f"No exercise matches '{search}'")
            ctx.exit(1)
        click.echo(f"{match.name}  ({match.id})")
        return

    catalog = store.list_exercises()
    if not catalog:
        echo_info("The exercise catalog is empty")
        return

    rows = [[exercise.name, str(exercise.id)] for exercise in catalog]
    click.echo(format_table(["Name", "ID"], rows))
    click.echo()
    click.echo(f"Total: {len(catalog)} exercise(s)")
