"""CLI entry point for liftlog."""

import click

from .commands import demo, exercises, shell
from .commands.base import configure_logging
from .config import StoreConfig


@click.group()
@click.version_option(version="0.1.0", prog_name="liftlog")
@click.option("--verbose", "-v", is_flag=True, help="Log store activity to stderr")
@click.pass_context
def main(ctx, verbose: bool):
    """liftlog: workout templates and sessions, kept in memory.

    Settings come from LIFTLOG_* environment variables
    (LIFTLOG_SEED_EXERCISES, LIFTLOG_FINISH_POLICY, LIFTLOG_LOCK_FINISHED,
    LIFTLOG_WEIGHT_UNIT).

    Example usage:

        # See the exercise catalog
        liftlog exercises

        # Walk through a sample workout
        liftlog demo

        # Plan and log workouts interactively
        liftlog shell
    """
    configure_logging(verbose)
    try:
        config = StoreConfig.from_env()
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e
    ctx.ensure_object(dict)["config"] = config


# Register commands
main.add_command(exercises)
main.add_command(demo)
main.add_command(shell)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
