"""CLI entry point for pt-manager."""

import click

from . import __version__
from .commands import calendar, console, customers, serve, stats, trainings
from .config import settings
from .utils.logger import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="pt-manager")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """pt-manager: customer and training-session manager for personal trainers.

    Every run starts from the same sample customers and sessions; nothing is
    saved to disk except CSV exports.

    Example usage:

        # Browse and edit interactively
        pt-manager console

        # Search and sort customers
        pt-manager customers list --search doe --sort email

        # Export customers to CSV
        pt-manager customers export -o customers.csv

        # Minutes per activity
        pt-manager stats

        # Serve the JSON API
        pt-manager serve
    """
    setup_logging("DEBUG" if verbose else settings.LOG_LEVEL)


# Register commands
main.add_command(customers)
main.add_command(trainings)
main.add_command(calendar)
main.add_command(stats)
main.add_command(console)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
