"""Main CLI entry point."""

import click

from finsight.cli.dispatcher import Dispatcher, run_loop
from finsight.cli.presenter import Presenter
from finsight.config.logging import configure_logging
from finsight.config.settings import DATA_DIR_ENV
from finsight.storage.factories import create_record_stores


@click.command()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help=f"Directory holding the data files (overrides {DATA_DIR_ENV} environment variable)",
    envvar=DATA_DIR_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--log-json", is_flag=True, help="Emit logs as JSON lines")
def cli(data_dir: str | None, verbose: bool, log_json: bool):
    """FinSight - Personal finance ledger.

    Track loans, income, expenses and recurring investments by typing
    commands such as "add income d/salary a/3000". Type "help" for the list
    of commands and "bye" to quit.
    """
    configure_logging(verbose=verbose, log_json=log_json)

    presenter = Presenter()
    stores = create_record_stores(data_dir)
    dispatcher = Dispatcher.from_stores(stores, presenter)
    run_loop(click.get_text_stream("stdin"), dispatcher, presenter)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
