import logging
import os

import click
from dotenv import load_dotenv

from .._utils.constants import DOTENV_FILE, LOGGER_NAME
from .cli_request import request


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """fetchkit command line."""
    load_dotenv(dotenv_path=os.path.join(os.getcwd(), DOTENV_FILE), override=True)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(LOGGER_NAME).setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


cli.add_command(request)
