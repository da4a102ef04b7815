"""
File: cli.py
Purpose: Command line entry point. Logs in, runs the main menu and maps fatal errors to exit codes.
"""
import logging
import sys

import click

from moviedb.classes.console import Console
from moviedb.config import DEFAULT_USERNAME, get_log_level
from moviedb.database.db_manager import DBManager
from moviedb.database.exceptions import DataAccessError, InvariantViolationError
from moviedb.menu import MENU_SWITCH_DB_USER, is_quitting, is_switching_user, main_menu
from moviedb.session import Session

logger = logging.getLogger(__name__)


def get_username_and_password(console, username=None, password=None):
    """Asks for whichever credential was not passed on the command line."""
    if username is None:
        username = console.get_string(f"Enter username (default: {DEFAULT_USERNAME}): ", DEFAULT_USERNAME)
    if password is None:
        password = console.get_password("Enter password (characters are masked): ")
    return username, password


def run(username=None, password=None, console=None, connect=DBManager.connect):
    """
    Runs the console until the user quits.
    Returns the process exit code: 0 on quit, 1 on an unrecoverable store error.
    """
    console = console or Console()
    choice = MENU_SWITCH_DB_USER
    try:
        username, password = get_username_and_password(console, username, password)

        while not is_quitting(choice):
            with Session(connect(username, password), console) as session:
                product, version = session.db.get_product_info()
                console.echo(f"Connected to DBMS: {product} v{version}")
                console.echo()

                choice = main_menu(session)
                while choice >= 0:
                    choice = main_menu(session)

            if is_switching_user(choice):
                username, password = get_username_and_password(console)

    except (DataAccessError, InvariantViolationError) as e:
        console.echo(str(e))
        logger.error("Fatal store error: %s", e)
        return 1
    except (EOFError, KeyboardInterrupt):
        console.echo()
        console.echo("Input closed. Exiting.")
        return 0

    return 0


@click.command()
@click.argument("username", required=False)
@click.argument("password", required=False)
def main(username, password):
    """Interactive console for the moviedb database.

    USERNAME and PASSWORD are asked for when not given.
    """
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    sys.exit(run(username, password))


if __name__ == "__main__":
    main()
