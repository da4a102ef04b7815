"""
File: menu.py
Purpose: Numbered main menu, its input loop and the handler that runs the chosen action.
"""
import abc

from moviedb.services.admin_service import AdminService
from moviedb.services.customer_service import CustomerService
from moviedb.services.star_service import StarService

MENU_OPTIONS = [
    "Get movies featuring a given star",
    "Insert a new star into the database",
    "Insert a new customer into the database",
    "Delete a customer from the database",
    "Show internal database information",
    "Enter valid SELECT/UPDATE/INSERT/DELETE SQL command",
    "Switch database user",
    "Exit the program",
]

MENU_GET_MOVIES_FEATURING_STAR = 1
MENU_INSERT_NEW_STAR = 2
MENU_INSERT_NEW_CUSTOMER = 3
MENU_DELETE_CUSTOMER = 4
MENU_SHOW_METADATA = 5
MENU_ENTER_VALID_SQL = 6
MENU_SWITCH_DB_USER = 7
MENU_QUIT = len(MENU_OPTIONS)


class MenuHandler(abc.ABC):
    """Something that can carry out a numbered menu choice."""

    @abc.abstractmethod
    def execute_option(self, choice):
        """Runs the action for `choice`. Returns False when the menu should stop."""


class ActionHandler(MenuHandler):
    """
    Runs the main menu actions against one session.
    Choices without an action (switch user, quit) stop the menu.
    """
    def __init__(self, session):
        db, console = session.db, session.console
        self.console = console
        stars = StarService(db, console)
        customers = CustomerService(db, console)
        admin = AdminService(db, console)
        self.actions = {
            MENU_GET_MOVIES_FEATURING_STAR: stars.show_movies_featuring_star,
            MENU_INSERT_NEW_STAR: stars.insert_new_star,
            MENU_INSERT_NEW_CUSTOMER: customers.insert_new_customer,
            MENU_DELETE_CUSTOMER: customers.delete_customer,
            MENU_SHOW_METADATA: admin.show_metadata,
            MENU_ENTER_VALID_SQL: admin.enter_sql_statement,
        }

    def execute_option(self, choice):
        action = self.actions.get(choice)
        if action is None:
            return False
        action()
        self.console.echo()
        return True


def get_menu_option(console, handler, prompt, default, options):
    """
    Shows the numbered options and asks until a number between 1 and
    len(options) is entered, then hands it to `handler`.

    Returns the choice, negated if the handler said the menu should stop.
    Returns 0 when there are no options. `default` is used for an empty
    answer only when it is itself a valid choice.
    """
    if not options:
        return 0

    default_string = str(default) if 1 <= default <= len(options) else None

    while True:
        for index, label in enumerate(options, start=1):
            console.echo(f"{index}) {label}")
        console.echo()

        answer = console.get_string(prompt, default_string)
        try:
            choice = int(answer)
        except ValueError:
            choice = 0

        if 1 <= choice <= len(options):
            console.echo()
            break

        console.echo("Invalid option selected.")
        console.echo(f"Please choose an option between 1 and {len(options)}")
        console.echo()

    if handler is not None and not handler.execute_option(choice):
        choice = -choice
    return choice


def main_menu(session, default=0):
    """One pass of the main menu for a session."""
    if session is None:
        raise ValueError("The session should not be None.")
    return get_menu_option(session.console, session.handler, "Enter your choice: ", default, MENU_OPTIONS)


def is_quitting(choice):
    return abs(choice) == MENU_QUIT


def is_switching_user(choice):
    return abs(choice) == MENU_SWITCH_DB_USER
