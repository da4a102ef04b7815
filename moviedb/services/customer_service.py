"""
File: customer_service.py
Purpose: Service Layer for customer actions (insertion and deletion).
"""
from moviedb.database.exceptions import DataAccessError, RecordNotFoundError
from moviedb.models.daos.base_dao import InsertStatus
from moviedb.models.daos.customer_dao import CustomerDAO
from moviedb.models.entities.customer import PASSWORD_MAX, Customer
from moviedb.utils.strings import truncate

# (attribute, prompt) in the order the user is asked
CUSTOMER_PROMPTS = [
    ('first_name', "Enter first name: "),
    ('last_name', "Enter last name:  "),
    ('address', "Enter address: "),
    ('email', "Enter email address: "),
    ('password', "Enter password: "),
    ('cc_id', "Enter credit card number: "),
]


class CustomerService:
    def __init__(self, db_manager, console):
        self.console = console
        self.customer_dao = CustomerDAO(db_manager)

    def build_customer_from_console(self):
        """
        Asks for every customer field in turn.
        The first blank answer cancels and returns None.
        """
        out = self.console
        out.echo("Enter the information for the customer you wish to add.")
        out.echo("Leave any field blank to cancel.")
        out.echo()

        fields = {}
        for name, prompt in CUSTOMER_PROMPTS:
            value = out.get_string(prompt)
            if not value:
                out.echo("Insertion canceled.")
                return None
            if name == 'password':
                value = truncate(value, PASSWORD_MAX)
                out.echo(f"Password is: {value}")
            fields[name] = value

        return Customer(**fields)

    def insert_new_customer(self):
        """Menu action: add a customer typed in by the user."""
        customer = self.build_customer_from_console()
        if customer is None:
            return None

        status = self.customer_dao.insert_customer(customer)
        if status is InsertStatus.INSERTED:
            self.console.echo("Customer added successfully.")
            self.console.echo(str(customer))
            return customer
        if status is InsertStatus.ALREADY_PERSISTED:
            self.console.echo("Customer is already in the database.")
        else:
            self.console.echo("Could not add to database.")
            self.console.echo("Possibly you entered an invalid credit card number?")
        return None

    def read_customer_id(self):
        """Asks for a numeric id until one is given. Blank returns None."""
        while True:
            text = self.console.get_string("Enter the customer ID (leave blank to cancel): ")
            if not text:
                return None
            try:
                return int(text)
            except ValueError:
                self.console.echo("Please enter a numeric ID.")

    def delete_customer(self):
        """Menu action: remove a customer after showing it and asking for confirmation."""
        customer_id = self.read_customer_id()
        if customer_id is None:
            self.console.echo("Deletion canceled.")
            return 0

        try:
            customer = self.customer_dao.get_customer_by_id(customer_id)
        except RecordNotFoundError as e:
            self.console.echo(str(e))
            return 0

        self.console.echo(str(customer))
        answer = self.console.get_text_option(False, "Delete this customer? (y/n): ", None, ["y", "n"])
        if answer != "y":
            self.console.echo("Deletion canceled.")
            return 0

        try:
            removed = self.customer_dao.delete_customer(customer_id)
        except DataAccessError as e:
            # Rows in other tables (sales, ratings) may still reference the customer.
            self.console.echo(f"Could not delete customer: {e}")
            return 0
        self.console.echo(f"{removed} customer(s) deleted.")
        return removed
