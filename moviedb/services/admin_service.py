"""
File: admin_service.py
Purpose: Service Layer for the database information and free-form SQL menu actions.
"""
from moviedb.database.exceptions import DataAccessError
from moviedb.models.daos.schema_dao import SchemaDAO

ALLOWED_STATEMENTS = ("SELECT", "UPDATE", "INSERT", "DELETE")


class AdminService:
    def __init__(self, db_manager, console):
        self.db = db_manager
        self.console = console
        self.schema_dao = SchemaDAO(db_manager)

    def show_metadata(self):
        """Prints the server product and every table of the current database with its columns."""
        product, version = self.db.get_product_info()
        self.console.echo(f"DBMS: {product} v{version}")
        self.console.echo()

        tables = self.schema_dao.get_table_names()
        if not tables:
            self.console.echo("No tables found.")
            return

        for table in tables:
            self.console.echo(f"Table: {table}")
            for column in self.schema_dao.get_columns(table):
                flags = ""
                if column['column_key'] == "PRI":
                    flags += " PRIMARY KEY"
                if column['is_nullable'] == "NO":
                    flags += " NOT NULL"
                self.console.echo(f"    {column['column_name']:<20} {column['column_type']}{flags}")
            self.console.echo()

    @staticmethod
    def statement_type(sql):
        words = sql.strip().split(None, 1)
        return words[0].upper() if words else ""

    def enter_sql_statement(self):
        """
        Runs one SELECT/UPDATE/INSERT/DELETE statement typed by the user.
        Errors from the server are printed and the menu carries on.
        """
        sql = self.console.get_string("Enter SQL command: ").strip().rstrip(";")
        if not sql:
            self.console.echo("No command entered.")
            return
        if self.statement_type(sql) not in ALLOWED_STATEMENTS:
            self.console.echo("Only SELECT, UPDATE, INSERT and DELETE commands are allowed.")
            return

        try:
            columns, result = self.db.execute_statement(sql)
        except DataAccessError as e:
            self.console.echo(f"Error: {e}")
            return

        if columns is None:
            self.console.echo(f"{result} row(s) affected.")
            return

        self.console.echo("\t".join(columns))
        for row in result:
            self.console.echo("\t".join("NULL" if value is None else str(value) for value in row))
        self.console.echo(f"\n{len(result)} row(s) returned.")
