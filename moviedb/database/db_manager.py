"""
File: db_manager.py
Purpose: Owns one MySQL connection for a console session and executes parameterized queries.
"""
import logging

import mysql.connector

from moviedb.config import get_db_config
from moviedb.database.exceptions import DataAccessError, SessionClosedError

logger = logging.getLogger(__name__)


class DBManager:
    """
    Gateway between the application and the MySQL server.

    Every statement is sent with positional ``%s`` placeholders and its
    parameters in a separate tuple. Connector errors are re-raised as
    DataAccessError so callers decide whether they are fatal.
    The cursor of every statement is closed whether or not it succeeded.
    """

    def __init__(self, connection):
        if connection is None:
            raise ValueError("DBMS connection reference cannot be null.")
        self._connection = connection

    @classmethod
    def connect(cls, username, password, config=None):
        """Opens a new connection using the configured host and database."""
        db_config = dict(config) if config is not None else get_db_config()
        try:
            connection = mysql.connector.connect(user=username, password=password, **db_config)
        except mysql.connector.Error as e:
            logger.error("Connection failed for user %s: %s", username, e)
            raise cls._wrap(e) from e
        logger.debug("Connected to %s as %s", db_config.get("database"), username)
        return cls(connection)

    @property
    def connection(self):
        """The live connection. Fails fast once the manager has been closed."""
        if self._connection is None:
            raise SessionClosedError()
        return self._connection

    @property
    def is_closed(self):
        return self._connection is None

    def close(self):
        """Closes the connection and invalidates this manager."""
        connection = self._connection
        if connection is None:
            return
        self._connection = None
        try:
            connection.close()
        except mysql.connector.Error as e:
            print("Error closing database connection.")
            logger.error("Error closing connection: %s", e)

    @staticmethod
    def _wrap(e):
        return DataAccessError(str(e), getattr(e, "errno", None))

    def _rollback(self, connection):
        """Rolls back after a failed statement. A dead link cannot roll back; that is only logged."""
        try:
            connection.rollback()
        except mysql.connector.Error as e:
            logger.error("Rollback failed: %s", e)

    @staticmethod
    def _close_cursor(cursor):
        if cursor is None:
            return
        try:
            cursor.close()
        except mysql.connector.Error as e:
            logger.error("Error closing cursor: %s", e)

    def fetch_all(self, query, params=None):
        """Executes a SELECT query and returns all rows as a list of dictionaries."""
        logger.debug("fetch_all: %s %s", query, params)
        connection = self.connection
        cursor = None
        try:
            cursor = connection.cursor(dictionary=True)
            cursor.execute(query, params or ())
            return cursor.fetchall()
        except mysql.connector.Error as e:
            logger.error("Query failed: %s", e)
            raise self._wrap(e) from e
        finally:
            self._close_cursor(cursor)

    def fetch_one(self, query, params=None):
        """Executes a SELECT query and returns a single row, or None."""
        rows = self.fetch_all(query, params)
        return rows[0] if rows else None

    def execute_query(self, query, params=None):
        """
        Executes an INSERT, UPDATE or DELETE statement and commits it.

        Returns a dict with the affected 'rowcount' and the 'lastrowid'
        generated by an INSERT (None otherwise).
        """
        logger.debug("execute_query: %s %s", query, params)
        connection = self.connection
        cursor = None
        try:
            cursor = connection.cursor(dictionary=True)
            cursor.execute(query, params or ())
            connection.commit()
            return {'rowcount': cursor.rowcount, 'lastrowid': cursor.lastrowid or None}
        except mysql.connector.Error as e:
            logger.error("Statement failed: %s", e)
            self._rollback(connection)
            raise self._wrap(e) from e
        finally:
            self._close_cursor(cursor)

    def execute_statement(self, sql):
        """
        Runs a single free-form statement typed by the user.

        Returns (column_names, rows) when the statement produced a result set,
        otherwise (None, rowcount).
        """
        logger.debug("execute_statement: %s", sql)
        connection = self.connection
        cursor = None
        try:
            cursor = connection.cursor()
            cursor.execute(sql)
            if cursor.with_rows:
                rows = cursor.fetchall()
                return list(cursor.column_names), rows
            connection.commit()
            return None, cursor.rowcount
        except mysql.connector.Error as e:
            logger.error("Statement failed: %s", e)
            self._rollback(connection)
            raise self._wrap(e) from e
        finally:
            self._close_cursor(cursor)

    def get_product_info(self):
        """Returns (product name, version) of the connected server."""
        row = self.fetch_one("SELECT @@version_comment AS product, @@version AS version")
        if not row:
            return "MySQL", ""
        return row['product'], row['version']
