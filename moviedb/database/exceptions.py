"""
File: exceptions.py
Purpose: Error types raised by the data access layer and handled by the driver.
"""


class MovieDBError(Exception):
    """Base class for every error raised by the moviedb package."""


class DataAccessError(MovieDBError):
    """
    The store rejected a statement or the connection broke.
    Carries the engine's message and, when available, its error number.
    """
    def __init__(self, message, errno=None):
        super().__init__(message)
        self.errno = errno


class RecordNotFoundError(MovieDBError):
    """A lookup by primary key found no row."""
    def __init__(self, table, record_id):
        super().__init__(f"Invalid ID passed: no row in '{table}' with id {record_id}.")
        self.table = table
        self.record_id = record_id


class InvariantViolationError(MovieDBError):
    """The store broke one of its own guarantees. Always fatal."""


class TooManyRowsError(InvariantViolationError):
    def __init__(self, rowcount):
        super().__init__(f"Too many rows were updated ({rowcount}). This should not happen.")
        self.rowcount = rowcount


class SessionClosedError(RuntimeError):
    """Raised when a released connection handle is used again."""
    def __init__(self):
        super().__init__("This handler has been invalidated, and can no longer be used.")
