"""
File: session.py
Purpose: Explicit context for one connected console session (store handle + console).
"""
import logging

from moviedb.menu import ActionHandler

logger = logging.getLogger(__name__)


class Session:
    """
    Owns the DBManager for the lifetime of one login.

    Use as a context manager: the connection is released exactly once on
    exit, whether the menu ended normally or with an error.
    """
    def __init__(self, db_manager, console):
        self.db = db_manager
        self.console = console
        self.handler = ActionHandler(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def close(self):
        if not self.db.is_closed:
            logger.debug("Closing session connection")
        self.db.close()
