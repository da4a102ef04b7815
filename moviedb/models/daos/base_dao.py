"""
File: base_dao.py
Purpose: Shared single-row insert contract for the star and customer DAOs.
"""
import enum

from moviedb.database.exceptions import TooManyRowsError


class InsertStatus(enum.Enum):
    INSERTED = "inserted"
    NO_ROWS = "no_rows"                      # the store accepted the statement but added nothing
    ALREADY_PERSISTED = "already_persisted"  # the record already carries an id; nothing was sent


class BaseDAO:
    def __init__(self, db_manager):
        self.db = db_manager

    def _insert_single_row(self, query, params):
        """
        Runs an INSERT that must add exactly one row.

        Returns (InsertStatus, generated id). More than one affected row
        means the store is broken and raises TooManyRowsError.
        """
        result = self.db.execute_query(query, params)
        rowcount = result['rowcount']
        if rowcount < 1:
            return InsertStatus.NO_ROWS, None
        if rowcount > 1:
            raise TooManyRowsError(rowcount)
        return InsertStatus.INSERTED, result['lastrowid']
