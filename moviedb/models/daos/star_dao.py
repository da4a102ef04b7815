import logging

from moviedb.database.exceptions import RecordNotFoundError
from moviedb.models.daos.base_dao import BaseDAO, InsertStatus
from moviedb.models.entities.star import Star

logger = logging.getLogger(__name__)


class StarDAO(BaseDAO):
    """
    Data Access Object for the stars table.
    """

    def find_star_ids(self, first_name, last_name):
        """
        Returns the ids of stars whose names match exactly, in the store's order.
        An empty name part is left out of the filter.
        Returns None when both parts are empty (the search is cancelled).
        """
        first_name = first_name or ""
        last_name = last_name or ""
        if not first_name and not last_name:
            return None

        if first_name and last_name:
            query = "SELECT id FROM stars WHERE first_name = %s AND last_name = %s"
            params = (first_name, last_name)
        elif first_name:
            query = "SELECT id FROM stars WHERE first_name = %s"
            params = (first_name,)
        else:
            query = "SELECT id FROM stars WHERE last_name = %s"
            params = (last_name,)

        rows = self.db.fetch_all(query, params)
        return [row['id'] for row in rows]

    def get_star_by_id(self, star_id):
        """Loads one star. Raises RecordNotFoundError when the id does not exist."""
        query = "SELECT id, first_name, last_name, dob, photo_url FROM stars WHERE id = %s"
        row = self.db.fetch_one(query, (star_id,))
        if not row:
            raise RecordNotFoundError("stars", star_id)

        return Star.from_row(row)

    def insert_star(self, star):
        """Inserts an unsaved star and assigns the generated id back onto it."""
        if star.is_persisted():
            return InsertStatus.ALREADY_PERSISTED

        query = """
            INSERT INTO stars (id, first_name, last_name, dob, photo_url)
            VALUES (NULL, %s, %s, %s, %s)
        """
        params = (star.first_name, star.last_name, star.dob, star.photo_url)
        status, new_id = self._insert_single_row(query, params)
        if status is InsertStatus.INSERTED:
            star.star_id = new_id
            logger.debug("Inserted star %s", new_id)
        return status
