import logging

from moviedb.database.exceptions import DataAccessError, RecordNotFoundError
from moviedb.models.daos.base_dao import BaseDAO, InsertStatus
from moviedb.models.entities.customer import Customer

logger = logging.getLogger(__name__)

# MySQL: "Cannot add or update a child row: a foreign key constraint fails"
ER_NO_REFERENCED_ROW = 1452


class CustomerDAO(BaseDAO):
    """
    Data Access Object for the customers table.
    """

    def get_customer_by_id(self, customer_id):
        query = """
            SELECT id, first_name, last_name, cc_id, address, email, password
            FROM customers WHERE id = %s
        """
        row = self.db.fetch_one(query, (customer_id,))
        if not row:
            raise RecordNotFoundError("customers", customer_id)

        return Customer.from_row(row)

    def insert_customer(self, customer):
        """
        Inserts an unsaved customer and assigns the generated id back onto it.
        A credit card id rejected by the foreign key is reported as NO_ROWS.
        """
        if customer.is_persisted():
            return InsertStatus.ALREADY_PERSISTED

        query = """
            INSERT INTO customers
            (id, first_name, last_name, cc_id, address, email, password)
            VALUES (NULL, %s, %s, %s, %s, %s, %s)
        """
        params = (customer.first_name, customer.last_name, customer.cc_id,
                  customer.address, customer.email, customer.password)
        try:
            status, new_id = self._insert_single_row(query, params)
        except DataAccessError as e:
            if e.errno != ER_NO_REFERENCED_ROW:
                raise
            logger.warning("Customer insert rejected by foreign key: %s", e)
            return InsertStatus.NO_ROWS

        if status is InsertStatus.INSERTED:
            customer.customer_id = new_id
            logger.debug("Inserted customer %s", new_id)
        return status

    def delete_customer(self, customer_id):
        """Deletes a customer by id and returns the number of rows removed."""
        result = self.db.execute_query("DELETE FROM customers WHERE id = %s", (customer_id,))
        return result['rowcount']
