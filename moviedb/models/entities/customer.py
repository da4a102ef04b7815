from moviedb.utils.strings import null_or_empty_exists, truncate

# Column widths of the customers table
FIRST_NAME_MAX = 50
LAST_NAME_MAX = 50
ADDRESS_MAX = 200
EMAIL_MAX = 50
PASSWORD_MAX = 20
CC_ID_MAX = 20


# --- Customer Entity ---
class Customer:
    def __init__(self, first_name, last_name, address, email, password, cc_id, customer_id=None):
        self.customer_id = customer_id                          # id (PK), assigned by the store
        self.first_name = truncate(first_name, FIRST_NAME_MAX)
        self.last_name = truncate(last_name, LAST_NAME_MAX)
        self.address = truncate(address, ADDRESS_MAX)
        self.email = truncate(email, EMAIL_MAX)
        self.password = truncate(password, PASSWORD_MAX)        # stored as typed
        self.cc_id = truncate(cc_id, CC_ID_MAX)                 # FK -> creditcards

        if null_or_empty_exists(self.first_name, self.last_name, self.address,
                                self.email, self.password, self.cc_id):
            raise ValueError("All fields are required.")

    @classmethod
    def from_row(cls, row):
        """Builds a saved customer from a customers row, as stored, without input validation."""
        customer = cls.__new__(cls)
        customer.customer_id = row['id']
        customer.first_name = row['first_name']
        customer.last_name = row['last_name']
        customer.address = row['address']
        customer.email = row['email']
        customer.password = row['password']
        customer.cc_id = row['cc_id']
        return customer

    def is_persisted(self):
        return self.customer_id is not None and self.customer_id >= 0

    def __str__(self):
        return (
            f"ID:           {self.customer_id}\n"
            f"First Name:   {self.first_name}\n"
            f"Last Name:    {self.last_name}\n"
            f"Address:      {self.address}\n"
            f"Email:        {self.email}\n"
            f"Credit Card#: {self.cc_id}\n"
        )
