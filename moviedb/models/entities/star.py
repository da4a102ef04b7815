from moviedb.utils.strings import null_to_empty, truncate

# Column widths of the stars table
FIRST_NAME_MAX = 50
LAST_NAME_MAX = 50
PHOTO_URL_MAX = 200


class Star:
    """
    Data Transfer Object for a movie star.
    A star built from console input has no star_id until it has been inserted.
    """
    def __init__(self, first_name, last_name, dob=None, photo_url=None, star_id=None):
        self.star_id = star_id                                  # id (PK), assigned by the store
        self.first_name = truncate(null_to_empty(first_name), FIRST_NAME_MAX)
        self.last_name = truncate(null_to_empty(last_name), LAST_NAME_MAX)
        self.dob = dob                                          # datetime.date or None
        self.photo_url = truncate(photo_url, PHOTO_URL_MAX)

        # A single name is stored as the last name.
        if not self.last_name:
            self.last_name = self.first_name
            self.first_name = ""

    @classmethod
    def from_row(cls, row):
        """Builds a saved star from a stars row; stored names are kept as they are."""
        star = cls.__new__(cls)
        star.star_id = row['id']
        star.first_name = row['first_name'] or ""
        star.last_name = row['last_name'] or ""
        star.dob = row['dob']
        star.photo_url = row['photo_url']
        return star

    def is_persisted(self):
        return self.star_id is not None and self.star_id >= 0

    @property
    def name_first_last(self):
        if not self.first_name:
            return self.last_name
        if not self.last_name:
            return self.first_name
        return f"{self.first_name} {self.last_name}"

    @property
    def name_last_first(self):
        if not self.first_name:
            return self.last_name
        if not self.last_name:
            return self.first_name
        return f"{self.last_name}, {self.first_name}"

    def to_short_string(self):
        """One line used when listing search candidates."""
        return f"{self.star_id:>10} -> {self.name_last_first}"

    def __str__(self):
        return (
            f"ID:         {self.star_id}\n"
            f"First Name: {self.first_name}\n"
            f"Last Name:  {self.last_name}\n"
            f"DOB:        {self.dob}\n"
            f"Photo URL:  {self.photo_url}\n"
        )
