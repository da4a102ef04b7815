"""
File: star_service.py
Purpose: Service Layer for star actions (search with disambiguation, movie listing, insertion).
"""
from datetime import datetime

from moviedb.database.exceptions import RecordNotFoundError
from moviedb.models.daos.base_dao import InsertStatus
from moviedb.models.daos.movie_dao import MovieDAO
from moviedb.models.daos.star_dao import StarDAO
from moviedb.models.entities.star import Star

DOB_FORMAT = "%Y-%m-%d"


class StarService:
    """
    Orchestrates the console flows that read or add stars.
    """
    def __init__(self, db_manager, console):
        self.console = console
        self.star_dao = StarDAO(db_manager)
        self.movie_dao = MovieDAO(db_manager)

    # --- Search ---
    def search_star(self):
        """
        Asks for a first and last name and resolves them to a single saved star.
        Returns None when the search was cancelled or matched nothing.
        """
        out = self.console
        out.echo("You will be asked for a first name and a last name to search.")
        out.echo("If you choose not to search by a portion of their name, leave that field blank.")
        out.echo("Leaving both fields blank cancels the search.\n")

        first_name = out.get_string("Enter first name: ")
        last_name = out.get_string("Enter last name:  ")
        out.echo()

        ids = self.star_dao.find_star_ids(first_name, last_name)
        if ids is None:
            out.echo("Search canceled.")
            return None
        if not ids:
            out.echo("No records with that name were found!")
            return None

        return self.choose_star(ids)

    def choose_star(self, ids):
        """Loads the only candidate, or lists them all and lets the user pick one by id."""
        if len(ids) == 1:
            return self.star_dao.get_star_by_id(ids[0])

        self.console.echo("Multiple search results found:\n")
        for star_id in ids:
            self.console.echo(self.star_dao.get_star_by_id(star_id).to_short_string())
        self.console.echo()

        chosen = self.console.get_text_option(False, "Enter the appropriate numeric ID: ", None, ids)
        self.console.echo()
        return self.star_dao.get_star_by_id(int(chosen))

    def show_movies_featuring_star(self):
        """Menu action: list the movies of a star found by name."""
        try:
            star = self.search_star()
        except RecordNotFoundError as e:
            self.console.echo(str(e))
            return
        if star is None:
            return

        movies = self.movie_dao.get_movies_for_star(star)
        header = f"Movies featuring {star.name_first_last}"
        self.console.echo(header)
        self.console.echo("-" * len(header))
        self.console.echo()
        for movie in movies or []:
            self.console.echo(movie.title_and_year())

    # --- Insertion ---
    def read_dob(self):
        """Asks until the answer is a valid yyyy-mm-dd date or blank."""
        while True:
            text = self.console.get_string("Enter DOB (yyyy-mm-dd, leave blank to skip): ")
            if not text:
                return None
            try:
                return datetime.strptime(text, DOB_FORMAT).date()
            except ValueError:
                self.console.echo("Invalid format.")

    def build_star_from_console(self):
        """Collects a new star from the console. Returns None if the user cancelled."""
        out = self.console
        out.echo("Enter the information for the star you wish to add.")
        out.echo("Leave the first and last name blank if you wish to cancel.")
        out.echo()

        first_name = out.get_string("Enter first name: ")
        last_name = out.get_string("Enter last name:  ")
        if not first_name and not last_name:
            out.echo("Insertion canceled.")
            return None

        dob = self.read_dob()
        photo_url = out.get_string("Enter photo URL (optional): ")
        out.echo()

        return Star(first_name, last_name, dob, photo_url or None)

    def insert_new_star(self):
        """Menu action: add a star typed in by the user."""
        star = self.build_star_from_console()
        if star is None:
            return None

        status = self.star_dao.insert_star(star)
        if status is InsertStatus.INSERTED:
            self.console.echo(f"{star.name_first_last} added successfully:")
            self.console.echo(str(star))
            return star
        if status is InsertStatus.ALREADY_PERSISTED:
            self.console.echo(f"{star.name_first_last} is already in the database.")
        else:
            self.console.echo("Could not add to database.")
        return None
