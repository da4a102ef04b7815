from moviedb.database.exceptions import RecordNotFoundError
from moviedb.models.entities.movie import Movie


class MovieDAO:
    """
    Data Access Object for movies and the stars_in_movies association.
    """
    def __init__(self, db_manager):
        self.db = db_manager

    def get_movie_by_id(self, movie_id):
        query = """
            SELECT id, title, year, director, banner_url, trailer_url
            FROM movies WHERE id = %s
        """
        row = self.db.fetch_one(query, (movie_id,))
        if not row:
            raise RecordNotFoundError("movies", movie_id)

        return Movie(
            movie_id=row['id'],
            title=row['title'],
            year=row['year'],
            director=row['director'],
            banner_url=row['banner_url'],
            trailer_url=row['trailer_url'],
        )

    def get_movie_ids_for_star(self, star_id):
        query = "SELECT movie_id FROM stars_in_movies WHERE star_id = %s"
        rows = self.db.fetch_all(query, (star_id,))
        return [row['movie_id'] for row in rows]

    def get_movies_for_star(self, star):
        """
        Follows stars_in_movies from a saved star to its movies, in store order.
        Returns None for a star that has not been saved yet.
        """
        if not star.is_persisted():
            return None
        return [self.get_movie_by_id(movie_id) for movie_id in self.get_movie_ids_for_star(star.star_id)]
