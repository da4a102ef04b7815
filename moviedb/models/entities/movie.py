class Movie:
    """
    Data Transfer Object for Movie Entity. Movies are only ever loaded, never built from input.
    """
    def __init__(self, movie_id, title, year, director=None, banner_url=None, trailer_url=None):
        self.movie_id = movie_id
        self.title = title
        self.year = year
        self.director = director
        self.banner_url = banner_url
        self.trailer_url = trailer_url

    def title_and_year(self):
        return f"{self.year} -- {self.title}"

    def __str__(self):
        return (
            f"ID:          {self.movie_id}\n"
            f"Title:       {self.title}\n"
            f"Year:        {self.year}\n"
            f"Director:    {self.director}\n"
            f"Banner URL:  {self.banner_url}\n"
            f"Trailer URL: {self.trailer_url}\n"
        )
