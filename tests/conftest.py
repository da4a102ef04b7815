import sqlite3
from datetime import date

import pytest

from moviedb.classes.console import Console
from moviedb.database.exceptions import DataAccessError, SessionClosedError

sqlite3.register_adapter(date, date.isoformat)

SCHEMA = """
CREATE TABLE stars (
    id INTEGER PRIMARY KEY,
    first_name VARCHAR(50) NOT NULL DEFAULT '',
    last_name VARCHAR(50) NOT NULL,
    dob DATE,
    photo_url VARCHAR(200)
);
CREATE TABLE movies (
    id INTEGER PRIMARY KEY,
    title VARCHAR(100) NOT NULL,
    year INTEGER NOT NULL,
    director VARCHAR(100) NOT NULL,
    banner_url VARCHAR(200),
    trailer_url VARCHAR(200)
);
CREATE TABLE stars_in_movies (
    star_id INTEGER NOT NULL REFERENCES stars(id),
    movie_id INTEGER NOT NULL REFERENCES movies(id)
);
CREATE TABLE creditcards (
    id VARCHAR(20) PRIMARY KEY
);
CREATE TABLE customers (
    id INTEGER PRIMARY KEY,
    first_name VARCHAR(50) NOT NULL,
    last_name VARCHAR(50) NOT NULL,
    cc_id VARCHAR(20) NOT NULL REFERENCES creditcards(id),
    address VARCHAR(200) NOT NULL,
    email VARCHAR(50) NOT NULL,
    password VARCHAR(20) NOT NULL
);
"""

SEED = """
INSERT INTO stars (id, first_name, last_name, dob, photo_url) VALUES
    (3, '', 'Cher', NULL, NULL),
    (12, 'Tom', 'Hanks', '1956-07-09', NULL),
    (20, 'Meg', 'Ryan', NULL, NULL),
    (47, 'Tom', 'Cruise', '1962-07-03', 'http://img/cruise.jpg'),
    (50, 'Tommy', 'Lee Jones', NULL, NULL);
INSERT INTO movies (id, title, year, director) VALUES
    (100, 'Top Gun', 1986, 'Tony Scott'),
    (101, 'Mission: Impossible', 1996, 'Brian De Palma'),
    (102, 'Big', 1988, 'Penny Marshall'),
    (103, 'Sleepless in Seattle', 1993, 'Nora Ephron');
INSERT INTO stars_in_movies (star_id, movie_id) VALUES
    (47, 101),
    (47, 100),
    (12, 102),
    (12, 103),
    (20, 103);
INSERT INTO creditcards (id) VALUES ('4111111111111111');
INSERT INTO customers (id, first_name, last_name, cc_id, address, email, password) VALUES
    (1, 'Ada', 'Lovelace', '4111111111111111', '12 Analytical Way', 'ada@example.com', 'engine');
"""


class SqliteDB:
    """
    In-memory stand-in for DBManager that runs the same SQL on sqlite.
    Placeholders are translated from %s to ?.
    """
    def __init__(self):
        self._conn = sqlite3.connect(":memory:")
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA foreign_keys = ON")
        self._conn.executescript(SCHEMA)
        self._conn.executescript(SEED)
        self.queries = []
        self.close_count = 0

    @property
    def connection(self):
        if self._conn is None:
            raise SessionClosedError()
        return self._conn

    @property
    def is_closed(self):
        return self._conn is None

    def close(self):
        if self._conn is None:
            return
        self.close_count += 1
        self._conn.close()
        self._conn = None

    def _run(self, query, params):
        self.queries.append((query, params))
        try:
            return self.connection.execute(query.replace("%s", "?"), params or ())
        except sqlite3.IntegrityError as e:
            errno = 1452 if "FOREIGN KEY" in str(e) else 1062
            raise DataAccessError(str(e), errno) from e
        except sqlite3.Error as e:
            raise DataAccessError(str(e)) from e

    def fetch_all(self, query, params=None):
        return [dict(row) for row in self._run(query, params).fetchall()]

    def fetch_one(self, query, params=None):
        rows = self.fetch_all(query, params)
        return rows[0] if rows else None

    def execute_query(self, query, params=None):
        cursor = self._run(query, params)
        self.connection.commit()
        return {'rowcount': cursor.rowcount, 'lastrowid': cursor.lastrowid}

    def execute_statement(self, sql):
        cursor = self._run(sql, None)
        if cursor.description is not None:
            rows = [tuple(row) for row in cursor.fetchall()]
            return [column[0] for column in cursor.description], rows
        self.connection.commit()
        return None, cursor.rowcount

    def get_product_info(self):
        return "SQLite", sqlite3.sqlite_version

    def count(self, table):
        return self.fetch_one(f"SELECT COUNT(*) AS n FROM {table}")['n']


class ScriptedConsole(Console):
    """Console fed from a list of answers; everything printed is kept in `lines`."""
    def __init__(self, answers=()):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []
        super().__init__(input_func=self._next_answer, output_func=self.lines.append,
                         password_func=self._next_answer)

    def _next_answer(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt {prompt!r}")
        return self.answers.pop(0)

    def feed(self, *answers):
        self.answers.extend(answers)

    @property
    def output(self):
        return "\n".join(self.lines)


@pytest.fixture
def db():
    fake = SqliteDB()
    yield fake
    fake.close()


@pytest.fixture
def console():
    return ScriptedConsole()
