from unittest.mock import MagicMock

from moviedb.models.daos.schema_dao import SchemaDAO
from moviedb.services.admin_service import AdminService


def test_select_prints_rows(db, console):
    console.feed("SELECT id, title FROM movies WHERE year < 1990 ORDER BY id;")
    AdminService(db, console).enter_sql_statement()
    assert console.lines[0] == "id\ttitle"
    assert "100\tTop Gun" in console.lines
    assert "102\tBig" in console.lines
    assert "\n2 row(s) returned." in console.lines


def test_update_prints_rowcount(db, console):
    console.feed("update movies set director = 'T. Scott' where id = 100")
    AdminService(db, console).enter_sql_statement()
    assert "1 row(s) affected." in console.lines
    assert db.fetch_one("SELECT director FROM movies WHERE id = 100")['director'] == "T. Scott"


def test_other_statements_are_refused(db, console):
    console.feed("DROP TABLE movies")
    AdminService(db, console).enter_sql_statement()
    assert "Only SELECT, UPDATE, INSERT and DELETE commands are allowed." in console.lines
    assert db.count("movies") == 4


def test_store_errors_do_not_end_the_session(db, console):
    console.feed("SELECT nope FROM nowhere")
    AdminService(db, console).enter_sql_statement()
    assert console.lines[0].startswith("Error: ")
    assert not db.is_closed


def test_blank_statement(db, console):
    console.feed("  ")
    AdminService(db, console).enter_sql_statement()
    assert console.lines == ["No command entered."]


def test_show_metadata(db, console):
    service = AdminService(db, console)
    service.schema_dao = MagicMock()
    service.schema_dao.get_table_names.return_value = ["stars"]
    service.schema_dao.get_columns.return_value = [
        {'column_name': 'id', 'column_type': 'int', 'is_nullable': 'NO', 'column_key': 'PRI'},
        {'column_name': 'dob', 'column_type': 'date', 'is_nullable': 'YES', 'column_key': ''},
    ]

    service.show_metadata()

    assert console.lines[0].startswith("DBMS: SQLite v")
    assert "Table: stars" in console.lines
    assert "    id                   int PRIMARY KEY NOT NULL" in console.lines
    assert "    dob                  date" in console.lines
    service.schema_dao.get_columns.assert_called_once_with("stars")


def test_schema_dao_passes_table_name_as_parameter():
    fake = MagicMock()
    fake.fetch_all.return_value = [{'table_name': 'movies'}, {'table_name': 'stars'}]
    dao = SchemaDAO(fake)

    assert dao.get_table_names() == ['movies', 'stars']
    dao.get_columns("stars")
    query, params = fake.fetch_all.call_args.args
    assert "%s" in query
    assert params == ("stars",)
