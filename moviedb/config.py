"""
File: config.py
Purpose: Connection settings for the moviedb console, overridable through environment variables.
"""
import os

DEFAULT_USERNAME = "root"
DEFAULT_DATABASE = "moviedb"


def get_db_config():
    """Keyword arguments passed to mysql.connector.connect (credentials excluded)."""
    return {
        "host": os.getenv("MOVIEDB_HOST", "localhost"),
        "port": int(os.getenv("MOVIEDB_PORT", "3306")),
        "database": os.getenv("MOVIEDB_DATABASE", DEFAULT_DATABASE),
        "charset": "utf8mb4",
        "collation": "utf8mb4_unicode_ci",
    }


def get_log_level():
    return os.getenv("MOVIEDB_LOG_LEVEL", "WARNING").upper()
