class SchemaDAO:
    """
    Reads table and column metadata of the current database from information_schema.
    """
    def __init__(self, db_manager):
        self.db = db_manager

    def get_table_names(self):
        query = """
            SELECT table_name AS table_name
            FROM information_schema.tables
            WHERE table_schema = DATABASE()
            ORDER BY table_name
        """
        return [row['table_name'] for row in self.db.fetch_all(query)]

    def get_columns(self, table_name):
        """Returns [{'column_name', 'column_type', 'is_nullable', 'column_key'}] in column order."""
        query = """
            SELECT column_name AS column_name, column_type AS column_type,
                   is_nullable AS is_nullable, column_key AS column_key
            FROM information_schema.columns
            WHERE table_schema = DATABASE() AND table_name = %s
            ORDER BY ordinal_position
        """
        return self.db.fetch_all(query, (table_name,))
