from .database import check_database_health, create_db_and_tables, engine, get_db, get_db_session

__all__ = ["engine", "get_db", "get_db_session", "check_database_health", "create_db_and_tables"]
