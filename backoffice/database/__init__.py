from backoffice.database.async_db import Database, get_async_db

__all__ = ["Database", "get_async_db"]
