#======================================================================================================
#
#   STORAGE INTERFACE
#   Handlers talk to the database only through Store.execute(query, params) -> rows.
#
#======================================================================================================
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from flask import current_app

from logger import storage_logger


class StorageError(Exception):
    """Raised when the underlying database rejects or fails a statement."""
    pass


class Store:
    """
    Minimal persistence capability used by the request handlers.
    `execute` runs one parameterized statement (named :param placeholders) and
    returns a list of column -> value dicts; writes return an empty list.
    """

    def execute(self, query, params=None):
        raise NotImplementedError


class SqlStore(Store):
    """
    Store backed by the Flask-SQLAlchemy session.
    One adapter serves every backend; the dialect comes from SQLALCHEMY_DATABASE_URI
    (sqlite, postgresql+pg8000, mysql+pymysql).
    """

    def __init__(self, db):
        self.db = db

    def execute(self, query, params=None):
        session = self.db.session
        try:
            result = session.execute(text(query), params or {})
            if result.returns_rows:
                return [dict(row._mapping) for row in result]
            session.commit()
            return []
        except SQLAlchemyError as e:
            session.rollback()
            message = str(getattr(e, "orig", None) or e)
            storage_logger.error(f"Statement failed: {message}")
            raise StorageError(message) from e


def get_store():
    """Return the store injected into the running app."""
    return current_app.extensions["store"]
