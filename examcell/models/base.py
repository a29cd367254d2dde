"""
Base helpers shared by the exam cell models.
"""

import enum
import sqlite3

from sqlalchemy import event, inspect
from sqlalchemy.engine import Engine


@event.listens_for(Engine, 'connect')
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked; PostgreSQL always checks them."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


class SerializerMixin:
    """Column-level serialization for models.

    Relations are never followed here; each model's ``to_dict`` decides which
    related objects to embed so that back-references can be left out.
    """

    def column_dict(self, exclude=()):
        data = {}
        for attr in inspect(self).mapper.column_attrs:
            if attr.key in exclude:
                continue
            value = getattr(self, attr.key)
            if isinstance(value, enum.Enum):
                value = value.value
            data[attr.key] = value
        return data

    def to_dict(self):
        return self.column_dict()

    @classmethod
    def primary_key_of(cls, instance):
        """Primary key tuple of an instance, or None while any part is unset."""
        identity = inspect(cls).primary_key_from_instance(instance)
        if any(part is None for part in identity):
            return None
        return tuple(identity)
