# core/kv_store.py
from sqlalchemy.exc import SQLAlchemyError
from core.db import Base, session_scope
from core.errors import StorageError
from models.kv_entry import KeyValueEntry


class KeyValueStore:
    """Persistent string key-value namespace backed by the `kv_store` table."""

    def __init__(self, engine, session_factory):
        self.engine = engine
        self.session_factory = session_factory

    def ensure_schema(self):
        try:
            Base.metadata.create_all(bind=self.engine, tables=[KeyValueEntry.__table__])
        except SQLAlchemyError as e:
            raise StorageError(f"Could not create key-value table: {e}") from e

    def get(self, key: str, default=None):
        try:
            with session_scope(self.session_factory) as db:
                entry = db.get(KeyValueEntry, key)
                return entry.value if entry else default
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read '{key}': {e}") from e

    def get_many(self, keys):
        """Return {key: value} for the keys that exist."""
        keys = list(keys)
        if not keys:
            return {}
        try:
            with session_scope(self.session_factory) as db:
                entries = db.query(KeyValueEntry).filter(KeyValueEntry.key.in_(keys)).all()
                return {entry.key: entry.value for entry in entries}
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read keys {keys}: {e}") from e

    def contains_key(self, key: str) -> bool:
        return self.get(key) is not None

    def set(self, key: str, value: str):
        self.set_many({key: value})

    def set_many(self, mapping: dict):
        """Write every entry in one transaction; nothing is written if any entry fails."""
        for key, value in mapping.items():
            if not isinstance(value, str):
                raise TypeError(f"Value for '{key}' must be a string, got {type(value).__name__}")
        with session_scope(self.session_factory) as db:
            try:
                for key, value in mapping.items():
                    db.merge(KeyValueEntry(key=key, value=value))
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageError(f"Could not write keys {list(mapping)}: {e}") from e

    def remove(self, key: str):
        with session_scope(self.session_factory) as db:
            try:
                db.query(KeyValueEntry).filter(KeyValueEntry.key == key).delete()
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageError(f"Could not remove '{key}': {e}") from e
