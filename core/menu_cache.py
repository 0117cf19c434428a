# core/menu_cache.py
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from core.config import MENU_IMAGE_BASE_URL, MENU_SCHEMA_VERSION
from core.db import session_scope
from core.errors import StorageError
from models.menu_item import MenuItem

CATEGORIES = ["starters", "mains", "desserts", "drinks", "speciality"]
UNKNOWN_CATEGORY = "Unknown"
SCHEMA_VERSION_KEY = "menu_schema_version"


def image_url(item) -> str:
    """Full image reference for a menu row or payload record."""
    return f"{MENU_IMAGE_BASE_URL}{item.get('image') or ''}"


class MenuCache:
    """
    Local copy of the remote menu, kept in the single `menu` table.

    The engine and session factory are handed in by the caller; every
    operation opens its own session and closes it before returning.
    Rows come back as plain dicts (see MenuItem.to_dict).
    """

    def __init__(self, engine, session_factory, meta_store=None, schema_version: str = MENU_SCHEMA_VERSION):
        self.engine = engine
        self.session_factory = session_factory
        self.meta_store = meta_store  # KeyValueStore holding the schema version marker
        self.schema_version = str(schema_version)

    def table_exists(self) -> bool:
        return inspect(self.engine).has_table(MenuItem.__tablename__)

    def ensure_schema(self, reset: bool = True):
        """
        Prepare the menu table.

        reset=True drops and recreates it, discarding every cached row.
        reset=False keeps an existing table unless the stored schema version
        differs from the current one.
        """
        table = MenuItem.__table__
        try:
            if reset:
                print("🛠 Resetting menu table...")
                table.drop(bind=self.engine, checkfirst=True)
            elif self.meta_store is not None and self.table_exists():
                stored = self.meta_store.get(SCHEMA_VERSION_KEY)
                if stored != self.schema_version:
                    print(f"🛠 Menu schema version changed ({stored} -> {self.schema_version}), rebuilding...")
                    table.drop(bind=self.engine, checkfirst=True)
            table.create(bind=self.engine, checkfirst=True)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not prepare menu table: {e}") from e

        if self.meta_store is not None:
            self.meta_store.set(SCHEMA_VERSION_KEY, self.schema_version)
        print("✅ Menu table ready")

    def fetch_all(self):
        try:
            with session_scope(self.session_factory) as db:
                return [item.to_dict() for item in db.query(MenuItem).order_by(MenuItem.id).all()]
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read menu: {e}") from e

    def count(self) -> int:
        try:
            with session_scope(self.session_factory) as db:
                return db.query(MenuItem).count()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not count menu rows: {e}") from e

    def is_empty(self) -> bool:
        return self.count() == 0

    def replace_all(self, items):
        """
        Delete every row, then insert `items` in order.

        Each insert is committed on its own, so a failure part-way through
        leaves the rows inserted before it and raises StorageError.
        """
        with session_scope(self.session_factory) as db:
            try:
                db.query(MenuItem).delete()
                db.commit()

                inserted = 0
                for item in items:
                    price = item.get("price")
                    db.add(MenuItem(
                        name=item.get("name"),
                        price=float(price) if price is not None else None,
                        description=item.get("description"),
                        image=item.get("image"),
                        category=item.get("category") or UNKNOWN_CATEGORY,
                    ))
                    db.commit()
                    inserted += 1
            except (SQLAlchemyError, ValueError, TypeError) as e:
                db.rollback()
                raise StorageError(f"Menu insert failed: {e}") from e

        print(f"✅ {inserted} menu items inserted")

    def query_filtered(self, categories=None, search_text: str = ""):
        """
        Rows in any of `categories` whose name contains `search_text`.

        An empty category list matches every category; blank search text
        matches every name. Returns [] while the table does not exist.
        """
        categories = list(categories or [])
        search_text = (search_text or "").strip()

        try:
            if not self.table_exists():
                print("⚠️ Menu table does not exist yet, skipping filtering.")
                return []

            with session_scope(self.session_factory) as db:
                query = db.query(MenuItem)
                if categories:
                    query = query.filter(MenuItem.category.in_(categories))
                if search_text:
                    query = query.filter(MenuItem.name.contains(search_text, autoescape=True))
                return [item.to_dict() for item in query.order_by(MenuItem.id).all()]
        except SQLAlchemyError as e:
            raise StorageError(f"Could not filter menu: {e}") from e
