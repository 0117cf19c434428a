# core/menu_sync.py
from core.config import MENU_RESET_ON_START
from core.errors import FormatError, NetworkError, StorageError
from core.menu_api import fetch_remote_menu


def sync_menu(cache, fetch=fetch_remote_menu, reset: bool = MENU_RESET_ON_START):
    """
    Startup policy: serve cached rows, or populate the cache from the remote menu.

    Returns:
        (items, error_message) - error_message is None on success, otherwise a
        text suitable for the screen and items is empty.
    """
    try:
        cache.ensure_schema(reset=reset)
        rows = cache.fetch_all()
    except StorageError as e:
        print(f"❌ Database error: {e}")
        return [], "Failed to initialize database"

    if rows:
        print(f"✅ Loading menu from database ({len(rows)} items)")
        return rows, None

    print("⚠️ No menu in database, fetching from API...")
    try:
        menu = fetch()
        cache.replace_all(menu)
    except (NetworkError, FormatError, StorageError) as e:
        print(f"❌ API fetch error: {e}")
        return [], f"Failed to fetch menu data: {e}"

    # the fetched payload is served directly instead of re-reading the table
    return menu, None
