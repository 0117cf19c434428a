from core.config import DATABASE_URL
from core.errors import AppError
from core.menu_api import fetch_remote_menu
from main import build_stores

def init_db(database_url: str = DATABASE_URL):
    print("Rebuilding menu cache (drop/create)...")
    kv_store, menu_cache = build_stores(database_url)
    menu_cache.ensure_schema(reset=True)
    print("All tables created:")
    print("   - menu")
    print("   - kv_store")

    try:
        menu_cache.replace_all(fetch_remote_menu())
    except AppError as e:
        print(f"❌ Menu could not be populated: {e}")
        return False

    if menu_cache.is_empty():
        print("⚠️ Remote menu was empty, nothing cached.")
    else:
        print(f"\nDatabase initialization complete! {menu_cache.count()} menu items cached.")
    return True

if __name__ == "__main__":
    init_db()
