import flet as ft

# Import models FIRST so their tables are registered on Base.metadata
from models.menu_item import MenuItem
from models.kv_entry import KeyValueEntry

from core.config import DATABASE_URL
from core.db import make_engine, make_session_factory
from core.kv_store import KeyValueStore
from core.menu_cache import MenuCache
from core.auth_service import LOGGED_IN, login_state, logout

from ui.login_view import login_view
from ui.home_view import home_view
from ui.profile_view import profile_view

PUBLIC_ROUTES = ["/", "/login"]


def build_stores(database_url: str = DATABASE_URL):
    """Create the storage handles the screens share for this launch."""
    engine = make_engine(database_url)
    session_factory = make_session_factory(engine)
    kv_store = KeyValueStore(engine, session_factory)
    kv_store.ensure_schema()
    menu_cache = MenuCache(engine, session_factory, meta_store=kv_store)
    return kv_store, menu_cache


def main(page: ft.Page):
    page.window.width = 400
    page.window.height = 760
    page.padding = 0
    page.spacing = 0
    page.title = "Little Lemon"

    kv_store, menu_cache = build_stores()
    startup = {"menu_synced": False, "menu_error": None, "categories": [], "search_text": ""}
    active = {"controller": None}

    def stop_filter():
        controller = active["controller"]
        if controller:
            # keep the filter for the next visit to the menu
            startup["categories"] = list(controller.selected_categories)
            startup["search_text"] = controller.search_text
            controller.close()
            active["controller"] = None

    def route_change(e):
        stop_filter()
        page.overlay.clear()
        logged_in = login_state(kv_store) == LOGGED_IN

        if page.route == "/logout":
            logout(kv_store)
            page.go("/login")
            return

        if page.route not in PUBLIC_ROUTES and not logged_in:
            print("⚠️ Not logged in - redirecting to login")
            page.go("/login")
            return

        if page.route in PUBLIC_ROUTES:
            if logged_in:
                page.go("/home")
                return
            login_view(page, kv_store)
        elif page.route == "/home":
            active["controller"] = home_view(page, menu_cache, kv_store, startup)
        elif page.route == "/profile":
            profile_view(page, kv_store)
        else:
            page.go("/home")

    page.on_route_change = route_change
    page.go(page.route or "/")


if __name__ == "__main__":
    ft.app(target=main)
