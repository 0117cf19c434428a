from tests.fakes import FakePage
import ui.home_view as home_module


def test_failed_sync_is_not_retried_on_later_visits(monkeypatch, menu_cache, kv_store):
    attempts = []

    def failing_sync(cache):
        attempts.append(cache)
        return [], "Failed to fetch menu data: HTTP Error: 503"

    monkeypatch.setattr(home_module, "sync_menu", failing_sync)
    startup = {}
    page = FakePage()

    home_module.home_view(page, menu_cache, kv_store, startup).close()
    controller = home_module.home_view(page, menu_cache, kv_store, startup)
    controller.close()

    assert len(attempts) == 1
    assert startup["menu_synced"] is True
    assert startup["menu_error"] == "Failed to fetch menu data: HTTP Error: 503"


def test_saved_filter_is_restored_on_return(monkeypatch, menu_cache, kv_store):
    monkeypatch.setattr(home_module, "sync_menu", lambda cache: ([], None))
    startup = {"menu_synced": True, "menu_error": None, "categories": ["desserts"], "search_text": "Lemon"}

    controller = home_module.home_view(FakePage(), menu_cache, kv_store, startup)
    controller.close()

    assert controller.selected_categories == ["desserts"]
    assert controller.search_text == "Lemon"
