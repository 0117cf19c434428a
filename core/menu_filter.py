# core/menu_filter.py
import threading
from core.config import SEARCH_DEBOUNCE_MS
from core.debounce import Debouncer
from core.errors import StorageError


def run_in_thread(fn):
    threading.Thread(target=fn, daemon=True).start()


class MenuFilterController:
    """
    Active menu filter (selected categories + search text) for the home screen.

    Every change re-queries the cache. Queries are numbered; a result is
    handed to `on_result` only if it is still the latest query when it is
    delivered, so a slow query can never overwrite a fresher one.
    """

    def __init__(
        self,
        cache,
        on_result,
        on_error=None,
        debounce_seconds: float = SEARCH_DEBOUNCE_MS / 1000,
        runner=run_in_thread,
        timer_factory=threading.Timer,
        selected_categories=None,
        search_text: str = "",
    ):
        self.cache = cache
        self.on_result = on_result
        self.on_error = on_error
        self.runner = runner
        self.selected_categories = list(selected_categories or [])
        self.search_text = search_text or ""
        self._seq = 0
        self._lock = threading.Lock()
        # held from the latest-check until the callback returns
        self._deliver_lock = threading.Lock()
        self._debouncer = Debouncer(debounce_seconds, self.set_search_text, timer_factory=timer_factory)

    @property
    def latest_seq(self) -> int:
        return self._seq

    @property
    def has_filter(self) -> bool:
        return bool(self.selected_categories or self.search_text.strip())

    def toggle_category(self, category: str):
        if category in self.selected_categories:
            self.selected_categories = [c for c in self.selected_categories if c != category]
        else:
            self.selected_categories = self.selected_categories + [category]
        self.refresh()
        return list(self.selected_categories)

    def is_selected(self, category: str) -> bool:
        return category in self.selected_categories

    def on_search_input(self, text: str):
        """Keystroke handler; the query runs once typing pauses."""
        self._debouncer.call(text)

    def set_search_text(self, text: str):
        self.search_text = text or ""
        self.refresh()

    def _next_seq(self) -> int:
        with self._lock:
            self._seq += 1
            return self._seq

    def refresh(self) -> int:
        seq = self._next_seq()
        categories = list(self.selected_categories)
        search_text = self.search_text
        self.runner(lambda: self._run_query(seq, categories, search_text))
        return seq

    def show_startup_menu(self, items, error=None):
        """
        Show the menu (or the error) from the startup sync.

        Queries issued while the menu was loading are dropped. If a filter
        was chosen meanwhile, it is re-run against the populated cache.
        """
        if error is None and self.has_filter:
            return self.refresh()
        seq = self._next_seq()
        if error is None:
            self._deliver(seq, self.on_result, items)
        elif self.on_error:
            self._deliver(seq, self.on_error, error)
        return seq

    def _run_query(self, seq, categories, search_text):
        try:
            rows = self.cache.query_filtered(categories, search_text)
        except StorageError as e:
            print(f"❌ Filtering error: {e}")
            if self.on_error:
                self._deliver(seq, self.on_error, "Failed to filter menu")
            return
        self._deliver(seq, self.on_result, rows)

    def _deliver(self, seq, callback, value):
        with self._deliver_lock:
            if not self._is_latest(seq):
                print(f"⏭️ Dropping stale menu query #{seq} (latest is #{self._seq})")
                return
            callback(value)

    def _is_latest(self, seq) -> bool:
        with self._lock:
            return seq == self._seq

    def close(self):
        self._debouncer.cancel()
