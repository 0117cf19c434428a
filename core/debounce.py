# core/debounce.py
import threading
from functools import partial


class Debouncer:
    """Delay calls to `fn` until no new call has arrived for `delay` seconds."""

    def __init__(self, delay: float, fn, timer_factory=threading.Timer):
        self.delay = delay
        self.fn = fn
        self.timer_factory = timer_factory
        self._timer = None
        self._pending = None
        # bumped on every call/cancel; a timer only fires for its own generation
        self._generation = 0
        self._lock = threading.Lock()

    def call(self, *args, **kwargs):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = (args, kwargs)
            self._timer = self.timer_factory(self.delay, partial(self._fire, self._generation))
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, generation):
        with self._lock:
            if generation != self._generation:
                return
            pending, self._pending = self._pending, None
            self._timer = None
        if pending is not None:
            args, kwargs = pending
            self.fn(*args, **kwargs)

    def flush(self):
        """Run the pending call now, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            generation = self._generation
        self._fire(generation)

    def cancel(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._timer = None
            self._pending = None

    @property
    def pending(self) -> bool:
        return self._pending is not None
