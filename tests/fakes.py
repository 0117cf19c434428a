"""Hand-written stand-ins for requests sessions and threading.Timer."""


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=False):
        self.status_code = status_code
        self.payload = payload
        self.json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self.json_error:
            raise ValueError("Expecting value")
        return self.payload


class FakeHttp:
    """Records calls and returns a canned response (or raises)."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error:
            raise self.error
        return self.response


class FakeTimer:
    """threading.Timer stand-in that only fires when told to."""

    created = []

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.cancelled = False
        self.started = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function()




class FakePage:
    """Just enough of flet.Page for a view to build and refresh itself."""

    def __init__(self):
        self.title = ""
        self.route = "/home"
        self.controls = []
        self.overlay = []
        self.updates = 0
        self.visited = []

    def clean(self):
        self.controls = []

    def add(self, *controls):
        self.controls.extend(controls)

    def update(self):
        self.updates += 1

    def go(self, route):
        self.visited.append(route)
