import sys
import os

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import requests


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400


class FakeSession:
    """Stands in for requests.Session; answers by URL substring, records calls in order."""

    def __init__(self, routes=None, default=None):
        self.routes = list(routes or [])
        self.default = default if default is not None else FakeResponse(404, "")
        self.calls = []
        self.headers = {}
        self.in_flight = 0
        self.max_in_flight = 0

    def _answer(self, url):
        for needle, answer in self.routes:
            if needle in url:
                if isinstance(answer, Exception):
                    raise answer
                return answer
        return self.default

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            return self._answer(url)
        finally:
            self.in_flight -= 1

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)


def connection_error():
    return requests.exceptions.ConnectionError("connection refused")
