# -*- coding: utf-8 -*-
"""In-memory doubles for the HR backend."""


class FakeClient:
    """
    Stand-in for BackendClient.
    responses: (METHOD, path) -> value | Exception | callable(**kwargs)
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def _handle(self, method, path, **kwargs):
        self.calls.append((method, path, kwargs))
        value = self.responses.get((method, path))
        if isinstance(value, Exception):
            raise value
        if callable(value):
            return value(**kwargs)
        return value

    def get(self, path, params=None):
        return self._handle("GET", path, params=params)

    def post(self, path, body=None, params=None):
        return self._handle("POST", path, body=body, params=params)

    def put(self, path, body=None):
        return self._handle("PUT", path, body=body)

    def delete(self, path, params=None):
        return self._handle("DELETE", path, params=params)

    def calls_of(self, method):
        return [(path, kw) for m, path, kw in self.calls if m == method]


def sequence(*values):
    """Return successive values on each call (last one repeats)."""
    items = list(values)

    def _next(**kwargs):
        value = items.pop(0) if len(items) > 1 else items[0]
        if isinstance(value, Exception):
            raise value
        return value
    return _next
