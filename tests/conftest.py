import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


def find_component(component, component_id):
    """Depth-first search of a Dash component tree by id."""
    if getattr(component, 'id', None) == component_id:
        return component
    children = getattr(component, 'children', None)
    if children is None or isinstance(children, (str, int, float)):
        return None
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        found = find_component(child, component_id)
        if found is not None:
            return found
    return None


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get with a stub; returns the list of recorded calls."""
    calls = []

    def install(response=None, error=None):
        def _get(url, params=None, timeout=None):
            calls.append({'url': url, 'params': params, 'timeout': timeout})
            if error is not None:
                raise error
            return response
        monkeypatch.setattr(requests, 'get', _get)
        return calls

    return install
