from functools import wraps

import mock


class SimpleMock(dict):
    """Case insensitive dict to mock HTTP response."""
    def __init__(self, *args, **kwargs):
        super(SimpleMock, self).__init__(*args, **kwargs)
        for k in list(self.keys()):
            v = super(SimpleMock, self).pop(k)
            self.__setitem__(k, v)

    def __setitem__(self, key, value):
        super(SimpleMock, self).__setitem__(str(key).lower(), value)

    def __getitem__(self, key):
        if key.lower() not in self:
            return None
        return super(SimpleMock, self).__getitem__(key.lower())

    def __setattr__(self, key, value):
        self.__setitem__(key, value)

    def __getattr__(self, key):
        return self.__getitem__(key)


class SimpleMockRequest(SimpleMock):
    """Records the method, path and headers of the last aiohttp request."""
    def update(self, request):
        self.clear()
        self.headers = SimpleMock(request.headers)
        self.url = str(request.url)
        self.method = request.method
        self.path = request.path


def mock_response(content=b"", text=None, status_error=None):
    """
    Build a stand-in for a `requests.Response`.
    """
    resp = mock.Mock()
    resp.content = content
    resp.text = text if text is not None else content.decode("utf-8")
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    return resp


def async_test(f):
    """
    Decorator to create asyncio context for asyncio methods or functions.
    """
    @wraps(f)
    def g(*args, **kwargs):
        args[0].loop.run_until_complete(f(*args, **kwargs))
    return g
