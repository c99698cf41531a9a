import pytest


class FakeResponse:
    def __init__(self, status_code=200, reason="OK", content=b"", read_error=None):
        self.status_code = status_code
        self.reason = reason
        self._content = content
        self.read_error = read_error

    @property
    def content(self):
        if self.read_error is not None:
            raise self.read_error
        return self._content

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakePost:
    """Stands in for requests.post; drains the multipart body like a server would."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse(content=b'[{"src":"/file/abc.png"}]')
        self.error = error
        self.calls = []

    def __call__(self, url, **kwargs):
        body = kwargs["data"].read()
        self.calls.append({"url": url, "body": body, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_post(monkeypatch):
    def install(**kwargs):
        fake = FakePost(**kwargs)
        monkeypatch.setattr("imgbed.uploader.requests.post", fake)
        return fake
    return install
