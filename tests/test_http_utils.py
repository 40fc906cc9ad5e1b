import pytest
import requests

from namehack.utils import http_utils

PSL_TEXT = "// ===BEGIN ICANN DOMAINS===\ncom\nco.uk\n// ===BEGIN PRIVATE DOMAINS===\ngithub.io\n"


class FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


class FakeSession:
    response = FakeResponse(PSL_TEXT)

    def __init__(self):
        self.headers = {}
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        return self.response


def test_fetch_public_suffix_list(monkeypatch):
    monkeypatch.setattr(http_utils.requests, "Session", FakeSession)
    assert http_utils.fetch_public_suffix_list("https://psl.test/list.dat") == {"com", "co.uk"}


def test_fetch_public_suffix_list_http_error(monkeypatch):
    monkeypatch.setattr(FakeSession, "response", FakeResponse("", 503))
    monkeypatch.setattr(http_utils.requests, "Session", FakeSession)
    with pytest.raises(requests.RequestException):
        http_utils.fetch_public_suffix_list()


def test_session_identifies_itself(monkeypatch):
    monkeypatch.setattr(http_utils.requests, "Session", FakeSession)
    assert http_utils.get_session().headers["User-Agent"].startswith("namehack/")
