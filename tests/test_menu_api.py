import pytest
import requests

from core.errors import FormatError, NetworkError
from core.menu_api import fetch_remote_menu
from tests.fakes import FakeHttp, FakeResponse

URL = "https://example.test/capstone.json"


def test_returns_menu_list(sample_menu):
    http = FakeHttp(FakeResponse(payload={"menu": sample_menu}))
    assert fetch_remote_menu(URL, http=http, timeout=3) == sample_menu
    assert http.calls == [(URL, 3)]


def test_non_success_status_raises_network_error():
    http = FakeHttp(FakeResponse(status_code=404))
    with pytest.raises(NetworkError) as exc:
        fetch_remote_menu(URL, http=http)
    assert exc.value.status_code == 404
    assert "404" in str(exc.value)


def test_transport_failure_raises_network_error():
    http = FakeHttp(error=requests.ConnectionError("unreachable"))
    with pytest.raises(NetworkError):
        fetch_remote_menu(URL, http=http)


@pytest.mark.parametrize("payload", [
    {},
    {"menu": None},
    {"menu": {"name": "Soup"}},
    {"menu": ["Soup"]},
    ["not", "an", "object"],
])
def test_malformed_payload_raises_format_error(payload):
    http = FakeHttp(FakeResponse(payload=payload))
    with pytest.raises(FormatError):
        fetch_remote_menu(URL, http=http)


def test_invalid_json_raises_format_error():
    http = FakeHttp(FakeResponse(json_error=True))
    with pytest.raises(FormatError):
        fetch_remote_menu(URL, http=http)


def test_single_attempt_only():
    http = FakeHttp(FakeResponse(status_code=500))
    with pytest.raises(NetworkError):
        fetch_remote_menu(URL, http=http)
    assert len(http.calls) == 1
