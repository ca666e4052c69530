import pytest
import requests

from smsedgeapi import SMSEdge

API_KEY = "test-key"
BASE_URL = "https://api.test/v1"


def _make_response(body: str, status_code: int = 200) -> requests.Response:
    res = requests.Response()
    res.status_code = status_code
    res._content = body.encode("utf-8")
    res.encoding = "utf-8"
    return res


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def client():
    client = SMSEdge(API_KEY, base_url=BASE_URL)
    yield client
    client.close()
