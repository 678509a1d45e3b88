import json

import httpx
import pytest

from reddit.infrastructure.client import APIClient


class FakeReddit:
    """Records every request and answers from a `(METHOD, path)` table."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict = {}

    def add(self, method: str, path: str, json_body=None, status_code=200,
            text=None):
        self.routes[(method, path)] = (status_code, json_body, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, json_body, text = self.routes.get(
            (request.method, request.url.path), (200, {}, None)
        )
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=json_body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @staticmethod
    def form_of(request: httpx.Request) -> dict:
        return dict(httpx.QueryParams(request.content.decode()))

    @staticmethod
    def json_of(request: httpx.Request) -> dict:
        return json.loads(request.content.decode())


@pytest.fixture(scope='function')
def fake_reddit():
    return FakeReddit()


@pytest.fixture(scope='function')
def client(fake_reddit):
    with APIClient(
        endpoint='https://oauth.reddit.com',
        access_token='test-token',
        transport=httpx.MockTransport(fake_reddit.handler),
    ) as c:
        yield c
