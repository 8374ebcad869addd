"""Unit tests for the v1.1 and v2 endpoint wrappers (table-driven)."""

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import httpx
import pytest

from tweers.domains.twitter.client import TwitterClient
from tweers.domains.twitter.v1 import TwitterV1
from tweers.domains.twitter.v2 import TwitterV2

BASE_URL = "https://api.example.com"


@dataclass
class EndpointCase:
    desc: str
    call: Callable[[TwitterClient], Any]
    expect_method: str
    expect_path: str
    expect_signed: dict = field(default_factory=dict)
    expect_query: dict = field(default_factory=dict)
    expect_json: Optional[dict] = None


ENDPOINT_CASES = [
    EndpointCase(
        "v1 create_tweet signs status query parameter",
        lambda c: TwitterV1(c).create_tweet("別の実装で投稿"),
        "POST",
        "/1.1/statuses/update.json",
        expect_signed={"status": "別の実装で投稿"},
        expect_query={"status": "別の実装で投稿"},
    ),
    EndpointCase(
        "v1 delete_tweet",
        lambda c: TwitterV1(c).delete_tweet("1234"),
        "POST",
        "/1.1/statuses/destroy/1234.json",
    ),
    EndpointCase(
        "v2 create_tweet sends unsigned json body",
        lambda c: TwitterV2(c).create_tweet("Twitter API v2"),
        "POST",
        "/2/tweets",
        expect_json={"text": "Twitter API v2"},
    ),
    EndpointCase(
        "v2 delete_tweet",
        lambda c: TwitterV2(c).delete_tweet("1234"),
        "DELETE",
        "/2/tweets/1234",
    ),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("case", ENDPOINT_CASES, ids=lambda c: c.desc)
async def test_endpoint(case: EndpointCase, credentials, fake_signature_engine):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"data": {"id": "1234"}})

    client = TwitterClient(
        credentials,
        engine=fake_signature_engine,
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
    )

    result = await case.call(client)

    assert result == {"data": {"id": "1234"}}
    [request] = requests
    assert request.method == case.expect_method
    assert request.url.path == case.expect_path
    assert dict(request.url.params) == case.expect_query

    [call] = fake_signature_engine.calls
    assert call["request_parameters"] == case.expect_signed
    if case.expect_json is not None:
        assert json.loads(request.content) == case.expect_json
