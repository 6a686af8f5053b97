"""Shared fixtures: a fake Slack Web API behind aiohttp.ClientSession."""

import json
from typing import Any, Dict, List, Optional, Union

import aiohttp
import pytest

from slack_purge.adapters.slack.client import SlackClient
from slack_purge.infrastructure.throttle import CallThrottle


class FakeSlackAPI:
    """Records every request and every throttle sleep in one ordered log.

    history: responses for conversations.history, consumed in order. A dict
    is served as JSON, str or bytes are served verbatim.
    """

    def __init__(self):
        self.history: List[Union[Dict[str, Any], str, bytes]] = []
        self.delete_body: Union[str, bytes] = '{"ok":true}'
        self.fail_with: Optional[Exception] = None
        self.requests: List[Dict[str, Any]] = []
        self.events: List[tuple] = []

    def calls_to(self, method: str) -> List[Dict[str, Any]]:
        return [r for r in self.requests if r["method"] == method]

    async def sleep(self, seconds: float):
        self.events.append(("sleep", seconds))

    def _respond(self, url: str, data: Any, headers: Dict[str, str]) -> bytes:
        method = url.rsplit("/", 1)[-1]
        self.requests.append(
            {"url": url, "method": method, "data": data, "headers": dict(headers or {})}
        )
        self.events.append(("request", method))
        if self.fail_with is not None:
            raise self.fail_with
        if method == "conversations.history":
            body = self.history.pop(0)
            if isinstance(body, dict):
                body = json.dumps(body)
        else:
            body = self.delete_body
        return body if isinstance(body, bytes) else body.encode("utf-8")

    def session_class(self):
        api = self

        class FakeResponse:
            def __init__(self, body: bytes):
                self._body = body

            async def read(self):
                return self._body

            async def __aenter__(self):
                return self

            async def __aexit__(self, *args):
                pass

        class FakeSession:
            def __init__(self, *args, **kwargs):
                pass

            def post(self, url, data=None, headers=None, **kwargs):
                return FakeResponse(api._respond(url, data, headers))

            async def __aenter__(self):
                return self

            async def __aexit__(self, *args):
                pass

        return FakeSession


def history_page(
    *ts_values: str,
    has_more: bool = False,
    cursor: str = "",
    text: str = "hello",
) -> Dict[str, Any]:
    return {
        "ok": True,
        "messages": [{"type": "message", "user": "U1", "text": text, "ts": ts} for ts in ts_values],
        "has_more": has_more,
        "response_metadata": {"next_cursor": cursor},
    }


@pytest.fixture
def slack_api(monkeypatch):
    api = FakeSlackAPI()
    monkeypatch.setattr(aiohttp, "ClientSession", api.session_class())
    return api


@pytest.fixture
def client(slack_api):
    throttle = CallThrottle(interval_seconds=1.0, sleep=slack_api.sleep)
    return SlackClient(
        token="xoxp-test",
        channel_id="C",
        api_host="https://slack.test/api/",
        throttle=throttle,
    )
