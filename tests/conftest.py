import pathlib
import sys

import pytest
from requests.structures import CaseInsensitiveDict

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))


class DummyResponse:
    def __init__(self, status_code=200, content=b"", headers=None):
        self.status_code = status_code
        self.content = content
        self.headers = CaseInsensitiveDict(headers or {})


class FakeChat:
    """Chat double: replays canned replies, raising any exception instances."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.sent = []

    def send_message(self, parts):
        self.sent.append(list(parts))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeModelClient:
    def __init__(self, chat, token_counts=None):
        self.chat = chat
        self.token_counts = list(token_counts or [])
        self.api_key = "unset"
        self.chat_args = None
        self.counted = []

    def create_chat(self, model, config):
        self.chat_args = (model, config)
        return self.chat

    def count_tokens(self, model, parts):
        self.counted.append((model, list(parts)))
        if self.token_counts:
            count = self.token_counts.pop(0)
            if isinstance(count, Exception):
                raise count
            return count
        return 10


@pytest.fixture
def dummy_response():
    return DummyResponse


@pytest.fixture
def fake_client():
    """Build a `FakeModelClient` and a factory that records the API key."""

    def _make(replies, token_counts=None):
        client = FakeModelClient(FakeChat(replies), token_counts)

        def factory(api_key):
            client.api_key = api_key
            return client

        return client, factory

    return _make
