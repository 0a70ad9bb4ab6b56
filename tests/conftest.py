import json
from typing import Union

import pytest
import keyring
import keyring.errors
import requests

from twitter_backend import twitter


def make_response(status_code: int, body: Union[dict, str, bytes], url: str = 'https://api.twitter.com/2') -> requests.Response:
    r = requests.Response()
    r.status_code = status_code
    if isinstance(body, dict):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode('utf-8')
    r._content = body
    r.encoding = 'utf-8'
    r.url = url
    return r


class FakeSession:
    """
    Stand-in for requests.Session replaying queued responses.
    """
    def __init__(self):
        self.headers = {}
        self.queued = []
        self.requests = []

    def queue(self, status_code: int, body):
        self.queued.append(make_response(status_code, body))

    def queue_exception(self, exc: Exception):
        self.queued.append(exc)

    def get(self, url, headers=None, params=None, timeout=None):
        self.requests.append((url, params))
        item = self.queued.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def backend(fake_session) -> twitter.TwitterBackend:
    b = twitter.TwitterBackend('test-token')
    fake_session.headers.update(b._session.headers)
    b._session = fake_session
    return b


@pytest.fixture
def tweet_payload() -> dict:
    return {
        'data': {
            'id': '1460323737035677698',
            'text': 'Introducing a new era for the Twitter Developer Platform!',
            'author_id': '2244994945',
            'created_at': '2021-11-15T19:08:05.000Z',
            'lang': 'en',
            'attachments': {'media_keys': ['7_1460322142680072196']},
            'referenced_tweets': [{'type': 'quoted', 'id': '1460322800678498304'}],
            'public_metrics': {'retweet_count': 112, 'reply_count': 38, 'like_count': 555, 'quote_count': 74},
        },
        'includes': {
            'users': [{'id': '2244994945', 'name': 'Twitter Dev', 'username': 'TwitterDev'}],
            'media': [{'media_key': '7_1460322142680072196', 'type': 'video', 'duration_ms': 46947}],
            'tweets': [{'id': '1460322800678498304', 'text': 'The quoted tweet', 'author_id': '783214'}],
        },
    }


def _get_keyring_credential(name, kind):
    try:
        cred = keyring.get_credential(name, None)
    except keyring.errors.KeyringError:
        cred = None
    if cred is None:
        pytest.skip(f'Please configure your {kind} in keyring under credential name "{name}"')
    return cred


@pytest.fixture(scope="session")
def bearer_token() -> str:
    return _get_keyring_credential('api.twitter.com', 'Twitter API bearer token').password


@pytest.fixture(scope="session")
def live_backend(bearer_token) -> twitter.TwitterBackend:
    return twitter.TwitterBackend(bearer_token)
