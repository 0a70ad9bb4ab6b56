from __future__ import annotations

import logging
import os
from typing import Optional, Sequence, Union

from requests import Session

from ._exceptions import RequestError
from .tweets import TweetsApiProvider
from .users import UsersApiProvider


__all__ = ['TwitterBackend']

logger = logging.getLogger(__name__)

BEARER_TOKEN_ENV = 'TWITTER_BEARER_TOKEN'
DEFAULT_TIMEOUT = 30  # sec


class TwitterBackend:
    """
    HTTP transport for the Twitter API v2.

    Requests are authenticated with an app or user bearer token. OAuth flows
    producing the token are out of scope for this package.
    """
    def __init__(self, bearer_token: Optional[str] = None, *, timeout: float = DEFAULT_TIMEOUT):
        if bearer_token is None:
            bearer_token = os.getenv(BEARER_TOKEN_ENV)
        self._session: Session = Session()
        self._authorized = bearer_token is not None
        if bearer_token is not None:
            self._session.headers['authorization'] = f'Bearer {bearer_token}'
        self.timeout = timeout
        self.tweets = TweetsApiProvider(self)
        self.users = UsersApiProvider(self)

    def __repr__(self):
        return f'TwitterBackend(authorized={self._authorized})'

    @property
    def authorized(self) -> bool:
        return self._authorized

    def get_json(self, url: str, params: Optional[Union[dict, Sequence[tuple[str, str]]]] = None) -> str:
        logger.debug('GET %s params=%s', url, params)
        r = self._session.get(url, headers=dict(accept='application/json'), params=params, timeout=self.timeout)
        if not r.ok:
            raise RequestError(f'Could not get JSON content at {url}', response=r)
        return r.text
