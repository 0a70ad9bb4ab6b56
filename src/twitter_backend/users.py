from __future__ import annotations

from typing import Iterable, Union

from cachetools import cached, TTLCache

from . import _urls as urls
from .api_provider import ApiProvider, related_fields
from .envelope import ResponseEnvelope
from .fields import EntityKind, TweetField, UserExpansion, UserField
from .params import ExpansionRequest, build_query_params

__all__ = ['UsersApiProvider']

Expansions = Iterable[Union[UserExpansion, ExpansionRequest]]

# Cache the authenticated user for five minutes
ME_CACHE_TIME = 300  # sec


@cached(cache=TTLCache(maxsize=1024, ttl=ME_CACHE_TIME))
def _get_cached_me(provider: UsersApiProvider, query: tuple) -> ResponseEnvelope:
    return provider._get_envelope(urls.USERS_ME_URL, list(query), EntityKind.User, many=False)


class UsersApiProvider(ApiProvider):
    """
    Provide v2 API access to user lookups.
    """
    def get(
            self,
            user_id: str,
            fields: Iterable[UserField] = (),
            expansions: Expansions = (),
            *,
            tweet_fields: Iterable[TweetField] = (),
    ) -> ResponseEnvelope:
        """
        Retrieve a user by id.
        :param user_id: User id
        :param tweet_fields: Fields of the pinned tweet, if expanded
        :return: Envelope with the user as data
        """
        return self.query_api(
            urls.user_url(user_id), EntityKind.User, fields, expansions,
            related_fields=related_fields(tweet_fields=tweet_fields),
        )

    def by_username(
            self,
            username: str,
            fields: Iterable[UserField] = (),
            expansions: Expansions = (),
            *,
            tweet_fields: Iterable[TweetField] = (),
    ) -> ResponseEnvelope:
        """
        Retrieve a user by username (handle without the leading @).
        :param username: Username
        :return: Envelope with the user as data
        """
        return self.query_api(
            urls.username_url(username.lstrip('@')), EntityKind.User, fields, expansions,
            related_fields=related_fields(tweet_fields=tweet_fields),
        )

    def me(
            self,
            fields: Iterable[UserField] = (),
            expansions: Expansions = (),
            *,
            tweet_fields: Iterable[TweetField] = (),
            no_cache: bool = False,
            force_refresh: bool = False,
    ) -> ResponseEnvelope:
        """
        Retrieve the user the backend is authenticated as.

        :param no_cache: Disable use of caching, default False
        :param force_refresh: Force expiration of current cache key for this selection, default False
        :return: Envelope with the authenticated user as data
        """
        query = tuple(build_query_params(
            EntityKind.User, fields, expansions,
            related_fields=related_fields(tweet_fields=tweet_fields),
        ))
        if force_refresh:
            # remove key from cache if present
            _get_cached_me.cache.pop((self, query), None)

        if no_cache:
            return self._get_envelope(urls.USERS_ME_URL, list(query), EntityKind.User, many=False)
        else:
            return _get_cached_me(self, query)
