from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from . import _urls as urls
from .api_provider import ApiProvider, related_fields
from .envelope import ResponseEnvelope
from .fields import EntityKind, MediaField, PlaceField, PollField, TweetExpansion, TweetField, UserField
from .params import ExpansionRequest

__all__ = ['TweetsApiProvider']

Expansions = Iterable[Union[TweetExpansion, ExpansionRequest]]

# API limits
MAX_TWEET_IDS = 100
MIN_RESULTS, MAX_RESULTS = 10, 100


class TweetsApiProvider(ApiProvider):
    """
    Provide v2 API access to tweet lookups.

    Each method accepts the tweet fields and expansions to request, plus field
    selections for the kinds of entity the expansions side-load.
    """
    def get(
            self,
            tweet_id: str,
            fields: Iterable[TweetField] = (),
            expansions: Expansions = (),
            *,
            user_fields: Iterable[UserField] = (),
            media_fields: Iterable[MediaField] = (),
            poll_fields: Iterable[PollField] = (),
            place_fields: Iterable[PlaceField] = (),
    ) -> ResponseEnvelope:
        """
        Retrieve a single tweet by id.
        :param tweet_id: Tweet id
        :return: Envelope with the tweet as data (None if it could not be found)
        """
        return self.query_api(
            urls.tweet_url(tweet_id), EntityKind.Tweet, fields, expansions,
            related_fields=related_fields(
                user_fields=user_fields, media_fields=media_fields,
                poll_fields=poll_fields, place_fields=place_fields,
            ),
        )

    def get_many(
            self,
            tweet_ids: Sequence[str],
            fields: Iterable[TweetField] = (),
            expansions: Expansions = (),
            *,
            user_fields: Iterable[UserField] = (),
            media_fields: Iterable[MediaField] = (),
            poll_fields: Iterable[PollField] = (),
            place_fields: Iterable[PlaceField] = (),
    ) -> ResponseEnvelope:
        """
        Retrieve several tweets by id.

        Ids which cannot be returned (deleted, protected) are reported as
        partial errors in the envelope.

        :param tweet_ids: Up to 100 tweet ids
        :return: Envelope with the found tweets as data
        """
        if not tweet_ids:
            raise ValueError('At least one tweet id is required')
        if len(tweet_ids) > MAX_TWEET_IDS:
            raise ValueError(f'At most {MAX_TWEET_IDS} tweet ids can be requested at once')
        return self.query_api(
            urls.TWEETS_URL, EntityKind.Tweet, fields, expansions,
            related_fields=related_fields(
                user_fields=user_fields, media_fields=media_fields,
                poll_fields=poll_fields, place_fields=place_fields,
            ),
            params={'ids': list(tweet_ids)},
            many=True,
        )

    def liked_by(
            self,
            user_id: str,
            fields: Iterable[TweetField] = (),
            expansions: Expansions = (),
            *,
            user_fields: Iterable[UserField] = (),
            media_fields: Iterable[MediaField] = (),
            poll_fields: Iterable[PollField] = (),
            place_fields: Iterable[PlaceField] = (),
            max_results: Optional[int] = None,
            pagination_token: Optional[str] = None,
    ) -> ResponseEnvelope:
        """
        Retrieve one page of the tweets liked by a user.
        :param user_id: Id of the user whose likes to list
        :param max_results: Page size, between 10 and 100
        :param pagination_token: Token of the page to get, taken from a previous envelope's meta
        :return: Envelope with the liked tweets as data
        """
        if max_results is not None and not MIN_RESULTS <= max_results <= MAX_RESULTS:
            raise ValueError(f'max_results must be between {MIN_RESULTS} and {MAX_RESULTS}')
        return self.query_api(
            urls.liked_tweets_url(user_id), EntityKind.Tweet, fields, expansions,
            related_fields=related_fields(
                user_fields=user_fields, media_fields=media_fields,
                poll_fields=poll_fields, place_fields=place_fields,
            ),
            params={'max_results': max_results, 'pagination_token': pagination_token},
            many=True,
        )
