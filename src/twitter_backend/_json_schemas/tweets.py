from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

import msgspec

from .base import Count, TolerantStruct


# region Metrics
# Each metrics shape is defined once; entities hold them as optional fields.

class TweetPublicMetrics(TolerantStruct):
    like_count: Optional[Count] = None
    reply_count: Optional[Count] = None
    retweet_count: Optional[Count] = None
    quote_count: Optional[Count] = None
    bookmark_count: Optional[Count] = None
    impression_count: Optional[Count] = None


class TweetNonPublicMetrics(TolerantStruct):
    # requires user context authentication
    impression_count: Optional[Count] = None
    url_link_clicks: Optional[Count] = None
    user_profile_clicks: Optional[Count] = None


class TweetContextMetrics(TolerantStruct):
    # shape shared by organic_metrics and promoted_metrics
    impression_count: Optional[Count] = None
    url_link_clicks: Optional[Count] = None
    user_profile_clicks: Optional[Count] = None
    like_count: Optional[Count] = None
    reply_count: Optional[Count] = None
    retweet_count: Optional[Count] = None

# endregion

# region Tweet Members


class ReplySettings(Enum):
    Everyone = 'everyone'
    Followers = 'followers'
    MentionedUsers = 'mentioned_users'


class ReferenceType(Enum):
    Quoted = 'quoted'
    RepliedTo = 'replied_to'
    Retweeted = 'retweeted'


class Attachments(msgspec.Struct, frozen=True):
    poll_ids: Optional[tuple[str, ...]] = None
    media_keys: Optional[tuple[str, ...]] = None


class AnnotationEntity(msgspec.Struct, frozen=True):
    start: int
    end: int
    probability: float
    type: str
    normalized_text: str


class TagEntity(msgspec.Struct, frozen=True):
    # hashtags and cashtags
    start: int
    end: int
    tag: str


class MentionEntity(msgspec.Struct, frozen=True):
    start: int
    end: int
    username: str
    id: Optional[str] = None


class UrlEntity(msgspec.Struct, frozen=True):
    start: int
    end: int
    url: str
    expanded_url: Optional[str] = None
    display_url: Optional[str] = None
    status: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    unwound_url: Optional[str] = None
    media_key: Optional[str] = None


class TweetEntities(TolerantStruct):
    annotations: Optional[tuple[AnnotationEntity, ...]] = None
    cashtags: Optional[tuple[TagEntity, ...]] = None
    hashtags: Optional[tuple[TagEntity, ...]] = None
    mentions: Optional[tuple[MentionEntity, ...]] = None
    urls: Optional[tuple[UrlEntity, ...]] = None


class Coordinates(msgspec.Struct, frozen=True):
    type: str
    coordinates: tuple[float, ...]


class TweetGeo(msgspec.Struct, frozen=True):
    place_id: Optional[str] = None
    coordinates: Optional[Coordinates] = None


class ReferencedTweet(TolerantStruct):
    id: str
    # None for reference types this client does not know
    type: Optional[ReferenceType] = None


class WithheldInformation(msgspec.Struct, frozen=True):
    copyright: Optional[bool] = None
    country_codes: tuple[str, ...] = ()
    scope: Optional[str] = None

# endregion

# region Tweet


class Tweet(TolerantStruct):
    # schema for https://api.twitter.com/2/tweets/<id>
    id: str
    text: str
    attachments: Optional[Attachments] = None
    author_id: Optional[str] = None
    conversation_id: Optional[str] = None
    created_at: Optional[datetime] = None
    entities: Optional[TweetEntities] = None
    geo: Optional[TweetGeo] = None
    in_reply_to_user_id: Optional[str] = None
    lang: Optional[str] = None
    non_public_metrics: Optional[TweetNonPublicMetrics] = None
    organic_metrics: Optional[TweetContextMetrics] = None
    possibly_sensitive: Optional[bool] = None
    promoted_metrics: Optional[TweetContextMetrics] = None
    public_metrics: Optional[TweetPublicMetrics] = None
    referenced_tweets: Optional[tuple[ReferencedTweet, ...]] = None
    reply_settings: Optional[ReplySettings] = None
    source: Optional[str] = None
    withheld: Optional[WithheldInformation] = None

# endregion
