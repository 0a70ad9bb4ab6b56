from __future__ import annotations

from datetime import datetime
from typing import Optional

import msgspec

from .base import Count, TolerantStruct
from .tweets import TagEntity, UrlEntity, MentionEntity, WithheldInformation


class UserPublicMetrics(TolerantStruct):
    followers_count: Optional[Count] = None
    following_count: Optional[Count] = None
    tweet_count: Optional[Count] = None
    listed_count: Optional[Count] = None
    like_count: Optional[Count] = None


class UserUrlEntities(msgspec.Struct, frozen=True):
    urls: tuple[UrlEntity, ...] = ()


class UserDescriptionEntities(TolerantStruct):
    cashtags: Optional[tuple[TagEntity, ...]] = None
    hashtags: Optional[tuple[TagEntity, ...]] = None
    mentions: Optional[tuple[MentionEntity, ...]] = None
    urls: Optional[tuple[UrlEntity, ...]] = None


class UserEntities(TolerantStruct):
    # entities parsed out of the profile url and description
    url: Optional[UserUrlEntities] = None
    description: Optional[UserDescriptionEntities] = None


class User(TolerantStruct):
    # schema for https://api.twitter.com/2/users/<id>
    id: str
    name: Optional[str] = None
    username: Optional[str] = None
    created_at: Optional[datetime] = None
    description: Optional[str] = None
    entities: Optional[UserEntities] = None
    location: Optional[str] = None
    pinned_tweet_id: Optional[str] = None
    profile_image_url: Optional[str] = None
    protected: Optional[bool] = None
    public_metrics: Optional[UserPublicMetrics] = None
    url: Optional[str] = None
    verified: Optional[bool] = None
    withheld: Optional[WithheldInformation] = None
