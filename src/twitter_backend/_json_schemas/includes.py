from __future__ import annotations

import msgspec

from .media import Media, Poll
from .places import Place
from .tweets import Tweet
from .users import User


class TweetIncludes(msgspec.Struct, frozen=True):
    # side-loaded entities for tweet lookups
    users: tuple[User, ...] = ()
    media: tuple[Media, ...] = ()
    tweets: tuple[Tweet, ...] = ()
    polls: tuple[Poll, ...] = ()
    places: tuple[Place, ...] = ()


class UserIncludes(msgspec.Struct, frozen=True):
    # side-loaded entities for user lookups (pinned tweets)
    tweets: tuple[Tweet, ...] = ()
