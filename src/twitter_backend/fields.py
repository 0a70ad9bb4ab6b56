from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Type

from ._json_schemas.media import Media, Poll
from ._json_schemas.places import Place
from ._json_schemas.tweets import Tweet
from ._json_schemas.users import User

__all__ = [
    'UNMAPPED',
    'EntityKind',
    'FieldSelector',
    'ExpansionSelector',
    'TweetField',
    'TweetExpansion',
    'UserField',
    'UserExpansion',
    'MediaField',
    'PollField',
    'PlaceField',
    'resolve_keypath',
]

# Marks a selector which requests server side inclusion but has no client side target
UNMAPPED = None


class EntityKind(Enum):
    Tweet = 'tweet'
    User = 'user'
    Media = 'media'
    Poll = 'poll'
    Place = 'place'

    @property
    def fields_param(self) -> str:
        """Query parameter name carrying the fields of this kind, e.g. 'tweet.fields'"""
        return f'{self.value}.fields'

    @property
    def includes_key(self) -> str:
        """Key of the 'includes' section holding entities of this kind"""
        return _INCLUDES_KEYS[self]

    @property
    def id_attribute(self) -> str:
        return 'media_key' if self is EntityKind.Media else 'id'

    @property
    def entity_type(self) -> type:
        return _ENTITY_TYPES[self]

    @property
    def field_selector(self) -> Type[FieldSelector]:
        return _FIELD_SELECTORS[self]

    @property
    def expansion_selector(self) -> Optional[Type[ExpansionSelector]]:
        return _EXPANSION_SELECTORS.get(self)


class FieldSelector(Enum):
    """
    Base for per-entity field enumerations.

    Member value is the wire key; `target` is the attribute of the entity
    the decoded value lands on, or UNMAPPED.
    """
    def __new__(cls, wire_key: str, target: Optional[str] = UNMAPPED):
        obj = object.__new__(cls)
        obj._value_ = wire_key
        obj.target = target
        return obj

    @property
    def wire_key(self) -> str:
        return self.value

    @property
    def mapped(self) -> bool:
        return self.target is not UNMAPPED

    @property
    def kind(self) -> EntityKind:
        return _SELECTOR_KINDS[type(self)]


class ExpansionSelector(Enum):
    """
    Base for per-entity expansion enumerations.

    Member value is the dotted wire key. `related` is the kind of entity the
    expansion loads into 'includes' and `target` is the keypath (attribute
    names) to the foreign key on the primary entity, or UNMAPPED.
    """
    def __new__(cls, wire_key: str, related: EntityKind, target: Optional[tuple[str, ...]] = UNMAPPED):
        obj = object.__new__(cls)
        obj._value_ = wire_key
        obj.related = related
        obj.target = target
        return obj

    @property
    def wire_key(self) -> str:
        return self.value

    @property
    def mapped(self) -> bool:
        return self.target is not UNMAPPED

    @property
    def kind(self) -> EntityKind:
        return _SELECTOR_KINDS[type(self)]


# region Tweet

class TweetField(FieldSelector):
    Attachments = ('attachments', 'attachments')
    AuthorId = ('author_id', 'author_id')
    ContextAnnotations = ('context_annotations', UNMAPPED)
    ConversationId = ('conversation_id', 'conversation_id')
    CreatedAt = ('created_at', 'created_at')
    Entities = ('entities', 'entities')
    Geo = ('geo', 'geo')
    Id = ('id', 'id')
    InReplyToUserId = ('in_reply_to_user_id', 'in_reply_to_user_id')
    Lang = ('lang', 'lang')
    NonPublicMetrics = ('non_public_metrics', 'non_public_metrics')
    PublicMetrics = ('public_metrics', 'public_metrics')
    OrganicMetrics = ('organic_metrics', 'organic_metrics')
    PromotedMetrics = ('promoted_metrics', 'promoted_metrics')
    PossiblySensitive = ('possibly_sensitive', 'possibly_sensitive')
    ReferencedTweets = ('referenced_tweets', 'referenced_tweets')
    ReplySettings = ('reply_settings', 'reply_settings')
    Source = ('source', 'source')
    Text = ('text', 'text')
    Withheld = ('withheld', 'withheld')

    @classmethod
    def public(cls) -> list[TweetField]:
        """
        Fields readable without user context authentication.
        :return: All tweet fields except the private metrics
        """
        private = (cls.NonPublicMetrics, cls.OrganicMetrics, cls.PromotedMetrics)
        return [f for f in cls if f not in private]


class TweetExpansion(ExpansionSelector):
    PollIds = ('attachments.poll_ids', EntityKind.Poll, ('attachments', 'poll_ids'))
    MediaKeys = ('attachments.media_keys', EntityKind.Media, ('attachments', 'media_keys'))
    AuthorId = ('author_id', EntityKind.User, ('author_id',))
    # includes are keyed by user id, not username
    MentionedUsernames = ('entities.mentions.username', EntityKind.User, UNMAPPED)
    PlaceId = ('geo.place_id', EntityKind.Place, ('geo', 'place_id'))
    InReplyToUserId = ('in_reply_to_user_id', EntityKind.User, ('in_reply_to_user_id',))
    ReferencedTweetIds = ('referenced_tweets.id', EntityKind.Tweet, ('referenced_tweets', 'id'))
    # author ids live on the referenced tweets, not on the primary one
    ReferencedTweetAuthorIds = ('referenced_tweets.id.author_id', EntityKind.User, UNMAPPED)

# endregion

# region User


class UserField(FieldSelector):
    CreatedAt = ('created_at', 'created_at')
    Description = ('description', 'description')
    Entities = ('entities', 'entities')
    Id = ('id', 'id')
    Location = ('location', 'location')
    Name = ('name', 'name')
    PinnedTweetId = ('pinned_tweet_id', 'pinned_tweet_id')
    ProfileImageUrl = ('profile_image_url', 'profile_image_url')
    Protected = ('protected', 'protected')
    PublicMetrics = ('public_metrics', 'public_metrics')
    Url = ('url', 'url')
    Username = ('username', 'username')
    Verified = ('verified', 'verified')
    Withheld = ('withheld', 'withheld')


class UserExpansion(ExpansionSelector):
    PinnedTweetId = ('pinned_tweet_id', EntityKind.Tweet, ('pinned_tweet_id',))

# endregion

# region Media, Poll, Place


class MediaField(FieldSelector):
    AltText = ('alt_text', 'alt_text')
    DurationMs = ('duration_ms', 'duration_ms')
    Height = ('height', 'height')
    MediaKey = ('media_key', 'media_key')
    NonPublicMetrics = ('non_public_metrics', 'non_public_metrics')
    OrganicMetrics = ('organic_metrics', 'organic_metrics')
    PreviewImageUrl = ('preview_image_url', 'preview_image_url')
    PromotedMetrics = ('promoted_metrics', 'promoted_metrics')
    PublicMetrics = ('public_metrics', 'public_metrics')
    Type = ('type', 'type')
    Url = ('url', 'url')
    Width = ('width', 'width')


class PollField(FieldSelector):
    DurationMinutes = ('duration_minutes', 'duration_minutes')
    EndDatetime = ('end_datetime', 'end_datetime')
    Id = ('id', 'id')
    Options = ('options', 'options')
    VotingStatus = ('voting_status', 'voting_status')


class PlaceField(FieldSelector):
    ContainedWithin = ('contained_within', 'contained_within')
    Country = ('country', 'country')
    CountryCode = ('country_code', 'country_code')
    FullName = ('full_name', 'full_name')
    Geo = ('geo', 'geo')
    Id = ('id', 'id')
    Name = ('name', 'name')
    PlaceType = ('place_type', 'place_type')

# endregion


_INCLUDES_KEYS = {
    EntityKind.Tweet: 'tweets',
    EntityKind.User: 'users',
    EntityKind.Media: 'media',
    EntityKind.Poll: 'polls',
    EntityKind.Place: 'places',
}

_ENTITY_TYPES = {
    EntityKind.Tweet: Tweet,
    EntityKind.User: User,
    EntityKind.Media: Media,
    EntityKind.Poll: Poll,
    EntityKind.Place: Place,
}

_FIELD_SELECTORS = {
    EntityKind.Tweet: TweetField,
    EntityKind.User: UserField,
    EntityKind.Media: MediaField,
    EntityKind.Poll: PollField,
    EntityKind.Place: PlaceField,
}

_EXPANSION_SELECTORS = {
    EntityKind.Tweet: TweetExpansion,
    EntityKind.User: UserExpansion,
}

_SELECTOR_KINDS = {
    **{v: k for k, v in _FIELD_SELECTORS.items()},
    **{v: k for k, v in _EXPANSION_SELECTORS.items()},
}


def resolve_keypath(entity: Any, path: tuple[str, ...]) -> tuple:
    """
    Follow a keypath of attribute names from an entity.

    Tuple valued intermediates are flattened and unset (None) values are skipped,
    so the result holds every leaf value reachable along the path.

    :param entity: Decoded entity
    :param path: Attribute names, e.g. ('attachments', 'media_keys')
    :return: Leaf values, empty if any step is unset
    """
    values = [entity]
    for name in path:
        found = []
        for v in values:
            attr = getattr(v, name, None)
            if attr is None:
                continue
            if isinstance(attr, tuple):
                found.extend(a for a in attr if a is not None)
            else:
                found.append(attr)
        values = found
    return tuple(values)
