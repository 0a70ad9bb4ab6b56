import msgspec
import pytest

from twitter_backend._json_schemas.tweets import Tweet
from twitter_backend.fields import EntityKind, TweetExpansion, TweetField, UserExpansion, UserField, resolve_keypath


@pytest.mark.parametrize('kind', list(EntityKind))
def test_field_wire_keys_unique(kind):
    keys = [f.wire_key for f in kind.field_selector]
    assert len(keys) == len(set(keys))


@pytest.mark.parametrize('kind', list(EntityKind))
def test_fields_cover_entity(kind):
    # every attribute of the entity has a selector targeting it
    attributes = {f.name for f in msgspec.structs.fields(kind.entity_type)}
    targets = {f.target for f in kind.field_selector if f.mapped}
    assert attributes == targets


@pytest.mark.parametrize('kind', list(EntityKind))
def test_field_targets_are_entity_attributes(kind):
    attributes = {f.name for f in msgspec.structs.fields(kind.entity_type)}
    for f in kind.field_selector:
        assert f.kind is kind
        if f.mapped:
            assert f.target in attributes


def test_unmapped_selectors():
    assert not TweetField.ContextAnnotations.mapped
    assert not TweetExpansion.MentionedUsernames.mapped
    assert not TweetExpansion.ReferencedTweetAuthorIds.mapped
    assert TweetField.AuthorId.mapped


def test_expansion_wire_keys():
    assert TweetExpansion.MediaKeys.wire_key == 'attachments.media_keys'
    assert TweetExpansion.ReferencedTweetAuthorIds.wire_key == 'referenced_tweets.id.author_id'
    assert TweetExpansion('geo.place_id') is TweetExpansion.PlaceId
    assert UserExpansion.PinnedTweetId.related is EntityKind.Tweet


def test_expansion_keys_unique():
    for selector in (TweetExpansion, UserExpansion):
        keys = [e.wire_key for e in selector]
        assert len(keys) == len(set(keys))


def test_lookup_by_wire_key():
    assert UserField('profile_image_url') is UserField.ProfileImageUrl
    assert EntityKind.Media.fields_param == 'media.fields'
    assert EntityKind.Media.includes_key == 'media'
    assert EntityKind.Poll.includes_key == 'polls'


def test_public_fields():
    public = TweetField.public()
    assert TweetField.PublicMetrics in public
    assert TweetField.NonPublicMetrics not in public
    assert TweetField.OrganicMetrics not in public
    assert TweetField.PromotedMetrics not in public


def test_resolve_keypath():
    tweet = msgspec.convert(
        {
            'id': '1', 'text': 'hi',
            'attachments': {'media_keys': ['3_1', '3_2']},
            'referenced_tweets': [{'id': '5', 'type': 'quoted'}, {'id': '6', 'type': 'replied_to'}],
        },
        Tweet,
    )
    assert resolve_keypath(tweet, TweetExpansion.MediaKeys.target) == ('3_1', '3_2')
    assert resolve_keypath(tweet, TweetExpansion.ReferencedTweetIds.target) == ('5', '6')
    assert resolve_keypath(tweet, TweetExpansion.PollIds.target) == ()
    assert resolve_keypath(tweet, TweetExpansion.PlaceId.target) == ()
