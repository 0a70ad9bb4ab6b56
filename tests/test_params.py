import pytest

from twitter_backend import InvalidSelection
from twitter_backend.fields import EntityKind, MediaField, TweetExpansion, TweetField, UserExpansion, UserField
from twitter_backend.params import build_query_params, expand


def test_fields_and_expansion():
    query = build_query_params(
        EntityKind.Tweet,
        [TweetField.Id, TweetField.Text],
        [TweetExpansion.AuthorId],
    )
    assert query == [('tweet.fields', 'id,text'), ('expansions', 'author_id')]


def test_empty_selection_omits_parameters():
    assert build_query_params(EntityKind.Tweet) == []
    assert build_query_params(EntityKind.Tweet, [], [], related_fields={EntityKind.User: []}) == []


def test_expansion_only():
    query = build_query_params(EntityKind.Tweet, expansions=[TweetExpansion.MediaKeys])
    assert query == [('expansions', 'attachments.media_keys')]


def test_deduplicated_in_insertion_order():
    query = build_query_params(
        EntityKind.Tweet,
        [TweetField.Text, TweetField.CreatedAt, TweetField.Text],
        [TweetExpansion.PlaceId, TweetExpansion.AuthorId, TweetExpansion.PlaceId],
    )
    assert query == [
        ('tweet.fields', 'text,created_at'),
        ('expansions', 'geo.place_id,author_id'),
    ]


def test_nested_fields():
    query = build_query_params(
        EntityKind.Tweet,
        [TweetField.Text],
        [
            expand(TweetExpansion.AuthorId, UserField.ProfileImageUrl, UserField.Username),
            expand(TweetExpansion.InReplyToUserId, UserField.Username),
            expand(TweetExpansion.MediaKeys, MediaField.Url),
        ],
    )
    assert query == [
        ('tweet.fields', 'text'),
        ('expansions', 'author_id,in_reply_to_user_id,attachments.media_keys'),
        ('user.fields', 'profile_image_url,username'),
        ('media.fields', 'url'),
    ]


def test_nested_primary_kind_fields_merge():
    query = build_query_params(
        EntityKind.Tweet,
        [TweetField.Text],
        [expand(TweetExpansion.ReferencedTweetIds, TweetField.AuthorId, TweetField.Text)],
    )
    assert query == [
        ('tweet.fields', 'text,author_id'),
        ('expansions', 'referenced_tweets.id'),
    ]


def test_related_fields_merge_with_nested():
    query = build_query_params(
        EntityKind.Tweet,
        expansions=[expand(TweetExpansion.AuthorId, UserField.Name)],
        related_fields={EntityKind.User: [UserField.Verified, UserField.Name]},
    )
    assert query == [('expansions', 'author_id'), ('user.fields', 'name,verified')]


def test_user_primary_kind():
    query = build_query_params(
        EntityKind.User,
        [UserField.CreatedAt],
        [expand(UserExpansion.PinnedTweetId, TweetField.CreatedAt)],
    )
    assert query == [
        ('user.fields', 'created_at'),
        ('expansions', 'pinned_tweet_id'),
        ('tweet.fields', 'created_at'),
    ]


def test_endpoint_params():
    query = build_query_params(
        EntityKind.Tweet,
        [TweetField.Id],
        params={'ids': ['1', '2'], 'max_results': 10, 'pagination_token': None, 'exclude_replies': True},
    )
    assert query == [
        ('tweet.fields', 'id'),
        ('ids', '1,2'),
        ('max_results', '10'),
        ('exclude_replies', 'true'),
    ]


class TestInvalidSelection:
    def test_nested_field_of_wrong_kind(self):
        with pytest.raises(InvalidSelection):
            build_query_params(EntityKind.Tweet, expansions=[expand(TweetExpansion.AuthorId, MediaField.Url)])

    def test_primary_field_of_wrong_kind(self):
        with pytest.raises(InvalidSelection):
            build_query_params(EntityKind.Tweet, [UserField.Name])

    def test_expansion_of_wrong_kind(self):
        with pytest.raises(InvalidSelection):
            build_query_params(EntityKind.Tweet, expansions=[UserExpansion.PinnedTweetId])

    def test_kind_without_expansions(self):
        with pytest.raises(InvalidSelection):
            build_query_params(EntityKind.Media, expansions=[TweetExpansion.AuthorId])

    def test_related_fields_of_wrong_kind(self):
        with pytest.raises(InvalidSelection):
            build_query_params(EntityKind.Tweet, related_fields={EntityKind.User: [MediaField.Url]})

    def test_plain_strings_rejected(self):
        with pytest.raises(InvalidSelection):
            build_query_params(EntityKind.Tweet, ['text'])
