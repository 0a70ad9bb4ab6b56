from twitter_backend.fields import TweetField, UserExpansion, UserField
from twitter_backend.params import expand

ME = {'data': {'id': '42', 'name': 'A', 'username': 'a'}}


def test_get_with_pinned_tweet(backend, fake_session):
    fake_session.queue(200, {
        'data': {'id': '42', 'name': 'A', 'username': 'a', 'pinned_tweet_id': '7'},
        'includes': {'tweets': [{'id': '7', 'text': 'pinned'}]},
    })
    env = backend.users.get(
        '42', [UserField.PinnedTweetId], [expand(UserExpansion.PinnedTweetId, TweetField.CreatedAt)]
    )
    url, params = fake_session.requests[0]
    assert url == 'https://api.twitter.com/2/users/42'
    assert params == [
        ('user.fields', 'pinned_tweet_id'),
        ('expansions', 'pinned_tweet_id'),
        ('tweet.fields', 'created_at'),
    ]
    assert env.resolver.expand(env.data, UserExpansion.PinnedTweetId)[0].text == 'pinned'


def test_by_username(backend, fake_session):
    fake_session.queue(200, ME)
    env = backend.users.by_username('@a', tweet_fields=[TweetField.Lang])
    url, params = fake_session.requests[0]
    assert url == 'https://api.twitter.com/2/users/by/username/a'
    # tweet fields without the pinned tweet expansion are still sent
    assert params == [('tweet.fields', 'lang')]
    assert env.data.username == 'a'


class TestMe:
    def test_cached(self, backend, fake_session):
        fake_session.queue(200, ME)
        first = backend.users.me([UserField.CreatedAt])
        second = backend.users.me([UserField.CreatedAt])
        assert len(fake_session.requests) == 1
        assert first is second

    def test_selection_is_part_of_key(self, backend, fake_session):
        fake_session.queue(200, ME)
        fake_session.queue(200, ME)
        backend.users.me([UserField.CreatedAt])
        backend.users.me([UserField.Location])
        assert len(fake_session.requests) == 2

    def test_force_refresh(self, backend, fake_session):
        fake_session.queue(200, ME)
        fake_session.queue(200, ME)
        backend.users.me()
        backend.users.me(force_refresh=True)
        assert len(fake_session.requests) == 2

    def test_no_cache(self, backend, fake_session):
        fake_session.queue(200, ME)
        fake_session.queue(200, ME)
        backend.users.me(no_cache=True)
        backend.users.me(no_cache=True)
        assert len(fake_session.requests) == 2
