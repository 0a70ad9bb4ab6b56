from twitter_backend.envelope import ResponseStatus
from twitter_backend.fields import TweetExpansion, TweetField, UserField
from twitter_backend.params import expand

# https://twitter.com/TwitterDev/status/1460323737035677698
TEST_TWEET_ID = '1460323737035677698'
TEST_USERNAME = 'TwitterDev'


class TestLive:
    def test_get_tweet(self, live_backend):
        env = live_backend.tweets.get(
            TEST_TWEET_ID,
            [TweetField.CreatedAt, TweetField.AuthorId],
            [expand(TweetExpansion.AuthorId, UserField.Username)],
        )
        assert env.data.id == TEST_TWEET_ID
        author = env.resolver.user(env.data.author_id)
        assert author.username == TEST_USERNAME

    def test_get_many_partial(self, live_backend):
        env = live_backend.tweets.get_many([TEST_TWEET_ID, '1'])
        assert env.status is ResponseStatus.Partial
        assert [e.resource_id for e in env.errors] == ['1']

    def test_by_username(self, live_backend):
        env = live_backend.users.by_username(TEST_USERNAME, [UserField.PublicMetrics])
        assert env.data.username == TEST_USERNAME
        assert env.data.public_metrics.followers_count > 0
