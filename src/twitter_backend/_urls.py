API_NETLOC = 'api.twitter.com'
API_BASE_URL = f'https://{API_NETLOC}/2'

TWEETS_URL = f'{API_BASE_URL}/tweets'
USERS_URL = f'{API_BASE_URL}/users'
USERS_BY_USERNAME_URL = f'{USERS_URL}/by/username'
USERS_ME_URL = f'{USERS_URL}/me'


def tweet_url(tweet_id: str) -> str:
    return f'{TWEETS_URL}/{tweet_id}'


def user_url(user_id: str) -> str:
    return f'{USERS_URL}/{user_id}'


def liked_tweets_url(user_id: str) -> str:
    return f'{USERS_URL}/{user_id}/liked_tweets'


def username_url(username: str) -> str:
    return f'{USERS_BY_USERNAME_URL}/{username}'
