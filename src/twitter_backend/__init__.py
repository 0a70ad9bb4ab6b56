from ._exceptions import InvalidSelection, MalformedResponse, RequestError, TwitterApiFailure
from ._json_schemas.base import ApiError, Meta
from ._json_schemas.includes import TweetIncludes, UserIncludes
from ._json_schemas.media import Media, Poll
from ._json_schemas.places import Place
from ._json_schemas.tweets import Tweet
from ._json_schemas.users import User
from .envelope import EntityList, ResponseEnvelope, ResponseStatus, decode_envelope
from .errors import MultipleErrors, SingleError, TransportFailure, classify_errors
from .fields import (
    EntityKind, MediaField, PlaceField, PollField, TweetExpansion, TweetField, UserExpansion, UserField
)
from .includes import IncludesResolver
from .params import ExpansionRequest, build_query_params, expand
from .twitter import TwitterBackend
