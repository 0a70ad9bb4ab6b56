from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Union

import requests

from ._exceptions import RequestError, TwitterApiFailure
from ._json_schemas.includes import TweetIncludes, UserIncludes
from .envelope import ResponseEnvelope, decode_envelope
from .errors import classify_errors, errors_from_body
from .fields import EntityKind, ExpansionSelector, FieldSelector
from .params import ExpansionRequest, build_query_params

if TYPE_CHECKING:
    # avoid circular import
    from .twitter import TwitterBackend

logger = logging.getLogger(__name__)

_INCLUDES_TYPES = {
    EntityKind.Tweet: TweetIncludes,
    EntityKind.User: UserIncludes,
}


class ApiProvider:
    """
    Base class for all v2 API queries.
    Child classes should implement their own methods using the query_api method to drive the query.
    """
    def __init__(self, _backend: TwitterBackend):
        self._backend = _backend

    def query_api(
            self,
            url: str,
            kind: EntityKind,
            fields: Iterable[FieldSelector] = (),
            expansions: Iterable[Union[ExpansionSelector, ExpansionRequest]] = (),
            *,
            related_fields: Optional[Mapping[EntityKind, Iterable[FieldSelector]]] = None,
            params: Optional[Mapping[str, Any]] = None,
            many: bool = False,
    ) -> ResponseEnvelope:
        """
        Handle one request/response cycle with the Twitter API.

        Partial errors are returned inside the envelope. A request failing as a
        whole raises TwitterApiFailure with the classified outcome.

        :param url: API URL to query
        :param kind: Kind of the primary entity returned by the endpoint
        :param fields: Fields of the primary entity
        :param expansions: Expansions, optionally with nested field selections
        :param related_fields: Fields of expanded entity kinds
        :param params: Endpoint specific HTTP GET parameters
        :param many: Whether the endpoint returns a list of entities
        :return: Decoded response envelope
        """
        query = build_query_params(kind, fields, expansions, related_fields=related_fields, params=params)
        return self._get_envelope(url, query, kind, many)

    def _get_envelope(self, url: str, query: list, kind: EntityKind, many: bool) -> ResponseEnvelope:
        try:
            txt = self._backend.get_json(url, query)
        except RequestError as e:
            errors = errors_from_body(e.response.content)
            if errors:
                outcome = classify_errors(errors)
                message = '; '.join(str(err) for err in errors)
            else:
                outcome = classify_errors(transport_error=e)
                message = str(e)
            logger.info('Request to %s failed with status %s', url, e.response.status_code)
            raise TwitterApiFailure(
                f'Request to {url} failed, Response {e.response.status_code}: {message}', outcome
            ) from e
        except requests.RequestException as e:
            raise TwitterApiFailure(f'Request to {url} failed: {e}', classify_errors(transport_error=e)) from e

        envelope = decode_envelope(txt, kind.entity_type, many=many, includes=_INCLUDES_TYPES.get(kind))
        if envelope.errors:
            logger.info('Request to %s returned %d partial errors', url, len(envelope.errors))
        return envelope


def related_fields(**kwargs: Iterable[FieldSelector]) -> dict[EntityKind, Iterable[FieldSelector]]:
    # map keyword arguments such as user_fields= to their entity kinds
    return {
        EntityKind(name[:-len('_fields')]): value
        for name, value in kwargs.items()
        if value
    }
