from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

import msgspec

from ._json_schemas.base import ApiError, convert_tolerant

__all__ = [
    'ApiError',
    'SingleError',
    'MultipleErrors',
    'TransportFailure',
    'ErrorOutcome',
    'classify_errors',
    'decode_errors',
    'errors_from_body',
]

logger = logging.getLogger(__name__)


class SingleError(msgspec.Struct, frozen=True, tag='single'):
    error: ApiError

    @property
    def errors(self) -> tuple[ApiError, ...]:
        return (self.error,)


class MultipleErrors(msgspec.Struct, frozen=True, tag='multiple'):
    errors: tuple[ApiError, ...]


class TransportFailure(msgspec.Struct, frozen=True, tag='transport'):
    # the request never produced a decodable response
    cause: Any

    @property
    def errors(self) -> tuple[ApiError, ...]:
        return ()


ErrorOutcome = Union[SingleError, MultipleErrors, TransportFailure]

# keys of a problem object returned as the whole body of a failed request
_PROBLEM_KEYS = ('title', 'detail', 'type')


def classify_errors(
        errors: Sequence[ApiError] = (),
        *,
        transport_error: Optional[BaseException] = None,
) -> Optional[ErrorOutcome]:
    """
    Classify the failures of one request.

    A transport error is passed through unchanged. Otherwise the number of
    reported API errors picks the variant.

    :param errors: API errors reported for the request
    :param transport_error: Exception raised before a response could be decoded
    :return: Classified outcome, or None if nothing failed
    """
    if transport_error is not None:
        return TransportFailure(cause=transport_error)
    if len(errors) == 1:
        return SingleError(error=errors[0])
    if len(errors) > 1:
        return MultipleErrors(errors=tuple(errors))
    return None


def decode_errors(raw: Any) -> tuple[ApiError, ...]:
    """
    Decode the 'errors' member of a response.

    :param raw: Decoded JSON value of the 'errors' member
    :return: API errors, unrecognized items are dropped
    :raises msgspec.ValidationError: if the member is not a list
    """
    if not isinstance(raw, list):
        raise msgspec.ValidationError(f'Expected `array`, got `{type(raw).__name__}` - at `$.errors`')
    errors = []
    for item in raw:
        try:
            errors.append(convert_tolerant(item, ApiError))
        except msgspec.ValidationError as e:
            logger.warning('Dropping unrecognized error item %r: %s', item, e)
    return tuple(errors)


def errors_from_body(body: Union[bytes, str]) -> Optional[tuple[ApiError, ...]]:
    """
    Extract API errors from the body of a failed HTTP request.

    The API answers either with a single problem object
    (title, detail, type at top level) or with an object holding an 'errors' list.

    :param body: Raw response body
    :return: Reported errors, or None if the body is not recognized
    """
    try:
        raw = msgspec.json.decode(body)
    except msgspec.DecodeError:
        return None
    if not isinstance(raw, dict):
        return None

    if 'errors' in raw:
        try:
            errors = decode_errors(raw['errors'])
        except msgspec.ValidationError:
            errors = ()
        if errors:
            return errors

    if any(k in raw for k in _PROBLEM_KEYS):
        return (convert_tolerant(raw, ApiError),)
    return None
