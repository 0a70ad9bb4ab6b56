from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Type, Union, get_args

import msgspec
import pandas as pd

from ._exceptions import MalformedResponse
from ._json_schemas.base import ApiError, Meta, TolerantStruct, convert_tolerant
from .errors import ErrorOutcome, classify_errors, decode_errors
from .includes import Includes, IncludesResolver

__all__ = ['ResponseStatus', 'EntityList', 'ResponseEnvelope', 'decode_envelope']

logger = logging.getLogger(__name__)


class ResponseStatus(Enum):
    Success = 'success'
    # data returned alongside item level errors
    Partial = 'partial'
    # only errors returned
    Failure = 'failure'


class EntityList(tuple):
    """
    Immutable list of decoded entities.
    """
    def __repr__(self):
        return f'EntityList({list(self)!r})'

    def to_df(self) -> pd.DataFrame:
        """
        Get entities as a pandas dataframe, one column per attribute
        :return: Dataframe of entities in list
        """
        return pd.DataFrame([msgspec.structs.asdict(e) for e in self])


class ResponseEnvelope(msgspec.Struct, frozen=True):
    """
    Decoded API response.

    `data` is one entity (or None) for single lookups and an EntityList for
    multi lookups. `errors` may be set alongside `data`.
    """
    data: Any = None
    includes: Optional[Includes] = None
    meta: Optional[Meta] = None
    errors: tuple[ApiError, ...] = ()
    resolver: IncludesResolver = msgspec.field(default_factory=IncludesResolver)

    @property
    def has_data(self) -> bool:
        if isinstance(self.data, EntityList):
            return len(self.data) > 0
        return self.data is not None

    @property
    def status(self) -> ResponseStatus:
        if not self.errors:
            return ResponseStatus.Success
        if self.has_data:
            return ResponseStatus.Partial
        return ResponseStatus.Failure

    @property
    def error_outcome(self) -> Optional[ErrorOutcome]:
        """Classification of the errors reported in the envelope, None if there are none"""
        return classify_errors(self.errors)


def _decode_items(items: list, item_type: Type[TolerantStruct], section: str) -> tuple:
    # one bad item of a list is dropped, the rest are kept
    decoded = []
    for item in items:
        try:
            decoded.append(convert_tolerant(item, item_type))
        except msgspec.ValidationError as e:
            logger.warning('Dropping %s %s: %s', section, item_type.__name__, e)
    return tuple(decoded)


def _decode_data(raw: Any, entity: Type[TolerantStruct], many: bool) -> Any:
    if many:
        if not isinstance(raw, list):
            raise msgspec.ValidationError(f'Expected `array`, got `{type(raw).__name__}` - at `$.data`')
        return EntityList(_decode_items(raw, entity, 'data'))
    return convert_tolerant(raw, entity)


def _decode_includes(raw: Any, includes: Type[Includes]) -> Includes:
    if not isinstance(raw, dict):
        raise msgspec.ValidationError(f'Expected `object`, got `{type(raw).__name__}` - at `$.includes`')
    values = {}
    for field in msgspec.structs.fields(includes):
        items = raw.get(field.encode_name)
        if items is None:
            continue
        if not isinstance(items, list):
            logger.warning('Dropping includes %r, expected a list', field.encode_name)
            continue
        values[field.name] = _decode_items(items, get_args(field.type)[0], 'included')
    return includes(**values)


def decode_envelope(
        body: Union[bytes, str],
        entity: Type[TolerantStruct],
        *,
        many: bool = False,
        includes: Optional[Type[Includes]] = None,
) -> ResponseEnvelope:
    """
    Decode a response body into an envelope.

    Each of 'data', 'errors', 'includes' and 'meta' is optional, but at least
    one of them must be present. A 'data' holding an empty list is a valid
    empty result; an empty object is not a response.

    :param body: Raw JSON response body
    :param entity: Primary entity type, e.g. Tweet
    :param many: Whether 'data' is a list of entities
    :param includes: Includes type expected for the primary entity, None to ignore 'includes'
    :return: Decoded envelope
    :raises MalformedResponse: if the body is not a recognized envelope
    """
    try:
        raw = msgspec.json.decode(body)
    except msgspec.DecodeError as e:
        raise MalformedResponse(f'Response is not valid JSON: {e}', body) from e
    if not isinstance(raw, dict):
        raise MalformedResponse('Response is not a JSON object', body)

    recognized = False
    values = {}

    raw_data = raw.get('data')
    if raw_data is not None:
        try:
            values['data'] = _decode_data(raw_data, entity, many)
        except msgspec.ValidationError as e:
            raise MalformedResponse(f'Could not decode data as {entity.__name__}: {e}', body) from e
        recognized = True
    elif many:
        values['data'] = EntityList()

    if 'errors' in raw:
        try:
            values['errors'] = decode_errors(raw['errors'])
            recognized = True
        except msgspec.ValidationError as e:
            logger.warning('Ignoring errors member: %s', e)

    if isinstance(raw.get('includes'), dict):
        recognized = True
        if includes is not None:
            values['includes'] = _decode_includes(raw['includes'], includes)
            values['resolver'] = IncludesResolver(values['includes'])
    elif 'includes' in raw:
        logger.warning('Ignoring includes member, expected an object')

    if 'meta' in raw:
        try:
            values['meta'] = convert_tolerant(raw['meta'], Meta)
            recognized = True
        except msgspec.ValidationError as e:
            logger.warning('Ignoring meta member: %s', e)

    if not recognized:
        raise MalformedResponse('Response holds none of data, errors, includes or meta', body)

    return ResponseEnvelope(**values)
