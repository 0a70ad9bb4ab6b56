from __future__ import annotations

import logging
from typing import Annotated, Any, Optional, Type, TypeVar, Union, get_args, get_origin

import msgspec

logger = logging.getLogger(__name__)

# region Base Objects

# Engagement metrics and counts are never negative
Count = Annotated[int, msgspec.Meta(ge=0)]

S = TypeVar('S', bound='TolerantStruct')


class TolerantStruct(msgspec.Struct, frozen=True):
    """
    Base class for API objects decoded field by field.

    Unknown keys are ignored. An optional field whose value cannot be converted
    is left unset instead of failing the whole object, since the API adds and
    changes fields independently of this client.
    """


def _unwrap_optional(type_: Any) -> Any:
    if get_origin(type_) is Union:
        args = [a for a in get_args(type_) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return type_


def _is_tolerant(type_: Any) -> bool:
    return isinstance(type_, type) and issubclass(type_, TolerantStruct)


def _convert_value(value: Any, type_: Any) -> Any:
    if value is None:
        return msgspec.convert(value, type_)
    inner = _unwrap_optional(type_)
    if _is_tolerant(inner):
        return convert_tolerant(value, inner)
    if get_origin(inner) is tuple:
        args = get_args(inner)
        if len(args) == 2 and args[1] is Ellipsis and _is_tolerant(args[0]):
            if not isinstance(value, list):
                raise msgspec.ValidationError(f'Expected `array`, got `{type(value).__name__}`')
            return tuple(convert_tolerant(v, args[0]) for v in value)
    return msgspec.convert(value, type_)


def convert_tolerant(raw: Any, type_: Type[S]) -> S:
    """
    Convert a decoded JSON object into a struct, dropping bad optional fields.

    :param raw: JSON object as decoded by msgspec (dict)
    :param type_: TolerantStruct subclass to build
    :return: Struct instance
    :raises msgspec.ValidationError: if a required field is missing or invalid
    """
    if not isinstance(raw, dict):
        raise msgspec.ValidationError(f'Expected `object`, got `{type(raw).__name__}`')

    values = {}
    for field in msgspec.structs.fields(type_):
        if field.encode_name not in raw:
            if field.required:
                raise msgspec.ValidationError(f'Object missing required field `{field.encode_name}`')
            continue
        try:
            values[field.name] = _convert_value(raw[field.encode_name], field.type)
        except msgspec.ValidationError as e:
            if field.required:
                raise msgspec.ValidationError(f'{e} - at `$.{field.encode_name}`') from e
            logger.warning('Dropping field %r of %s: %s', field.encode_name, type_.__name__, e)
    return type_(**values)


# endregion

# region Envelope Members


class ApiError(TolerantStruct):
    """
    One failure reported by the API, either inside a success envelope
    (partial error) or as the body of a failed request.
    """
    title: Optional[str] = None
    detail: Optional[str] = None
    type: Optional[str] = None
    resource_type: Optional[str] = None
    resource_id: Optional[str] = None
    parameter: Optional[str] = None
    value: Any = None
    section: Optional[str] = None
    status: Optional[int] = None

    def __str__(self):
        text = self.detail or self.title or self.type or 'Unknown API error'
        if self.resource_id is not None:
            return f'{text} (resource_id={self.resource_id})'
        return text


class Meta(TolerantStruct):
    # pagination / result-count information
    result_count: Optional[Count] = None
    newest_id: Optional[str] = None
    oldest_id: Optional[str] = None
    next_token: Optional[str] = None
    previous_token: Optional[str] = None


# endregion
