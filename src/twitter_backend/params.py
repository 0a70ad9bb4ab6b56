from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, NamedTuple, Optional, Union

from ._exceptions import InvalidSelection
from .fields import EntityKind, ExpansionSelector, FieldSelector

__all__ = ['ExpansionRequest', 'expand', 'build_query_params']

logger = logging.getLogger(__name__)


class ExpansionRequest(NamedTuple):
    """
    An expansion together with the fields to request for the expanded entities.
    """
    expansion: ExpansionSelector
    fields: tuple[FieldSelector, ...] = ()


def expand(expansion: ExpansionSelector, *fields: FieldSelector) -> ExpansionRequest:
    """
    Pair an expansion with nested field selections for its related entity kind,
    e.g. expand(TweetExpansion.AuthorId, UserField.ProfileImageUrl)
    """
    return ExpansionRequest(expansion, tuple(fields))


def _check_fields(kind: EntityKind, fields: Iterable[Any], context: str) -> None:
    selector = kind.field_selector
    for f in fields:
        if not isinstance(f, selector):
            raise InvalidSelection(f'{f!r} is not a {selector.__name__} ({context})')


def build_query_params(
        kind: EntityKind,
        fields: Iterable[FieldSelector] = (),
        expansions: Iterable[Union[ExpansionSelector, ExpansionRequest]] = (),
        *,
        related_fields: Optional[Mapping[EntityKind, Iterable[FieldSelector]]] = None,
        params: Optional[Mapping[str, Any]] = None,
) -> list[tuple[str, str]]:
    """
    Translate a field/expansion selection into API query parameters.

    Selections are de-duplicated keeping the order they were given in.
    A category with no selections produces no parameter at all.
    Fields nested under an expansion of the primary kind (e.g. referenced tweets)
    are merged into the primary fields parameter, as the API applies them to both.

    :param kind: Kind of the primary entity of the endpoint
    :param fields: Fields of the primary entity
    :param expansions: Expansions of the primary entity, optionally with nested fields
    :param related_fields: Fields for expanded entity kinds, keyed by kind
    :param params: Endpoint specific parameters, None values are skipped
    :return: Ordered (name, value) pairs
    """
    fields = list(fields)
    _check_fields(kind, fields, f'fields of {kind.value}')

    # insertion ordered sets, keyed by entity kind
    selected: dict[EntityKind, dict[FieldSelector, None]] = {kind: dict.fromkeys(fields)}
    selected_expansions: dict[ExpansionSelector, None] = {}

    expansion_type = kind.expansion_selector
    for e in expansions:
        if isinstance(e, ExpansionRequest):
            expansion, nested = e
        else:
            expansion, nested = e, ()
        if expansion_type is None or not isinstance(expansion, expansion_type):
            raise InvalidSelection(f'{expansion!r} is not an expansion of {kind.value}')
        _check_fields(expansion.related, nested, f'nested under {expansion.wire_key}')
        selected_expansions[expansion] = None
        selected.setdefault(expansion.related, {}).update(dict.fromkeys(nested))

    for related, related_selection in (related_fields or {}).items():
        if not isinstance(related, EntityKind):
            raise InvalidSelection(f'{related!r} is not an entity kind')
        related_selection = list(related_selection)
        _check_fields(related, related_selection, f'{related.fields_param}')
        selected.setdefault(related, {}).update(dict.fromkeys(related_selection))

    query: list[tuple[str, str]] = []
    primary = selected.pop(kind)
    if primary:
        query.append((kind.fields_param, ','.join(f.wire_key for f in primary)))
    if selected_expansions:
        query.append(('expansions', ','.join(e.wire_key for e in selected_expansions)))
    for related, related_selection in selected.items():
        if related_selection:
            query.append((related.fields_param, ','.join(f.wire_key for f in related_selection)))

    for name, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ','.join(str(v) for v in value)
        elif isinstance(value, bool):
            value = str(value).lower()
        query.append((name, str(value)))

    logger.debug('Built query parameters %s', query)
    return query
