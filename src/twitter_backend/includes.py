from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ._exceptions import InvalidSelection
from ._json_schemas.includes import TweetIncludes, UserIncludes
from ._json_schemas.media import Media, Poll
from ._json_schemas.places import Place
from ._json_schemas.tweets import Tweet
from ._json_schemas.users import User
from .fields import EntityKind, ExpansionSelector, resolve_keypath

__all__ = ['Includes', 'IncludesResolver']

Includes = Union[TweetIncludes, UserIncludes]


class IncludesResolver:
    """
    Id lookup over the entities side-loaded in a response's 'includes'.

    Indexes are built once; primary entities are never modified, so an
    included entity shared by several primary entities is stored only once.
    """
    def __init__(self, includes: Optional[Includes] = None):
        self._includes = includes
        self._index: dict[EntityKind, dict[str, Any]] = {}
        for kind in EntityKind:
            entities = getattr(includes, kind.includes_key, ()) if includes is not None else ()
            self._index[kind] = {getattr(e, kind.id_attribute): e for e in entities}

    def __repr__(self):
        counts = ', '.join(f'{k.includes_key}={len(v)}' for k, v in self._index.items() if v)
        return f'IncludesResolver({counts})'

    @property
    def includes(self) -> Optional[Includes]:
        return self._includes

    def index(self, kind: EntityKind) -> Mapping[str, Any]:
        """
        Get the id keyed mapping for one entity kind.
        :param kind: Entity kind
        :return: Read-only mapping of included entities by id (media by media_key)
        """
        return MappingProxyType(self._index[kind])

    def get(self, kind: EntityKind, id_: str) -> Optional[Any]:
        """
        Find an included entity.
        :param kind: Entity kind
        :param id_: Entity id (media key for media)
        :return: Included entity, or None if it was not included
        """
        return self._index[kind].get(id_)

    def user(self, id_: str) -> Optional[User]:
        return self.get(EntityKind.User, id_)

    def media(self, media_key: str) -> Optional[Media]:
        return self.get(EntityKind.Media, media_key)

    def tweet(self, id_: str) -> Optional[Tweet]:
        return self.get(EntityKind.Tweet, id_)

    def poll(self, id_: str) -> Optional[Poll]:
        return self.get(EntityKind.Poll, id_)

    def place(self, id_: str) -> Optional[Place]:
        return self.get(EntityKind.Place, id_)

    def expand(self, entity: Any, expansion: ExpansionSelector) -> list:
        """
        Join the foreign keys an expansion targets on a primary entity to the included entities.

        Ids missing from the includes are skipped.

        :param entity: Primary entity, e.g. a Tweet
        :param expansion: Mapped expansion of the entity's kind
        :return: Related included entities, in foreign key order
        """
        if not expansion.mapped:
            raise InvalidSelection(f'{expansion!r} has no target on {expansion.kind.value} and cannot be joined')
        if not isinstance(entity, expansion.kind.entity_type):
            raise InvalidSelection(f'{expansion!r} does not apply to {type(entity).__name__}')
        keys = resolve_keypath(entity, expansion.target)
        found = (self.get(expansion.related, k) for k in keys)
        return [e for e in found if e is not None]
