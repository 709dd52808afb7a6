"""Entity identity value objects and the single source of key prefixes.

Every cache key and generation key starts with :func:`generate_id_component`.
The invalidation sweep relies on that: the prefix *is* the index.
"""

from __future__ import annotations

import dataclasses
import enum

KEY_SEP = ":"


class EntityKind(str, enum.Enum):
    """Closed set of identity kinds that own cached views."""

    PATIENT = "Patient"
    CLIENT_PERSON = "ClientPerson"

    @classmethod
    def for_identity(cls, is_alternate_identity: bool) -> "EntityKind":
        return cls.CLIENT_PERSON if is_alternate_identity else cls.PATIENT

    @classmethod
    def from_resource_type(cls, resource_type: "str | EntityKind") -> "EntityKind | None":
        """Map a written resource type to the kind whose views it owns.

        ``Person`` writes own the ``ClientPerson`` views. Unknown types map to
        ``None`` so callers never sweep an unrelated prefix.
        """
        if isinstance(resource_type, EntityKind):
            return resource_type
        return _RESOURCE_TYPE_KINDS.get(resource_type)


_RESOURCE_TYPE_KINDS: dict[str, EntityKind] = {
    "Patient": EntityKind.PATIENT,
    "Person": EntityKind.CLIENT_PERSON,
    "ClientPerson": EntityKind.CLIENT_PERSON,
}


@dataclasses.dataclass(frozen=True, slots=True)
class EntityIdentity:
    """``(kind, id)`` pair identifying the entity a view is derived from."""

    kind: EntityKind
    id: str

    @classmethod
    def of(cls, entity_id: str, is_alternate_identity: bool) -> "EntityIdentity":
        return cls(EntityKind.for_identity(is_alternate_identity), entity_id)

    @property
    def is_alternate(self) -> bool:
        return self.kind is EntityKind.CLIENT_PERSON

    @property
    def prefix(self) -> str:
        return f"{self.kind.value}{KEY_SEP}{self.id}"

    def __str__(self) -> str:
        return self.prefix


def generate_id_component(entity_id: str, is_alternate_identity: bool) -> str:
    """Return the ``<Kind>:<id>`` prefix shared by every key of the entity."""
    return EntityIdentity.of(entity_id, is_alternate_identity).prefix


__all__ = ["KEY_SEP", "EntityIdentity", "EntityKind", "generate_id_component"]
