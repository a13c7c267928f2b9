"""World Model — the typed entity/relationship graph built from a dream."""

import json
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class EntityType(str, Enum):
    PLACE = "place"
    OBJECT = "object"
    DESCRIPTOR = "descriptor"
    UNKNOWN = "unknown"         # Content word found in no vocabulary list


class RelationType(str, Enum):
    MODIFIES = "modifies"       # descriptor -> place/object
    LOCATED_IN = "located_in"   # place/object -> place/object
    ABOVE = "above"             # place/object -> place/object


# Entity types that relation markers may attach to.
ANCHOR_TYPES = frozenset({EntityType.PLACE, EntityType.OBJECT})


class EntityAttributes(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str                               # The lowercase word itself


class WorldEntity(BaseModel):
    """A single content word promoted to a typed entity."""

    model_config = ConfigDict(frozen=True)

    id: str                                 # e.g., "entity_1"
    type: EntityType
    attributes: EntityAttributes

    @property
    def name(self) -> str:
        return self.attributes.name

    @property
    def is_anchor(self) -> bool:
        """Whether relation markers can attach to this entity."""
        return self.type in ANCHOR_TYPES


class WorldRelation(BaseModel):
    """A directed, typed edge between two entities."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str                                 # e.g., "relation_1"
    type: RelationType
    from_: str = Field(alias="from")        # Entity id
    to: str                                 # Entity id


class WorldModel(BaseModel):
    """The graph handed to the rendering layer. Never mutated once built."""

    model_config = ConfigDict(frozen=True)

    entities: Tuple[WorldEntity, ...] = ()
    relationships: Tuple[WorldRelation, ...] = ()

    def get_entity(self, entity_id: str):
        for entity in self.entities:
            if entity.id == entity_id:
                return entity
        return None

    def get_entities_by_type(self, entity_type: EntityType) -> Tuple[WorldEntity, ...]:
        return tuple(e for e in self.entities if e.type == entity_type)

    def to_dict(self) -> dict:
        """Plain nested structure with the wire field names ("from", "to")."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent=None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
