"""Dream World data models."""

from dream_world.models.config import (
    DEFAULT_CONFIG,
    MARKER_RELATIONS,
    TransformConfig,
    Vocabulary,
)
from dream_world.models.world import (
    ANCHOR_TYPES,
    EntityAttributes,
    EntityType,
    RelationType,
    WorldEntity,
    WorldModel,
    WorldRelation,
)

__all__ = [
    "ANCHOR_TYPES",
    "DEFAULT_CONFIG",
    "EntityAttributes",
    "EntityType",
    "MARKER_RELATIONS",
    "RelationType",
    "TransformConfig",
    "Vocabulary",
    "WorldEntity",
    "WorldModel",
    "WorldRelation",
]
