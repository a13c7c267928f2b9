"""
Relation Extractor — positional scan for relationships between entities.

The scan walks the *full* token sequence (stopwords included) once, left to
right. At each position, in this order:

  1. modifies   — a descriptor followed immediately by a place/object
  2. above      — the word "above" between two place/object entities
  3. located_in — the word "in" or "at" between two place/object entities

Marker rules use a skip-search: the nearest place/object entity on each side
is found by stepping outward and ignoring everything else (stopwords,
descriptors, unknown words). If either side runs off the sequence, the
marker yields nothing.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from dream_world.models.config import DEFAULT_RELATION_MARKERS, MARKER_RELATIONS
from dream_world.models.world import (
    EntityType,
    RelationType,
    WorldEntity,
    WorldRelation,
)
from dream_world.pipeline.classifier import VocabularyClassifier

logger = logging.getLogger(__name__)


def find_nearest_anchor(
    tokens: Sequence[str],
    by_name: Mapping[str, WorldEntity],
    start: int,
    step: int,
) -> Optional[WorldEntity]:
    """Walk from ``start`` by ``step`` until a place/object entity turns up."""
    index = start
    while 0 <= index < len(tokens):
        entity = by_name.get(tokens[index])
        if entity is not None and entity.is_anchor:
            return entity
        index += step
    return None


class RelationExtractor:
    """Single-pass extractor; holds configuration only, never scan state."""

    def __init__(
        self,
        classifier: Optional[VocabularyClassifier] = None,
        markers: Optional[Mapping[str, RelationType]] = None,
    ):
        self.classifier = classifier or VocabularyClassifier()
        self.markers: Dict[str, RelationType] = dict(
            DEFAULT_RELATION_MARKERS if markers is None else markers
        )

    def extract(
        self, full: Sequence[str], by_name: Mapping[str, WorldEntity]
    ) -> List[WorldRelation]:
        relationships: List[WorldRelation] = []

        def emit(relation_type: RelationType, source: WorldEntity, target: WorldEntity):
            relationships.append(WorldRelation(
                id=f"relation_{len(relationships) + 1}",
                type=relation_type,
                from_=source.id,
                to=target.id,
            ))

        for index, word in enumerate(full):
            if self.classifier.classify(word) == EntityType.DESCRIPTOR:
                source = by_name.get(word)
                target = by_name.get(full[index + 1]) if index + 1 < len(full) else None
                if source is not None and target is not None and target.is_anchor:
                    emit(RelationType.MODIFIES, source, target)

            relation_type = self.markers.get(word)
            if relation_type in MARKER_RELATIONS:
                left = find_nearest_anchor(full, by_name, index - 1, -1)
                right = find_nearest_anchor(full, by_name, index + 1, 1)
                if left is not None and right is not None:
                    emit(relation_type, left, right)

        logger.debug("Extracted %d relations from %d tokens", len(relationships), len(full))
        return relationships


def extract_relations(
    full: Sequence[str],
    by_name: Mapping[str, WorldEntity],
    classifier: Optional[VocabularyClassifier] = None,
    markers: Optional[Mapping[str, RelationType]] = None,
) -> List[WorldRelation]:
    """Scan ``full`` for relations between entities in ``by_name``."""
    return RelationExtractor(classifier, markers).extract(full, by_name)
