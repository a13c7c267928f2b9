"""Entity Builder — promotes content words to deduplicated, typed entities."""

import logging
from typing import Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from dream_world.models.world import EntityAttributes, WorldEntity
from dream_world.pipeline.classifier import VocabularyClassifier

logger = logging.getLogger(__name__)


class EntityIndex(BaseModel):
    """Entities in first-appearance order plus a lookup by name."""

    model_config = ConfigDict(frozen=True)

    entities: Tuple[WorldEntity, ...] = ()
    by_name: Dict[str, WorldEntity] = {}

    def get(self, word: str) -> Optional[WorldEntity]:
        return self.by_name.get(word)


def build_entities(
    filtered: Iterable[str], classifier: Optional[VocabularyClassifier] = None
) -> EntityIndex:
    """
    Create one entity per distinct content word.

    The word is the dedup key; repeats are skipped without touching the
    entity made from the first occurrence. Ids count entities created, not
    words scanned.
    """
    classifier = classifier or VocabularyClassifier()
    entities = []
    by_name: Dict[str, WorldEntity] = {}

    for word in filtered:
        if word in by_name:
            continue
        entity = WorldEntity(
            id=f"entity_{len(entities) + 1}",
            type=classifier.classify(word),
            attributes=EntityAttributes(name=word),
        )
        entities.append(entity)
        by_name[word] = entity

    logger.debug("Built %d entities", len(entities))
    return EntityIndex(entities=tuple(entities), by_name=by_name)
