"""Classifier — maps a word onto an entity type by vocabulary lookup."""

from typing import FrozenSet, List, Optional, Tuple

from dream_world.models.config import DEFAULT_CONFIG, Vocabulary
from dream_world.models.world import EntityType


class VocabularyClassifier:
    """
    Classification policy backed by ordered word lists.

    Categories are checked in the vocabulary's precedence order (places,
    objects, descriptors) and the first list containing the word wins.
    Words found in no list are ``EntityType.UNKNOWN``.
    """

    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self.vocabulary = vocabulary or DEFAULT_CONFIG.vocabulary
        self._categories: List[Tuple[EntityType, FrozenSet[str]]] = (
            self.vocabulary.categories()
        )

    def classify(self, word: str) -> EntityType:
        for entity_type, words in self._categories:
            if word in words:
                return entity_type
        return EntityType.UNKNOWN

    __call__ = classify


_default_classifier = VocabularyClassifier()


def classify(word: str) -> EntityType:
    """Classify a word against the default vocabulary."""
    return _default_classifier.classify(word)
