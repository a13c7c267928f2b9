"""
Dream Transform — text to World Model.

  raw text -> normalize -> tokenize (full + filtered)
           -> build_entities(filtered) -> extract_relations(full, by_name)
           -> WorldModel

A pure function of (dream, config): every intermediate structure is local to
one call, so concurrent calls never interact.
"""

import logging
from typing import Optional

from dream_world.models.config import DEFAULT_CONFIG, TransformConfig
from dream_world.models.world import WorldModel
from dream_world.pipeline.classifier import VocabularyClassifier
from dream_world.pipeline.entities import build_entities
from dream_world.pipeline.normalizer import Normalizer
from dream_world.pipeline.relations import RelationExtractor
from dream_world.pipeline.tokenizer import tokenize

logger = logging.getLogger(__name__)


class DreamTransformer:
    """Binds one configuration to the pipeline stages."""

    def __init__(self, config: Optional[TransformConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.normalizer = Normalizer(self.config.contractions)
        self.classifier = VocabularyClassifier(self.config.vocabulary)
        self.extractor = RelationExtractor(
            classifier=self.classifier,
            markers=self.config.relation_markers,
        )

    def transform(self, dream: str) -> WorldModel:
        normalized = self.normalizer.normalize(dream)
        tokens = tokenize(normalized, self.config.stopwords)
        index = build_entities(tokens.filtered, self.classifier)
        relationships = self.extractor.extract(tokens.full, index.by_name)

        logger.debug(
            "Transformed dream: %d tokens, %d entities, %d relations",
            len(tokens.full), len(index.entities), len(relationships),
        )
        return WorldModel(
            entities=index.entities,
            relationships=tuple(relationships),
        )


_default_transformer = DreamTransformer()


def transform_dream(dream: str, config: Optional[TransformConfig] = None) -> WorldModel:
    """Transform a dream into a World Model. Never raises for odd input."""
    if config is None:
        return _default_transformer.transform(dream)
    return DreamTransformer(config).transform(dream)
