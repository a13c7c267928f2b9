"""Transform configuration — the fixed word lists the pipeline runs against."""

from typing import Dict, FrozenSet, List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from dream_world.models.world import EntityType, RelationType


DEFAULT_STOPWORDS = (
    "i", "am", "is", "are", "was", "were", "a", "an", "the", "and",
    "or", "but", "at", "in", "on", "of", "to", "with", "above", "below",
)

# Order matters: expansions are applied one after another.
DEFAULT_CONTRACTIONS = {
    "i'm": "i am",
    "can't": "cannot",
    "won't": "will not",
}

DEFAULT_PLACES = (
    "beach", "city", "forest", "desert", "ocean", "mountain",
    "space", "room", "street", "house", "clouds",
)

DEFAULT_OBJECTS = (
    "tower", "towers", "ship", "car", "door",
    "tree", "trees", "building", "buildings",
)

DEFAULT_DESCRIPTORS = (
    "floating", "jacked", "dark", "bright", "glowing",
    "ruined", "ancient", "futuristic", "glass",
)

# Relation types a marker word can produce; "modifies" comes from adjacency.
MARKER_RELATIONS = frozenset({RelationType.ABOVE, RelationType.LOCATED_IN})

DEFAULT_RELATION_MARKERS = {
    "above": RelationType.ABOVE,
    "in": RelationType.LOCATED_IN,
    "at": RelationType.LOCATED_IN,
}


def _lower_words(words) -> Tuple[str, ...]:
    return tuple(w.lower() for w in words)


class Vocabulary(BaseModel):
    """
    Word lists backing the classifier.

    A word listed in more than one category takes the first one in
    precedence order: places, then objects, then descriptors.
    """

    model_config = ConfigDict(frozen=True)

    places: Tuple[str, ...] = DEFAULT_PLACES
    objects: Tuple[str, ...] = DEFAULT_OBJECTS
    descriptors: Tuple[str, ...] = DEFAULT_DESCRIPTORS

    @field_validator("places", "objects", "descriptors")
    @classmethod
    def _lowercase(cls, value):
        return _lower_words(value)

    def categories(self) -> List[Tuple[EntityType, FrozenSet[str]]]:
        """Categories in precedence order."""
        return [
            (EntityType.PLACE, frozenset(self.places)),
            (EntityType.OBJECT, frozenset(self.objects)),
            (EntityType.DESCRIPTOR, frozenset(self.descriptors)),
        ]


class TransformConfig(BaseModel):
    """Immutable configuration passed explicitly into every transform."""

    model_config = ConfigDict(frozen=True)

    stopwords: FrozenSet[str] = frozenset(DEFAULT_STOPWORDS)
    contractions: Dict[str, str] = dict(DEFAULT_CONTRACTIONS)
    vocabulary: Vocabulary = Vocabulary()
    relation_markers: Dict[str, RelationType] = dict(DEFAULT_RELATION_MARKERS)

    @field_validator("stopwords")
    @classmethod
    def _lowercase_stopwords(cls, value):
        return frozenset(w.lower() for w in value)

    @field_validator("contractions", "relation_markers")
    @classmethod
    def _lowercase_keys(cls, value):
        return {k.lower(): v for k, v in value.items()}

    @field_validator("relation_markers")
    @classmethod
    def _marker_relations_only(cls, value):
        for word, relation_type in value.items():
            if relation_type not in MARKER_RELATIONS:
                raise ValueError(
                    f"marker '{word}' cannot produce '{relation_type.value}' relations"
                )
        return value

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json")
        data["stopwords"] = sorted(self.stopwords)
        return data


DEFAULT_CONFIG = TransformConfig()
