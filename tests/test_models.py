"""Tests for core data models."""

import json

import pytest

from dream_world.models import (
    EntityAttributes,
    EntityType,
    RelationType,
    TransformConfig,
    Vocabulary,
    WorldEntity,
    WorldModel,
    WorldRelation,
)


def make_entity(entity_id, entity_type, name):
    return WorldEntity(
        id=entity_id,
        type=entity_type,
        attributes=EntityAttributes(name=name),
    )


class TestWorldEntity:
    def test_create_entity(self):
        entity = make_entity("entity_1", EntityType.PLACE, "city")
        assert entity.id == "entity_1"
        assert entity.name == "city"
        assert entity.is_anchor is True

    def test_descriptor_and_unknown_are_not_anchors(self):
        assert make_entity("entity_1", EntityType.DESCRIPTOR, "dark").is_anchor is False
        assert make_entity("entity_2", EntityType.UNKNOWN, "gleaming").is_anchor is False

    def test_entity_is_frozen(self):
        entity = make_entity("entity_1", EntityType.OBJECT, "ship")
        with pytest.raises(Exception):
            entity.id = "entity_2"

    def test_invalid_type_rejected(self):
        with pytest.raises(Exception):
            WorldEntity(
                id="entity_1",
                type="creature",
                attributes=EntityAttributes(name="dragon"),
            )


class TestWorldRelation:
    def test_construct_by_field_name_or_alias(self):
        by_name = WorldRelation(
            id="relation_1", type=RelationType.ABOVE, from_="entity_1", to="entity_2"
        )
        by_alias = WorldRelation.model_validate(
            {"id": "relation_1", "type": "above", "from": "entity_1", "to": "entity_2"}
        )
        assert by_name == by_alias
        assert by_alias.from_ == "entity_1"


class TestWorldModel:
    def test_empty_model(self):
        model = WorldModel()
        assert model.to_dict() == {"entities": [], "relationships": []}

    def test_wire_shape(self):
        model = WorldModel(
            entities=(
                make_entity("entity_1", EntityType.OBJECT, "ship"),
                make_entity("entity_2", EntityType.PLACE, "ocean"),
            ),
            relationships=(
                WorldRelation(
                    id="relation_1",
                    type=RelationType.LOCATED_IN,
                    from_="entity_1",
                    to="entity_2",
                ),
            ),
        )
        assert model.to_dict() == {
            "entities": [
                {"id": "entity_1", "type": "object", "attributes": {"name": "ship"}},
                {"id": "entity_2", "type": "place", "attributes": {"name": "ocean"}},
            ],
            "relationships": [
                {"id": "relation_1", "type": "located_in", "from": "entity_1", "to": "entity_2"},
            ],
        }
        assert json.loads(model.to_json()) == model.to_dict()

    def test_lookup_helpers(self):
        model = WorldModel(entities=(
            make_entity("entity_1", EntityType.OBJECT, "ship"),
            make_entity("entity_2", EntityType.PLACE, "ocean"),
        ))
        assert model.get_entity("entity_2").name == "ocean"
        assert model.get_entity("entity_9") is None
        assert [e.name for e in model.get_entities_by_type(EntityType.OBJECT)] == ["ship"]


class TestTransformConfig:
    def test_defaults(self):
        config = TransformConfig()
        assert "above" in config.stopwords
        assert len(config.stopwords) == 20
        assert config.contractions["i'm"] == "i am"
        assert config.relation_markers["at"] == RelationType.LOCATED_IN
        assert "clouds" in config.vocabulary.places

    def test_words_lowercased(self):
        config = TransformConfig(
            stopwords=["The", "A"],
            vocabulary=Vocabulary(places=["Castle"]),
            relation_markers={"Over": RelationType.ABOVE},
        )
        assert config.stopwords == frozenset({"the", "a"})
        assert config.vocabulary.places == ("castle",)
        assert "over" in config.relation_markers

    def test_marker_cannot_produce_modifies(self):
        with pytest.raises(Exception):
            TransformConfig(relation_markers={"very": RelationType.MODIFIES})

    def test_categories_in_precedence_order(self):
        types = [t for t, _ in Vocabulary().categories()]
        assert types == [EntityType.PLACE, EntityType.OBJECT, EntityType.DESCRIPTOR]

    def test_to_dict_sorts_stopwords(self):
        data = TransformConfig(stopwords=["with", "a"]).to_dict()
        assert data["stopwords"] == ["a", "with"]
        assert data["relation_markers"]["above"] == "above"
