"""Tests for the entity builder."""

from dream_world.models import EntityType
from dream_world.pipeline.entities import build_entities


class TestBuildEntities:
    def test_ids_follow_first_appearance(self):
        index = build_entities(["floating", "city", "clouds"])
        assert [(e.id, e.name) for e in index.entities] == [
            ("entity_1", "floating"),
            ("entity_2", "city"),
            ("entity_3", "clouds"),
        ]

    def test_types_from_classifier(self):
        index = build_entities(["dark", "forest", "ship", "gleaming"])
        assert [e.type for e in index.entities] == [
            EntityType.DESCRIPTOR,
            EntityType.PLACE,
            EntityType.OBJECT,
            EntityType.UNKNOWN,
        ]

    def test_duplicates_collapse(self):
        index = build_entities(["tree", "dark", "tree", "house", "dark"])
        assert [e.name for e in index.entities] == ["tree", "dark", "house"]
        # Counter tracks entities created, not words scanned
        assert index.by_name["house"].id == "entity_3"

    def test_lookup_by_name(self):
        index = build_entities(["ship", "ocean"])
        assert index.get("ocean").id == "entity_2"
        assert index.get("sky") is None

    def test_empty(self):
        index = build_entities([])
        assert index.entities == ()
        assert index.by_name == {}
