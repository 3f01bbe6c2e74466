"""Tests for EntityIndex."""

import pytest

from jsonapi_deserializer import InvalidPayload
from jsonapi_deserializer.core.index import EntityIndex


class TestEntityIndex:
    """Test suite for EntityIndex.build and lookups."""

    def test_single_object_data(self) -> None:
        """Test that a single data object becomes one root at position 0."""
        item = {"type": "files", "id": "1"}

        index = EntityIndex.build({"data": item})

        assert index.root_items() == [item]
        assert index.roots["1"].position == 0

    def test_positions_follow_data_order(self) -> None:
        """Test that positions are recorded in original order."""
        data = [{"type": "files", "id": id_} for id_ in ("3", "1", "2")]

        index = EntityIndex.build({"data": data})

        assert [entry.position for entry in index.roots.values()] == [0, 1, 2]
        assert [item["id"] for item in index.root_items()] == ["3", "1", "2"]

    def test_root_items_sorted_by_position(self) -> None:
        """Test that output order comes from positions, not storage order."""
        index = EntityIndex()
        index.add_root({"type": "files", "id": "b"}, 1)
        index.add_root({"type": "files", "id": "a"}, 0)

        assert [item["id"] for item in index.root_items()] == ["a", "b"]

    def test_duplicate_root_keeps_first_position(self) -> None:
        """Test last-write-wins content with first-seen position."""
        first = {"type": "files", "id": "1", "attributes": {"v": 1}}
        other = {"type": "files", "id": "2"}
        last = {"type": "files", "id": "1", "attributes": {"v": 2}}

        index = EntityIndex.build({"data": [first, other, last]})

        assert len(index) == 2
        assert index.root_items() == [last, other]

    def test_roots_keyed_by_id_only(self) -> None:
        """Test that roots sharing an id collapse regardless of type."""
        folder = {"type": "folders", "id": "1"}
        file = {"type": "files", "id": "1"}

        index = EntityIndex.build({"data": [folder, file]})

        assert list(index.roots) == ["1"]
        assert index.root_items() == [file]

    def test_included_indexed_by_type_and_id(self) -> None:
        """Test included lookups."""
        person = {"type": "people", "id": "9"}
        comment = {"type": "comments", "id": "9"}

        index = EntityIndex.build({"data": [], "included": [person, comment]})

        assert index.get_included("people", "9") is person
        assert index.get_included("comments", "9") is comment
        assert index.get_included("people", "1") is None
        assert index.get_included("tags", "9") is None

    def test_included_duplicate_overwrites(self) -> None:
        """Test that a later included duplicate replaces an earlier one."""
        old = {"type": "people", "id": "9", "attributes": {"name": "old"}}
        new = {"type": "people", "id": "9", "attributes": {"name": "new"}}

        index = EntityIndex.build({"data": [], "included": [old, new]})

        assert index.get_included("people", "9") is new

    def test_roots_are_not_included(self) -> None:
        """Test that root items are kept out of the included store."""
        index = EntityIndex.build({"data": {"type": "people", "id": "9"}})

        assert index.get_included("people", "9") is None
        assert index.included == {}

    def test_has_included(self) -> None:
        """Test checking several references at once."""
        index = EntityIndex.build(
            {"data": [], "included": [{"type": "people", "id": "9"}, {"type": "people", "id": "2"}]}
        )

        assert index.has_included([("people", "9"), ("people", "2")])
        assert not index.has_included([("people", "9"), ("people", "3")])
        assert index.has_included([])

    def test_empty_data_list(self) -> None:
        """Test that an empty data list is a valid payload."""
        index = EntityIndex.build({"data": []})

        assert index.root_items() == []

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"data": None},
            {"data": False},
            {"data": 0},
            {"data": ""},
            {"data": {}},
            {"data": [0]},
            {"included": []},
            "data",
            None,
        ],
    )
    def test_invalid_payloads(self, payload) -> None:
        """Test payloads that are rejected."""
        with pytest.raises(InvalidPayload):
            EntityIndex.build(payload)
