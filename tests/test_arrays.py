"""Tests for list helpers."""

import pytest

from utilbox.arrays import chunk_array, flatten_array, remove_duplicates


class TestRemoveDuplicates:
    def test_numbers(self):
        assert remove_duplicates([1, 2, 2, 3, 3, 3]) == [1, 2, 3]

    def test_strings(self):
        assert remove_duplicates(["a", "a", "b"]) == ["a", "b"]

    def test_first_seen_order(self):
        assert remove_duplicates([3, 1, 3, 2, 1]) == [3, 1, 2]

    def test_unhashable_items(self):
        assert remove_duplicates([{"id": 1}, {"id": 2}, {"id": 1}]) == [{"id": 1}, {"id": 2}]

    def test_bool_kept_apart_from_int(self):
        assert remove_duplicates([1, True, 0, False, 1.0, True]) == [1, True, 0, False]

    def test_empty(self):
        assert remove_duplicates([]) == []

    def test_accepts_iterables(self):
        assert remove_duplicates(iter("abca")) == ["a", "b", "c"]


class TestFlattenArray:
    def test_one_level(self):
        assert flatten_array([[1], [2, 3], [4]]) == [1, 2, 3, 4]

    def test_strings(self):
        assert flatten_array([["a"], ["b", "c"]]) == ["a", "b", "c"]

    def test_only_one_level(self):
        assert flatten_array([[1, [2]], [[3]]]) == [1, [2], [3]]

    def test_empty(self):
        assert flatten_array([]) == []
        assert flatten_array([[], []]) == []


class TestChunkArray:
    def test_last_chunk_shorter(self):
        assert chunk_array([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    def test_empty(self):
        assert chunk_array([], 3) == []

    def test_size_larger_than_input(self):
        assert chunk_array([1, 2], 5) == [[1, 2]]

    def test_exact_multiple(self):
        assert chunk_array([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]

    def test_tuple_input_gives_lists(self):
        assert chunk_array((1, 2, 3), 2) == [[1, 2], [3]]

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError, match="size must be positive"):
            chunk_array([1, 2], size)
