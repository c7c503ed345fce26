"""Tests for the comparison report."""

import logging

import pytest
from pydantic import ValidationError

from listset import ListComparison, NullArgumentError, compare_lists


class TestCompareLists:
    """compare_lists() wires every operation into one record."""

    def test_fields(self):
        report = compare_lists([1, 2, 2, 3], [2, 4])

        assert isinstance(report, ListComparison)
        assert report.left == [1, 2, 2, 3]
        assert report.right == [2, 4]
        assert report.common == [2]
        assert report.only_left == [1, 2, 3]
        assert report.only_right == [4]
        assert report.combined == [1, 2, 2, 3, 2, 4]
        assert report.difference == [1, 2, 3, 2, 4]
        assert report.equal is False
        assert report.same_elements is False

    def test_reordered_inputs_have_same_elements_but_are_not_equal(self):
        report = compare_lists(["b", None, "a"], ["a", "b", None])
        assert report.same_elements is True
        assert report.equal is False

    def test_equal_inputs(self):
        report = compare_lists((1, None), [1, None])
        assert report.equal is True
        assert report.left_hash == report.right_hash == 31 * 32

    def test_json_dump(self):
        data = compare_lists([], [None]).model_dump(mode="json")
        assert data["left"] == []
        assert data["right"] == [None]
        assert data["only_right"] == [None]
        assert data["left_hash"] == 1
        assert data["right_hash"] == 31
        assert data["same_elements"] is False

    def test_report_is_frozen(self):
        report = compare_lists([1], [1])
        with pytest.raises(ValidationError):
            report.equal = False

    def test_inputs_not_mutated(self):
        left, right = [3, 1, 3], [3]
        compare_lists(left, right)
        assert left == [3, 1, 3]
        assert right == [3]

    @pytest.mark.parametrize("args,name", [((None, []), "left"), (([], None), "right")])
    def test_none_argument_raises(self, args, name):
        with pytest.raises(NullArgumentError, match=name):
            compare_lists(*args)

    def test_logs_debug_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="listset.compare"):
            compare_lists([1, 2], [2])
        assert "left=2 right=1 common=1 equal=False" in caplog.text

    def test_unhashable_elements(self):
        report = compare_lists([[1], {"a": 1}], [[1], {"a": 1}])
        assert report.equal is True
        assert report.same_elements is True
        assert report.common == [[1], {"a": 1}]
        assert report.left_hash == report.right_hash
