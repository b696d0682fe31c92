"""
Test suite for SearchTreeLib data collectors.
Tests all collector types, including custom collectors and subclassing.
"""

import unittest
from typing import Any, List

from searchtreelib import (
    DataCollector,
    ValueCollector,
    CountCollector,
    SumCollector,
    MaxCollector,
    CustomCollector,
    EMPTY,
    build_tree,
    traverse_tree,
)


class EvenCollector(DataCollector):
    """Collector that keeps only even values."""

    def __init__(self):
        self.evens: List[Any] = []

    def collect(self, value: Any) -> None:
        if value % 2 == 0:
            self.evens.append(value)

    def result(self) -> List[Any]:
        return self.evens


class TestCollectors(unittest.TestCase):
    """Test built-in collectors as traversal visitors."""

    def setUp(self):
        self.tree = build_tree([5, 3, 8, 1, 4])

    def test_value_collector_preserves_visit_order(self):
        collector = ValueCollector()
        traverse_tree(self.tree, collector, order="pre")
        self.assertEqual(collector.result(), [5, 3, 1, 4, 8])

    def test_count_collector(self):
        collector = CountCollector()
        traverse_tree(self.tree, collector)
        self.assertEqual(collector.result(), self.tree.count())

    def test_sum_collector(self):
        collector = SumCollector()
        traverse_tree(self.tree, collector)
        self.assertEqual(collector.result(), 21)

    def test_sum_collector_with_start(self):
        collector = SumCollector(start="")
        traverse_tree(build_tree(["b", "a", "c"]), collector)
        self.assertEqual(collector.result(), "abc")

    def test_max_collector(self):
        collector = MaxCollector()
        traverse_tree(self.tree, collector, order="post")
        self.assertEqual(collector.result(), 8)

    def test_max_collector_on_empty_tree(self):
        collector = MaxCollector()
        traverse_tree(EMPTY, collector)
        self.assertIsNone(collector.result())

    def test_custom_collector(self):
        collector = CustomCollector(lambda value: value * 10)
        traverse_tree(self.tree, collector)
        self.assertEqual(collector.result(), [10, 30, 40, 50, 80])

    def test_subclassed_collector(self):
        collector = EvenCollector()
        traverse_tree(self.tree, collector)
        self.assertEqual(collector.result(), [4, 8])

    def test_collectors_are_callable(self):
        collector = ValueCollector()
        collector(1)
        collector(2)
        self.assertEqual(collector.result(), [1, 2])

    def test_collector_used_directly_with_tree_method(self):
        collector = CountCollector()
        self.tree.traverse_post_order(collector)
        self.assertEqual(collector.result(), 5)

    def test_abstract_collector(self):
        with self.assertRaises(TypeError):
            DataCollector()


if __name__ == "__main__":
    unittest.main()
