"""
Unit tests for bounded top-k neighbor selection.

Covers argument validation, the tie-break policy at the heap boundary and
agreement with a full sort of all distances.
"""

import unittest

import numpy as np

from knnvote.distance import euclidean_distance
from knnvote.errors import InsufficientTrainingData, InvalidArgument, InvalidK
from knnvote.generator import generate_training_set
from knnvote.points import LabeledPoint, Neighbor
from knnvote.selector import NeighborHeap, select_k_nearest, validate_k


def full_sort_prefix(train, query, k, d):
    ranked = sorted((euclidean_distance(query, p.features, d), i) for i, p in enumerate(train))
    return [Neighbor(dist, i) for dist, i in ranked[:k]]


class TestValidateK(unittest.TestCase):

    def test_valid(self):
        validate_k(1, 1)
        validate_k(3, 10)

    def test_zero_and_negative_k(self):
        for k in (0, -1, -10):
            with self.assertRaises(InvalidK):
                validate_k(k, 5)

    def test_k_larger_than_training_set(self):
        with self.assertRaises(InsufficientTrainingData) as context:
            validate_k(6, 5)
        self.assertEqual(context.exception.k, 6)
        self.assertEqual(context.exception.n_train, 5)
        self.assertIn("larger than number of training points", str(context.exception))

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(InvalidK, InvalidArgument))
        self.assertTrue(issubclass(InsufficientTrainingData, InvalidArgument))
        self.assertTrue(issubclass(InvalidArgument, ValueError))


class TestNeighborHeap(unittest.TestCase):

    def test_fills_up_to_capacity(self):
        heap = NeighborHeap(3)
        for i, dist in enumerate([5.0, 1.0, 3.0]):
            self.assertTrue(heap.offer(dist, i))
        self.assertTrue(heap.full)
        self.assertEqual(len(heap), 3)
        self.assertEqual(heap.max_distance(), 5.0)

    def test_replaces_maximum_with_smaller(self):
        heap = NeighborHeap(2)
        heap.offer(5.0, 0)
        heap.offer(1.0, 1)
        self.assertTrue(heap.offer(2.0, 2))
        self.assertEqual(heap.neighbors(sort=True), [Neighbor(1.0, 1), Neighbor(2.0, 2)])

    def test_rejects_equal_and_larger(self):
        heap = NeighborHeap(2)
        heap.offer(2.0, 0)
        heap.offer(1.0, 1)
        self.assertFalse(heap.offer(2.0, 2))
        self.assertFalse(heap.offer(9.0, 3))
        self.assertEqual(heap.neighbors(sort=True), [Neighbor(1.0, 1), Neighbor(2.0, 0)])

    def test_evicts_highest_index_among_equal_maximum(self):
        heap = NeighborHeap(2)
        heap.offer(1.0, 0)
        heap.offer(1.0, 1)
        heap.offer(0.5, 2)
        self.assertEqual(heap.neighbors(sort=True), [Neighbor(0.5, 2), Neighbor(1.0, 0)])


class TestSelectKNearest(unittest.TestCase):

    def setUp(self):
        self.train = [
            LabeledPoint((1.0, 0.0), 0),
            LabeledPoint((0.0, 1.0), 1),
            LabeledPoint((1.0, 0.0), 1),
            LabeledPoint((-1.0, 0.0), 0),
        ]

    def test_returns_exactly_k(self):
        for k in range(1, 5):
            self.assertEqual(len(select_k_nearest(self.train, (0.0, 0.0), k, 2)), k)

    def test_boundary_ties_keep_lowest_index(self):
        """All four points are at distance 1; the first seen are kept."""
        result = select_k_nearest(self.train, (0.0, 0.0), 2, 2)
        self.assertEqual(sorted(n.index for n in result), [0, 1])

    def test_closer_point_evicts_latest_tied_point(self):
        train = self.train + [LabeledPoint((0.5, 0.0), 0)]
        result = select_k_nearest(train, (0.0, 0.0), 2, 2)
        self.assertEqual(sorted(n.index for n in result), [0, 4])

    def test_nearest_single_point(self):
        train = [LabeledPoint((0.0, 0.0), 0), LabeledPoint((1.0, 1.0), 1)]
        result = select_k_nearest(train, (0.9, 0.8), 1, 2)
        self.assertEqual(result[0].index, 1)

    def test_matches_full_sort(self):
        rng = np.random.default_rng(42)
        for n, d, k in [(10, 2, 1), (50, 3, 5), (200, 4, 17), (30, 1, 30)]:
            train = generate_training_set(n, d, rng)
            query = tuple(rng.random(d))
            result = sorted(select_k_nearest(train, query, k, d))
            self.assertEqual(result, full_sort_prefix(train, query, k, d))

    def test_matches_full_sort_with_duplicate_points(self):
        rng = np.random.default_rng(7)
        # coarse grid so many distances tie exactly
        train = [LabeledPoint(tuple(float(v) for v in rng.integers(0, 3, size=2)), 0) for _ in range(40)]
        for k in (1, 3, 8, 40):
            result = sorted(select_k_nearest(train, (1.0, 1.0), k, 2))
            self.assertEqual(result, full_sort_prefix(train, (1.0, 1.0), k, 2))

    def test_invalid_k_raises(self):
        with self.assertRaises(InvalidK):
            select_k_nearest(self.train, (0.0, 0.0), 0, 2)
        with self.assertRaises(InvalidK):
            select_k_nearest(self.train, (0.0, 0.0), -3, 2)
        with self.assertRaises(InsufficientTrainingData):
            select_k_nearest(self.train, (0.0, 0.0), 5, 2)

    def test_training_set_not_modified(self):
        before = list(self.train)
        select_k_nearest(self.train, (0.3, 0.3), 3, 2)
        self.assertEqual(self.train, before)


if __name__ == '__main__':
    unittest.main()
