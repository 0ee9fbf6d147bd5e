"""
Bounded top-k neighbor selection.

The selector keeps the k closest training points seen so far in a max-heap
of capacity k, so one pass over n training points costs O(n log k) instead
of the O(n log n) of a full sort.
"""

import heapq
from typing import List, Sequence

from .distance import euclidean_distance
from .errors import InsufficientTrainingData, InvalidK
from .points import Neighbor


def validate_k(k, n_train):
    """
    Check that k neighbors can be selected from n_train training points.

    Raises:
    - InvalidK: k <= 0
    - InsufficientTrainingData: k > n_train
    """
    if k <= 0:
        raise InvalidK(k)
    if n_train < k:
        raise InsufficientTrainingData(k, n_train)


class NeighborHeap:
    """
    Max-heap of at most ``capacity`` neighbors keyed by distance.

    ``heapq`` only provides a min-heap, so entries are stored as
    ``(-distance, -index)``: the root is then the largest retained distance,
    and among equal distances the highest training index.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._entries = []

    def __len__(self):
        return len(self._entries)

    @property
    def full(self) -> bool:
        return len(self._entries) >= self.capacity

    def max_distance(self) -> float:
        return -self._entries[0][0]

    def offer(self, distance: float, index: int) -> bool:
        """
        Consider a candidate; return True if it was kept.

        A candidate whose distance equals the current maximum is rejected, so
        the first-seen point wins boundary ties.
        """
        entry = (-distance, -index)
        if not self.full:
            heapq.heappush(self._entries, entry)
            return True
        if distance < self.max_distance():
            heapq.heapreplace(self._entries, entry)
            return True
        return False

    def neighbors(self, sort: bool = False) -> List[Neighbor]:
        result = [Neighbor(-neg_dist, -neg_idx) for neg_dist, neg_idx in self._entries]
        if sort:
            result.sort()
        return result


def select_k_nearest(train: Sequence, query, k: int, d: int) -> List[Neighbor]:
    """
    Find the k training points closest to ``query``.

    Parameters:
    - train: sequence of LabeledPoint (only ``.features`` is read)
    - query: feature vector with at least d components
    - k: int, number of neighbors (0 < k <= len(train))
    - d: int, dimensionality

    Returns:
    - list of k Neighbor entries in heap order (not a ranking)
    """
    validate_k(k, len(train))

    heap = NeighborHeap(k)
    for i, point in enumerate(train):
        heap.offer(euclidean_distance(query, point.features, d), i)

    return heap.neighbors()
