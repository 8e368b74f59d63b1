# filename: huffman_queue.py

import heapq
from itertools import count


class PriorityQueue:
    """Min-heap of tree nodes keyed by frequency.

    Nodes with equal frequency come out in the order they went in: every
    entry carries an insertion counter as its second key, so building the
    same frequency table always produces the same tree.
    """

    def __init__(self, nodes=()):
        self._heap = []
        self._counter = count()
        for node in nodes:
            self.insert(node)

    def insert(self, node):
        heapq.heappush(self._heap, (node.freq, next(self._counter), node))

    def extract_min(self):
        """Remove and return the lowest-frequency node, or None when empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def peek_min(self):
        if not self._heap:
            return None
        return self._heap[0][2]

    def size(self):
        return len(self._heap)

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)

    def __repr__(self):
        return f"PriorityQueue(size={len(self._heap)})"
