class SeedQueue:
    """Min-priority queue of points awaiting expansion, with update-by-id.

    Binary heap of ``(reachability, id, point)`` entries plus an id -> slot
    index, so ``insert_or_update`` and ``pop`` are O(log n). Equal
    reachability distances pop in ascending id order.
    """

    def __init__(self):
        self._heap = []
        self._slots = {}

    def insert_or_update(self, point):
        if point.reachability_distance is None:
            raise ValueError(f"point {point.id!r} has no reachability distance to queue by")
        entry = (point.reachability_distance, point.id, point)
        slot = self._slots.get(point.id)
        if slot is None:
            self._heap.append(entry)
            slot = len(self._heap) - 1
            self._slots[point.id] = slot
            self._sift_up(slot)
        else:
            self._heap[slot] = entry
            self._sift_down(self._sift_up(slot))

    def pop(self):
        if not self._heap:
            raise IndexError("pop from an empty seed queue")
        last = len(self._heap) - 1
        self._swap(0, last)
        _, id, point = self._heap.pop()
        del self._slots[id]
        if self._heap:
            self._sift_down(0)
        return point

    def peek_at(self, offset):
        """Point at ``offset`` in pop order, without removing anything."""
        ordered = sorted(self._heap, key=lambda entry: entry[:2])
        return ordered[offset][2]

    def _less(self, i, j):
        return self._heap[i][:2] < self._heap[j][:2]

    def _swap(self, i, j):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._slots[heap[i][1]] = i
        self._slots[heap[j][1]] = j

    def _sift_up(self, i):
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent
        return i

    def _sift_down(self, i):
        n = len(self._heap)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and self._less(child, smallest):
                    smallest = child
            if smallest == i:
                return i
            self._swap(i, smallest)
            i = smallest

    def __contains__(self, id):
        return id in self._slots

    def __len__(self):
        return len(self._heap)
