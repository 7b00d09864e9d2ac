import heapq
from collections import Counter

class LazyHeap(object):
    """
    Binary heap with deletion by value. Deleted values are only marked as
    pending and are dropped from the underlying array once they reach the
    root, so ``remove`` does not need to locate the value in the array.
    Values are negated internally if ``largest_first`` is set.

    If ``compaction_factor`` is given, the array is rebuilt without the
    pending values once it holds more than ``compaction_factor`` times
    the number of live values.
    """
    def __init__(self, largest_first=False, initial=(), compaction_factor=None):
        self.largest_first = largest_first
        self.compaction_factor = compaction_factor
        self.a = []
        # Number of live occurrences per value
        self.live = Counter()
        # Number of deleted occurrences per value still stored in self.a
        self.pending = Counter()
        self.size = 0
        for value in initial:
            self.push(value)

    def __len__(self):
        return self.size

    def __iter__(self):
        return iter(sorted(self.live.elements()))

    def __contains__(self, value):
        return self.live[value] > 0

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, list(self))

    def _key(self, value):
        return -value if self.largest_first else value

    def _prune(self):
        while self.a:
            value = self._key(self.a[0])
            if not self.pending[value]:
                return
            self.pending[value] -= 1
            if not self.pending[value]:
                del self.pending[value]
            heapq.heappop(self.a)

    def push(self, value):
        """
        Add one occurrence of value. Complexity: O(log(n))
        """
        heapq.heappush(self.a, self._key(value))
        self.live[value] += 1
        self.size += 1

    def top(self):
        """
        Get the top element. Complexity: O(1) amortized
        """
        if not self.size:
            raise IndexError("top of empty heap")
        self._prune()
        return self._key(self.a[0])

    def pop(self):
        """
        Remove and return the top element. Complexity: O(log(n)) amortized
        """
        if not self.size:
            raise IndexError("pop from empty heap")
        self._prune()
        value = self._key(heapq.heappop(self.a))
        self._forget(value)
        return value

    def remove(self, value):
        """
        Remove exactly one occurrence of value. Returns False if value
        is not in the heap. Complexity: O(log(n)) amortized
        """
        if not self.live[value]:
            return False
        self._forget(value)
        self.pending[value] += 1
        self._prune()
        self._maybe_compact()
        return True

    def _forget(self, value):
        self.live[value] -= 1
        if not self.live[value]:
            del self.live[value]
        self.size -= 1

    def clear(self):
        self.a = []
        self.live.clear()
        self.pending.clear()
        self.size = 0

    def _maybe_compact(self):
        if self.compaction_factor is None or not self.pending:
            return
        if len(self.a) <= max(self.compaction_factor * self.size, 1):
            return
        self.a = [self._key(v) for v in self.live.elements()]
        heapq.heapify(self.a)
        self.pending.clear()
