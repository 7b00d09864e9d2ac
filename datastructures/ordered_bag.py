from sortedcontainers import SortedList

class OrderedBag(object):
    """
    Multiset of values kept in sorted order. One end of the bag is its
    ``top``: the largest value if ``largest_first`` is set, otherwise the
    smallest one.
    """
    def __init__(self, largest_first=False, initial=()):
        # SortedList has O(log(n)) runtime for add, remove and lookup
        self.bag = SortedList(initial)
        self.largest_first = largest_first

    def __len__(self):
        return len(self.bag)

    def __iter__(self):
        return iter(self.bag)

    def __contains__(self, value):
        return value in self.bag

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, list(self.bag))

    def push(self, value):
        """
        Add one occurrence of value. Complexity: O(log(n))
        """
        self.bag.add(value)

    def top(self):
        """
        Get the top element. Complexity: O(1)
        """
        if not self.bag:
            raise IndexError("top of empty bag")
        return self.bag[-1] if self.largest_first else self.bag[0]

    def pop(self):
        """
        Remove and return the top element. Complexity: O(log(n))
        """
        if not self.bag:
            raise IndexError("pop from empty bag")
        return self.bag.pop(-1 if self.largest_first else 0)

    def remove(self, value):
        """
        Remove exactly one occurrence of value. Returns False if value
        is not in the bag. Complexity: O(log(n))
        """
        if value not in self.bag:
            return False
        self.bag.remove(value)
        return True

    def clear(self):
        self.bag.clear()
