from datastructures.ordered_bag import OrderedBag
from windows.core import MedianWindow


class SortedWindow(MedianWindow):
    """Median window whose halves are ``OrderedBag`` instances, i.e.
    sorted lists with O(log(n)) insertion and deletion by value.
    """

    name = "sorted"

    def new_half(self, largest_first):
        return OrderedBag(largest_first=largest_first)
