from datastructures.lazy_heap import LazyHeap
from windows.core import MedianWindow


class HeapWindow(MedianWindow):
    """Median window built from two ``LazyHeap`` instances. Removed
    values stay in the heap arrays until they surface at the root, see
    ``--heap_compaction_factor`` to bound the array size.
    """

    name = "heap"

    def __init__(self, window_args=None):
        self.compaction_factor = getattr(window_args, 'heap_compaction_factor', 2.0)
        if self.compaction_factor is not None and self.compaction_factor <= 0:
            self.compaction_factor = None
        super(HeapWindow, self).__init__(window_args)

    @staticmethod
    def add_args(parser):
        parser.add_argument("--heap_compaction_factor", default=2.0, type=float,
                            help="Rebuild a heap once its array holds more than "
                            "this factor times the number of live values. Use "
                            "0 to never rebuild and only prune at the root.")

    def new_half(self, largest_first):
        return LazyHeap(largest_first=largest_first,
                        compaction_factor=self.compaction_factor)
