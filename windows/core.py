from abc import abstractmethod
from fractions import Fraction
import logging
import math


def _exact(value):
    if value.denominator == 1:
        return value.numerator
    return value


def average(a, b):
    """Mean of two numbers as float. The sum never overflows: two ints
    are added exactly, two floats whose sum leaves the float range are
    halved first. If the mean itself is too large for a float, it is
    returned exactly as ``int`` or ``Fraction``.
    """
    if isinstance(a, int) and isinstance(b, int):
        try:
            return (a + b) / 2
        except OverflowError:
            return _exact(Fraction(a + b, 2))
    try:
        fa, fb = float(a), float(b)
    except OverflowError:
        mean = (Fraction(a) + Fraction(b)) / 2
        try:
            return float(mean)
        except OverflowError:
            return _exact(mean)
    total = fa + fb
    if math.isinf(total) and not math.isinf(fa) and not math.isinf(fb):
        return fa / 2.0 + fb / 2.0
    return total / 2.0


class WindowError(Exception):
    """Base class for errors raised by median windows."""


class ValueNotFound(WindowError, KeyError):
    """Raised by ``MedianWindow.remove`` if the value is not tracked.
    This means that the caller lost track of the window content, so the
    current tracking session should be abandoned.
    """

    def __init__(self, value):
        super(ValueNotFound, self).__init__(value)
        self.value = value

    def __str__(self):
        return "value %r is not tracked by the window" % (self.value,)


class EmptyWindow(WindowError, IndexError):
    """Raised by ``MedianWindow.median`` if no values are tracked."""

    def __str__(self):
        return "median of an empty window"


class MedianWindow(object):
    """A ``MedianWindow`` tracks a multiset of values split into two
    halves and reports their median. ``low`` holds the smaller half and
    exposes its maximum, ``high`` holds the larger half and exposes its
    minimum. After every public operation

      - every value in ``low`` is <= every value in ``high``
      - ``len(low) == len(high)`` or ``len(low) == len(high) + 1``

    Subclasses decide which container is used for the halves by
    implementing ``new_half``. Containers must provide ``push``,
    ``top``, ``pop``, ``remove`` (returning False for absent values)
    and ``__len__``.
    """

    def __init__(self, window_args=None):
        """Creates an empty window. ``window_args`` are the command
        line arguments, subclasses may read their own options from it.
        """
        super(MedianWindow, self).__init__()
        self.window_args = window_args
        self.low = self.new_half(largest_first=True)
        self.high = self.new_half(largest_first=False)

    @staticmethod
    def add_args(parser):
        """Add window-specific arguments to the parser."""
        pass

    @abstractmethod
    def new_half(self, largest_first):
        """Create an empty container for one half of the window.

        Args:
            largest_first (bool): True for the lower half, which needs
                                  access to its maximum
        """
        raise NotImplementedError

    def __len__(self):
        return len(self.low) + len(self.high)

    def __repr__(self):
        return "%s(low=%s, high=%s)" % (self.__class__.__name__,
                                        list(self.low), list(self.high))

    def insert(self, value):
        """Adds ``value`` to the window. Values equal to the maximum of
        the lower half go to the lower half.
        """
        if not len(self.low) or value <= self.low.top():
            self.low.push(value)
        else:
            self.high.push(value)
        self._rebalance()

    def remove(self, value):
        """Removes one occurrence of ``value``, searching the lower half
        first.

        Raises:
            ValueNotFound. If ``value`` is in neither half. The window
            is left unchanged in this case.
        """
        if not self.low.remove(value) and not self.high.remove(value):
            logging.debug("Cannot remove %s from %r" % (value, self))
            raise ValueNotFound(value)
        self._rebalance()

    def median(self):
        """Returns the median of the tracked values. For an odd number
        of values this is the maximum of the lower half as stored, for
        an even number the mean of both middle values as float, see
        ``average``.

        Raises:
            EmptyWindow. If no values are tracked
        """
        if not len(self.low):
            raise EmptyWindow()
        if len(self.low) > len(self.high):
            return self.low.top()
        return average(self.low.top(), self.high.top())

    def clear(self):
        self.low.clear()
        self.high.clear()

    def _rebalance(self):
        while len(self.low) > len(self.high) + 1:
            self.high.push(self.low.pop())
        while len(self.low) < len(self.high):
            self.low.push(self.high.pop())

    def check_invariants(self):
        """Checks ordering and size invariants between both halves.

        Raises:
            AssertionError. If one of the invariants is violated
        """
        assert len(self.high) <= len(self.low) <= len(self.high) + 1, \
            "unbalanced halves: %d low, %d high" % (len(self.low), len(self.high))
        if len(self.high):
            assert self.low.top() <= self.high.top(), \
                "%s in lower half exceeds %s in upper half" % (self.low.top(),
                                                               self.high.top())
