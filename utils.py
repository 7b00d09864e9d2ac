import logging
import math
from fractions import Fraction

import numpy as np

# Demo input

DEMO_VALUES = [1, 3, -1, -3, 5, 3, 6, 7]
"""Sample stream used by the ``demo`` input method. """


DEMO_WINDOW_SIZE = 3
"""Window size used by the ``demo`` input method if none is given. """


# Parsing and formatting


def parse_value(token):
    """Converts a single token to a number. Integers are kept as
    ``int`` so that odd window medians are reported exactly.
    
    Args:
        token (string): String representation of the number
    
    Returns:
        int or float
    
    Raises:
        ValueError. If ``token`` is not a number
    """
    try:
        return int(token)
    except ValueError:
        pass
    value = float(token)
    if math.isnan(value):
        raise ValueError("NaN has no position in an ordered window: %r" % token)
    return value


def parse_values(lines):
    """Parses whitespace separated numbers from an iterable of lines.
    
    Args:
        lines (iterable): Lines of text, e.g. an open file
    
    Returns:
        list. Numbers in input order
    
    Raises:
        ValueError. If a token is not a number. The message contains
        the line and the position of the token in the line.
    """
    values = []
    for line_idx, line in enumerate(lines):
        for pos, token in enumerate(line.split()):
            try:
                values.append(parse_value(token))
            except ValueError:
                raise ValueError("Invalid number '%s' in line %d at position %d"
                                 % (token, line_idx + 1, pos + 1))
    return values


def format_median(median):
    """Formats a median for output. Whole numbers are printed without
    fractional part, all other values with their exact ``repr``.
    Halves of ints beyond the float range are printed as ``<n>.5``.
    
    Args:
        median (number): Median as returned by ``MedianWindow.median``
    
    Returns:
        string
    """
    if isinstance(median, float):
        if median.is_integer():
            return str(int(median))
        return repr(median)
    if isinstance(median, Fraction) and median.denominator == 2:
        # exact half of an int too large for a float
        sign = "-" if median < 0 else ""
        return "%s%d.5" % (sign, abs(median.numerator) // 2)
    return str(median)


def split_comma(s, func=None):
    """Splits a string at commas and removes blanks."""
    if not s:
        return []
    parts = s.split(",")
    if func is None:
        return [el.strip() for el in parts]
    return [func(el.strip()) for el in parts]


# Reference computations


def naive_median(values):
    """Median of ``values`` computed with ``numpy.median``. This sorts
    the whole sequence and is only used to verify windows.
    """
    if not len(values):
        raise ValueError("median of an empty sequence")
    return float(np.median(np.asarray(values, dtype=float)))


def naive_sliding_medians(values, window_size):
    """Window medians computed from scratch for every window. """
    return [naive_median(values[i:i + window_size])
            for i in range(len(values) - window_size + 1)]


def create_dummy_stream(num_values, value_range=100, seed=0):
    """Creates a reproducible stream of random integers in
    ``[-value_range, value_range]``.
    
    Args:
        num_values (int): Length of the stream
        value_range (int): Largest absolute value
        seed (int): Seed for the numpy random generator
    
    Returns:
        list. Python integers
    """
    rg = np.random.default_rng(seed=seed)
    stream = rg.integers(-value_range, value_range, size=num_values, endpoint=True)
    logging.debug("Generated dummy stream of %d values (seed=%d)" % (num_values, seed))
    return stream.tolist()
