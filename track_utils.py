"""This module contains the functionality behind ``track.py``: logging
setup, creation of windows and output handlers, reading the input
stream, and the main tracking loop.
"""
import logging
import sys
import time
import traceback

from runstats import Statistics

import utils
import output
import windows
from windows.sorted_window import SortedWindow

args = None
"""Global command line arguments, set by ``base_init``. """


def base_init(new_args):
    """This function should be called before accessing any other
    function in this module. It initializes the ``args`` variable on
    which other functions rely, and sets up the logger.
    
    Args:
        new_args (object): Configuration as returned by ``ui.get_args``
    """
    global args
    args = new_args
    # Set up logger
    logging.basicConfig(format='%(asctime)s %(levelname)s: %(message)s')
    logging.getLogger().setLevel(logging.INFO)
    if args.verbosity == 'debug':
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.verbosity == 'info':
        logging.getLogger().setLevel(logging.INFO)
    elif args.verbosity == 'warn':
        logging.getLogger().setLevel(logging.WARNING)
    elif args.verbosity == 'error':
        logging.getLogger().setLevel(logging.ERROR)


def create_window():
    """Creates the median window specified by ``--window`` and passes
    the global arguments through to it.
    
    Returns:
        MedianWindow. Empty window instance
    """
    try:
        window = windows.WINDOW_REGISTRY[args.window](args)
    except Exception as e:
        logging.fatal("An %s has occurred while initializing the window: %s"
                      " Stack trace: %s" % (sys.exc_info()[0],
                                            e,
                                            traceback.format_exc()))
        sys.exit("Could not initialize window.")
    logging.debug("Created %s window" % args.window)
    return window


def create_output_handlers():
    """Creates the output handlers defined in the ``output`` module.
    If ``--outputs`` is empty, medians are printed to stdout.
    
    Returns:
        list. List of output handlers according --outputs
    """
    names = utils.split_comma(args.outputs) or ['stdout']
    outputs = []
    for name in names:
        path = args.output_path % name if '%s' in args.output_path else args.output_path
        try:
            outputs.append(output.OUTPUT_REGISTRY[name](path, args))
        except KeyError:
            logging.fatal("Output format %s not available. Please double-check"
                          " the --outputs parameter." % name)
    return outputs


def get_values():
    """Reads the input stream according ``--input_method``.
    
    Returns:
        list. Numbers in stream order
    
    Raises:
        ValueError. If the input contains something else than numbers
    """
    if args.input_method == 'demo':
        return list(utils.DEMO_VALUES)
    if args.input_method == 'dummy':
        return utils.create_dummy_stream(args.num_values,
                                         args.dummy_range,
                                         args.seed)
    if args.input_method == 'stdin':
        return utils.parse_values(sys.stdin)
    with open(args.input_file) as f:
        return utils.parse_values(f)


def sliding_medians(values, window_size, window=None):
    """Generates the median of each window of ``window_size``
    consecutive values. Each value is inserted into ``window``; once
    the window is full, its median is read and the value that entered
    ``window_size`` steps ago is removed again.
    
    Args:
        values (list): Input stream
        window_size (int): Number of values per window
        window (MedianWindow): Window to use. Defaults to a new
                               ``SortedWindow``
    
    Returns:
        Generator over the window medians, in stream order
    
    Raises:
        ValueError. If ``window_size`` is smaller than 1
    """
    if window_size < 1:
        raise ValueError("Window size must be positive, got %d" % window_size)
    if window is None:
        window = SortedWindow()
    return _slide(values, window_size, window)


def _slide(values, window_size, window):
    for i, value in enumerate(values):
        window.insert(value)
        if i >= window_size - 1:
            yield window.median()
            window.remove(values[i - window_size + 1])


def verify_medians(values, window_size, medians):
    """Compares ``medians`` with medians recomputed from scratch.
    
    Returns:
        int. Number of windows with a wrong median. If the number of
        medians is wrong, every window counts as wrong.
    """
    expected = utils.naive_sliding_medians(values, window_size)
    if len(expected) != len(medians):
        logging.error("Expected %d medians but got %d"
                      % (len(expected), len(medians)))
        return max(len(expected), len(medians))
    mismatches = 0
    for idx, (want, got) in enumerate(zip(expected, medians)):
        if float(got) != want:
            logging.error("Wrong median for window %d: got %s, expected %s"
                          % (idx + 1, utils.format_median(got),
                             utils.format_median(want)))
            mismatches += 1
    return mismatches


def log_statistics(medians):
    """Logs count, mean, standard deviation, minimum and maximum of
    the reported medians.
    """
    if not medians:
        logging.info("Stats: no complete window")
        return None
    stats = Statistics()
    for median in medians:
        stats.push(float(median))
    logging.info("Stats: windows=%d mean=%.3f stddev=%.3f min=%s max=%s"
                 % (len(stats),
                    stats.mean(),
                    stats.stddev(ddof=0),
                    utils.format_median(stats.minimum()),
                    utils.format_median(stats.maximum())))
    return stats


def do_track(window, output_handlers, values, window_size,
             check_invariants=False):
    """This method contains the main tracking loop. It slides
    ``window`` over ``values`` and passes every median to the output
    handlers.
    
    Args:
        window (MedianWindow):  Current window instance, should be empty
        output_handlers (list):  List of output handlers, see
                                 ``create_output_handlers()``
        values (list):  Input stream
        window_size (int):  Number of values per window
        check_invariants (bool):  Check the window invariants after
                                  every step
    
    Returns:
        list. Medians in window order
    
    Raises:
        ValueNotFound. If the window lost track of its values
    """
    start_time = time.time()
    logging.info("Start time: %s" % start_time)
    logging.info("Tracking %d values with window size %d"
                 % (len(values), window_size))
    for output_handler in output_handlers:
        output_handler.open_file()
    medians = []
    try:
        for idx, median in enumerate(sliding_medians(values, window_size, window)):
            logging.debug("Median (window %d): %s"
                          % (idx + 1, utils.format_median(median)))
            if check_invariants:
                window.check_invariants()
            medians.append(median)
            for output_handler in output_handlers:
                try:
                    output_handler.write_median(median)
                except IOError as e:
                    logging.error("I/O error %s occurred when writing outputs: %s"
                                  % (sys.exc_info()[0], e))
    finally:
        for output_handler in output_handlers:
            try:
                output_handler.close_file()
            except IOError as e:
                logging.error("I/O error %s occurred when creating output files: %s"
                              % (sys.exc_info()[0], e))
    logging.info("Tracking finished. Time: %.2f" % (time.time() - start_time))
    return medians
