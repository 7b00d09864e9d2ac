import argparse
import configparser
import logging
import os
import sys
import platform

import output
import windows


def str2bool(v):
    """For making the ``ArgumentParser`` understand boolean values"""
    return v.lower() in ("yes", "true", "t", "1")


def run_diagnostics():
    """Check availability of external libraries."""
    OKGREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    print("Checking Python3.... %sOK (%s)%s" 
          % (OKGREEN, platform.python_version(), ENDC))
    for lib, components in [
            ("sortedcontainers", "Windows: sorted"),
            ("numpy", "Input methods: dummy. Options: --verify"),
            ("runstats", "Median statistics")]:
        try:
            module = __import__(lib)
            print("Checking %s.... %sOK (%s)%s"
                  % (lib, OKGREEN, getattr(module, '__version__', '?'), ENDC))
        except ImportError:
            print("Checking %s.... %sNOT FOUND%s" % (lib, FAIL, ENDC))
            print("%s is not available. This affects the following "
                  "components: %s." % (lib, components))


def get_parser():
    """Get the parser object which is used to build the configuration
    argument ``args``. This is a helper method for ``get_args()``
    
    Returns:
        ArgumentParser. The pre-filled parser object
    """
    parser = argparse.ArgumentParser(
        description="Report the median of every window of a fixed number "
        "of consecutive values in a stream of numbers.")
    parser.register('type','bool',str2bool)
    
    ## General options
    group = parser.add_argument_group('General options')
    group.add_argument('--config_file', 
                        help="Configuration file in standard .ini format. "
                        "Options are read from the [general] section. "
                        "Command line arguments override the configuration file.")
    group.add_argument("--run_diagnostics", default=False, action="store_true",
                       help="Run diagnostics and check availability of "
                       "external libraries.")
    group.add_argument("--verbosity", default="info",
                        choices=['debug', 'info', 'warn', 'error'],
                        help="Log level: debug,info,warn,error")
    group.add_argument("--input_method", default="demo",
                        choices=['demo', 'dummy', 'file', 'shell', 'stdin'],
                        help="This parameter controls how the input stream "
                        "is provided:\n\n"
                        "* 'demo': Use the built-in sample stream.\n"
                        "* 'dummy': Use a random integer stream, see "
                        "--num_values, --dummy_range and --seed.\n"
                        "* 'file': Read whitespace separated numbers from "
                        "--input_file.\n"
                        "* 'shell': Start an interactive shell.\n"
                        "* 'stdin': Read whitespace separated numbers from "
                        "stdin.\n\n")
    group.add_argument("--input_file", default="",
                        help="Path to the input stream. This is expected to be "
                        "a plain text file with numbers separated by blanks "
                        "or line breaks.")
    group.add_argument("--num_values", default=1000, type=int,
                        help="Length of the stream for the 'dummy' input method.")
    group.add_argument("--dummy_range", default=100, type=int,
                        help="The 'dummy' input method draws integers from "
                        "[-dummy_range, dummy_range].")
    group.add_argument("--seed", default=0, type=int,
                        help="Random seed to use for numpy operations")
    group.add_argument("--ignore_sanity_checks", default=False, type='bool',
                       help="Terminate when a sanity check fails by "
                       "default. Set this to true to ignore sanity checks.")

    ## Window options
    group = parser.add_argument_group('Window options')
    group.add_argument("--window", default="sorted",
                        choices=sorted(windows.WINDOW_REGISTRY.keys()),
                        help="Container used for the two halves of the window.\n\n"
                        "* 'sorted': sorted lists (sortedcontainers).\n"
                        "* 'heap': binary heaps with lazy deletion.")
    group.add_argument("--window_size", default=None, type=int,
                        help="Number of consecutive values per window. "
                        "Defaults to 3 for the 'demo' input method.")
    group.add_argument("--check_invariants", default=False, type='bool',
                        help="Check the ordering and size invariants of the "
                        "window after every step. Slow, for debugging.")
    group.add_argument("--verify", default=False, action="store_true",
                        help="Recompute every median from scratch with numpy "
                        "and report mismatches.")

    ## Output options
    group = parser.add_argument_group('Output options')
    group.add_argument("--outputs", default="",
                        help="Comma separated list of output formats: \n\n"
                        "* 'stdout': One median per line on stdout (default)\n"
                        "* 'text': One median per line in a text file\n"
                        "* 'line': All medians separated by blanks in a "
                        "single line\n\n"
                        "The path to the output files can be specified with "
                        "--output_path")
    group.add_argument("--output_path", default="medians.%s",
                        help="Path to the output files. You can use the "
                        "placeholder %%s for the format specifier")
    group.add_argument("--no_statistics", default=False, action="store_true",
                       help="Do not compute or log statistics over the "
                       "reported medians.")
    return parser


def load_config_file(path):
    """Reads options from the [general] section of an .ini file.
    
    Args:
        path (string): Path to the configuration file
    
    Returns:
        dict. Option names mapped to raw string values
    """
    config = configparser.ConfigParser()
    if not config.read(path):
        logging.fatal("Configuration file '%s' not readable." % path)
        sys.exit("Could not read configuration file.")
    if config.has_section('general'):
        items = config.items('general')
    else:
        items = config.defaults().items()
    return dict((key.replace('-', '_'), val) for key, val in items)


def apply_config(parser, config, warn_unknown=True):
    """Uses the values in ``config`` as new defaults for ``parser``.
    Flags are converted with ``str2bool``, all other values are left to
    the argument types of the parser.
    """
    known = vars(parser.parse_known_args([])[0])
    defaults = {}
    for key, val in config.items():
        if key not in known:
            if warn_unknown:
                logging.warning("Unknown option '%s' in configuration file" % key)
            continue
        defaults[key] = str2bool(val) if isinstance(known[key], bool) else val
    parser.set_defaults(**defaults)


def parse_args(parser, argv=None):
    args, _ = parser.parse_known_args(argv)
    config = load_config_file(args.config_file) if args.config_file else {}
    apply_config(parser, config, warn_unknown=False)
    args, _ = parser.parse_known_args(argv)
    windows.WINDOW_REGISTRY[args.window].add_args(parser)
    apply_config(parser, config)
    return parser.parse_args(argv)


def get_args(argv=None):
    parser = get_parser()
    args = parse_args(parser, argv)
    return args


def validate_args(args):
    """Some rudimentary sanity checks for configuration options.
    This method directly prints help messages to the user. In case of fatal
    errors, it terminates using ``logging.fatal()``
    
    Args:
        args (object):  Configuration as returned by ``get_args``
    
    Raises:
        AttributeError. If a sanity check failed and
        ``--ignore_sanity_checks`` is not set
    """
    if args.input_method != 'shell':
        if args.window_size is None or args.window_size < 1:
            logging.fatal("Window size must be a positive integer (--window_size)")
            sys.exit("Invalid window size.")
    if args.input_method == 'file' and not os.access(args.input_file, os.R_OK):
        logging.fatal("Input file '%s' not readable. Please double-check the "
                      "input_file option or choose an alternative input_method."
                      % args.input_file)
        sys.exit("Input file not readable.")

    # Some common pitfalls
    sanity_check_failed = False
    for name in [n.strip() for n in args.outputs.split(",") if n.strip()]:
        if name not in output.OUTPUT_REGISTRY:
            logging.warning("Unknown output format '%s'." % name)
            sanity_check_failed = True
    if args.input_method == 'dummy' and args.num_values < args.window_size:
        logging.warning("The dummy stream has %d values but the window size is "
                        "%d. No median will be reported."
                        % (args.num_values, args.window_size))
        sanity_check_failed = True
    if args.input_method == 'shell' and args.outputs:
        logging.warning("Outputs are ignored in 'shell' mode.")
    if args.input_method == 'shell' and args.verify:
        logging.warning("--verify has no effect in 'shell' mode.")

    if sanity_check_failed and not args.ignore_sanity_checks:
        raise AttributeError("Sanity check failed (see warnings). If you want "
            "to proceed despite these warnings, use --ignore_sanity_checks.")
