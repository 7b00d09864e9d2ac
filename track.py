import logging
import os
import sys
from cmd import Cmd

import utils
import track_utils
import windows
from ui import get_args, run_diagnostics, validate_args


class MedianPrompt(Cmd):
    """Interactive shell which operates directly on a median window.
    Numbers entered without a command are inserted.
    """

    prompt = "median> "

    def __init__(self, window_factory):
        Cmd.__init__(self)
        self.window_factory = window_factory
        self.window = window_factory()

    def _parse(self, cmd_args):
        try:
            return [utils.parse_value(t) for t in cmd_args.split()]
        except ValueError as e:
            print("Not a number: %s" % e)
            return []

    def default(self, cmd_args):
        """Insert the given numbers."""
        self.do_insert(cmd_args)

    def emptyline(self):
        pass

    def do_insert(self, cmd_args):
        """Insert one or more numbers. Syntax: 'insert <x> [<x> ...]'"""
        for value in self._parse(cmd_args):
            self.window.insert(value)
        print("Size: %d" % len(self.window))

    def do_remove(self, cmd_args):
        """Remove one occurrence of each given number. Syntax:
        'remove <x> [<x> ...]'. Removing a number which is not in the
        window discards the complete window.
        """
        for value in self._parse(cmd_args):
            try:
                self.window.remove(value)
            except windows.ValueNotFound as e:
                logging.error("%s. Starting a new window." % e)
                self.window = self.window_factory()
                return
        print("Size: %d" % len(self.window))

    def do_median(self, cmd_args):
        """Print the median of the current window."""
        try:
            print(utils.format_median(self.window.median()))
        except windows.EmptyWindow as e:
            print("No median: %s" % e)

    def do_size(self, cmd_args):
        """Print the number of values in the window."""
        print(len(self.window))

    def do_show(self, cmd_args):
        """Print both halves of the window."""
        print("low:  %s" % ' '.join(utils.format_median(v) for v in self.window.low))
        print("high: %s" % ' '.join(utils.format_median(v) for v in self.window.high))

    def do_clear(self, cmd_args):
        """Remove all values from the window."""
        self.window.clear()

    def do_config(self, cmd_args):
        """Change the window implementation. Syntax: 'config window <name>'.
        The current window content is inserted into the new window.
        """
        split_args = cmd_args.split()
        if len(split_args) != 2 or split_args[0] != 'window':
            print("Syntax: 'config window <name>'")
            return
        name = split_args[1]
        if name not in windows.WINDOW_REGISTRY:
            print("Unknown window '%s'. Choose from: %s"
                  % (name, ', '.join(sorted(windows.WINDOW_REGISTRY))))
            return
        print("Setting window=%s..." % name)
        track_utils.args.window = name
        content = list(self.window.low) + list(self.window.high)
        self.window = track_utils.create_window()
        for value in content:
            self.window.insert(value)

    def do_quit(self, cmd_args):
        """Quits the shell."""
        return True

    def do_EOF(self, line):
        "Quits the shell"
        print("quit")
        return True


def main(argv=None):
    args = get_args(argv)
    if args.run_diagnostics:
        run_diagnostics()
        return 0
    if args.window_size is None and args.input_method == 'demo':
        args.window_size = utils.DEMO_WINDOW_SIZE
    track_utils.base_init(args)
    validate_args(args)

    if args.input_method == 'shell':
        print("Starting interactive mode...")
        print("PID: %d" % os.getpid())
        print("Display help with 'help'")
        print("Quit with ctrl-d or 'quit'")
        MedianPrompt(track_utils.create_window).cmdloop()
        return 0

    try:
        values = track_utils.get_values()
    except ValueError as e:
        logging.fatal("Could not read the input stream: %s" % e)
        return 1
    if args.input_method == 'demo':
        print("Input: %s" % ' '.join(utils.format_median(v) for v in values))
        print("Window size k = %d" % args.window_size)

    window = track_utils.create_window()
    demo_line = args.input_method == 'demo' and not args.outputs
    outputs = [] if demo_line else track_utils.create_output_handlers()
    medians = track_utils.do_track(window, outputs, values, args.window_size,
                                   args.check_invariants)
    if demo_line:
        print("Medians: %s" % ' '.join(utils.format_median(m) for m in medians))
    if not args.no_statistics:
        track_utils.log_statistics(medians)
    if args.verify:
        mismatches = track_utils.verify_medians(values, args.window_size, medians)
        if mismatches:
            logging.error("%d of %d medians are wrong" % (mismatches, len(medians)))
            return 1
        logging.info("All %d medians verified" % len(medians))
    return 0


if __name__ == "__main__":
    sys.exit(main())
