from abc import abstractmethod
import os, sys
import errno
import logging
import codecs
import inspect

import utils


def _mkdir(path, name):
    try:
        os.makedirs(path)
    except OSError as exception:
        if exception.errno != errno.EEXIST:
            raise
        else:
            logging.warning("Output %s directory '%s' already exists." 
                         % (name, path))


class OutputHandler(object):
    """Interface for output handlers. Handlers receive the medians one
    by one via ``write_median`` while the stream is tracked. Handlers
    which need the complete list write it in ``close_file``.
    """
    
    def __init__(self):
        """ Empty constructor """
        self.f = None
    
    def open_file(self):
        pass

    @abstractmethod
    def write_median(self, median):
        """Called for every completed window.
        
        Args:
            median (number): Median of the current window
        
        Raises:
            IOError. If something goes wrong while writing to the disk
        """
        raise NotImplementedError

    def close_file(self):
        if self.f is not None:
            self.f.close()
            self.f = None


def _open_path(path):
    dirname = os.path.dirname(path)
    if dirname and not os.path.isdir(dirname):
        _mkdir(dirname, "median")
    return codecs.open(path, "w", encoding='utf-8')


class StdoutOutputHandler(OutputHandler):
    """Prints one median per line to stdout """
    name = 'stdout'
    def __init__(self, path=None, args=None):
        super(StdoutOutputHandler, self).__init__()

    def write_median(self, median):
        sys.stdout.write(utils.format_median(median))
        sys.stdout.write("\n")
        sys.stdout.flush()


class TextOutputHandler(OutputHandler):
    """Writes one median per line to a plain text file """
    name = 'text'
    def __init__(self, path, args=None):
        """Creates a plain text output handler to write to ``path`` """
        super(TextOutputHandler, self).__init__()
        self.path = path
        
    def write_median(self, median):
        """Writes ``median`` to ``path`` as we go """
        if self.f is None:
            self.open_file()
        self.f.write(utils.format_median(median))
        self.f.write("\n")
        self.f.flush()

    def open_file(self):
        self.f = _open_path(self.path)


class LineOutputHandler(OutputHandler):
    """Writes all medians space separated in a single line """
    name = 'line'
    def __init__(self, path, args=None):
        super(LineOutputHandler, self).__init__()
        self.path = path
        self.medians = []

    def write_median(self, median):
        self.medians.append(utils.format_median(median))

    def close_file(self):
        """Writes the collected medians to ``path`` """
        with _open_path(self.path) as f:
            f.write(' '.join(self.medians))
            f.write("\n")
        self.medians = []


OUTPUT_REGISTRY = {}

clsmembers = inspect.getmembers(sys.modules[__name__], inspect.isclass)
for name, _cls in clsmembers:
    if issubclass(_cls, OutputHandler) and not _cls == OutputHandler:
        if not hasattr(_cls, 'name'):
            raise ValueError("All output handlers classes must have `name` attribute. Culprit: {}".format(name))
        else:
            OUTPUT_REGISTRY[_cls.name] = _cls
