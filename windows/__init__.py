import os
import inspect
import importlib
from .core import MedianWindow, WindowError, ValueNotFound, EmptyWindow

WINDOW_REGISTRY = {}

windows_dir = os.path.dirname(__file__)
for file in os.listdir(windows_dir):
    path = os.path.join(windows_dir, file)
    if not file.startswith('_') and not file.startswith('.') and file.endswith('.py'):
        model_name = file[:file.find('.py')]
        module = importlib.import_module('windows.' + model_name)
        clsmembers = inspect.getmembers(module, inspect.isclass)
        for name, _cls in clsmembers:
            if issubclass(_cls, MedianWindow) and not _cls == MedianWindow:
                if not hasattr(_cls, 'name'):
                    raise ValueError("All window classes must have `name` attribute. Culprit: {}".format(name))
                else:
                    WINDOW_REGISTRY[_cls.name] = _cls
