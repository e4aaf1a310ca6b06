#!/usr/bin/env python3
"""Leveled console logging for `pnmenc`, printed with rich.

Only pnmenc.misc is imported here, so that the configuration modules can log
while they are being loaded. The level selected in the configuration is
applied by pnmenc/__init__.py afterwards.
"""
__author__ = "pnmenc contributors"
__since__ = "2024/03/11"

import sys

import rich.console

from .misc import ExposedProperty
from .misc import Singleton


class LogLevel:
    """Named message level. Lower priority values are more important.
    """

    # pylint: disable=too-few-public-methods

    def __init__(self, name, priority, style=None):
        self.name = name
        self.priority = priority
        self.prefix = f"[{name[0].upper()}] "
        self.style = style

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name}:{self.priority})"


class Logger(metaclass=Singleton):
    """Process-wide logger. A message is printed only if its level is at
    least as important as `selected_log_level`, which is set from the
    `selected_log_level` option of `[pnmenc.config.Options]`.
    """

    # (name, rich style), from most to least important
    level_styles = (
        ("core", "#28c9ff"),
        ("error", "bold #ff5255"),
        ("warn", "#ffca4f"),
        ("message", "#28c9ff"),
        ("verbose", "#a5d3a5"),
        ("info", "#9b5ccb"),
        ("debug", "#909090"),
    )

    def __init__(self):
        self.name_to_level = {name: LogLevel(name, priority=i, style=style)
                              for i, (name, style) in enumerate(self.level_styles)}
        # Everything is shown until the configuration has been read
        self.selected_log_level = self.get_level("debug")
        # Set from the file-based configuration by pnmenc/__init__.py
        self.show_prefixes = False

    def get_level(self, name):
        """Return the LogLevel with the given name.

        :raises KeyError: if name is not one of the defined levels.
        """
        return self.name_to_level[name]

    def level_active(self, level):
        """Return True if messages of level (a LogLevel or its name)
        are currently shown.
        """
        if not isinstance(level, LogLevel):
            level = self.get_level(level)
        return level.priority <= self.selected_log_level.priority

    def log(self, msg, level, file=None):
        """Print msg in a single line if level is active.

        :param level: a LogLevel or its name.
        :param file: output file, sys.stdout if None.
        """
        if not isinstance(level, LogLevel):
            level = self.get_level(level)
        if not self.level_active(level):
            return
        prefix = level.prefix if self.show_prefixes else ""
        console = rich.console.Console(file=file or sys.stdout, markup=False, highlight=False)
        console.print(f"{prefix}{msg}", style=level.style)

    def warn(self, msg, **kwargs):
        self.log(msg, level="warn", **kwargs)

    def debug(self, msg, **kwargs):
        self.log(msg, level="debug", **kwargs)

    @property
    def debug_active(self):
        return self.level_active("debug")

    def __repr__(self):
        return f"{self.__class__.__name__}(selected={self.selected_log_level})"


logger = Logger()
assert logger is Logger(), "Singleton not working for log.py"

get_level = logger.get_level
log = logger.log
warn = logger.warn
debug = logger.debug

debug_active = ExposedProperty(instance=logger, property_name="debug_active")
