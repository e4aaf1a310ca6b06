#!/usr/bin/env python3
"""Global configuration of pnmenc.

- `pnmenc.config.ini` gives access to the values read from `.ini` files
  (see `pnmenc.config.aini` for the files that are read and their priority).
- `pnmenc.config.options` holds the global options, whose defaults are read from the
  `[pnmenc.config.Options]` section of those files. They can also be modified
  programmatically, e.g., `pnmenc.config.options.buffer_raster = True`.

Functions with optional arguments defaulting to None use the corresponding
option value instead.
"""
__author__ = "pnmenc contributors"
__since__ = "2024/03/11"

from ..misc import Singleton as _Singleton
from .aini import ini, managed_attributes


@managed_attributes
class Options(metaclass=_Singleton):
    """Global pnmenc options.
    """

    # pylint: disable=too-few-public-methods

    # Name of the minimum log level shown (core, error, warn, message, verbose, info or debug)
    selected_log_level = "message"
    # Show level prefixes (e.g., [D] for debug) in logged messages?
    log_level_prefix = False
    # If True, pnmenc.pnm.encode writes the complete file with a single write call
    # once all pixels have been converted, instead of writing each row as soon as it is ready.
    buffer_raster = False


options = Options()
assert options is Options(), "Singleton not working"
