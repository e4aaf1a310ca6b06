#!/usr/bin/env python3
"""Binary PNM image encoder (pnmenc) library.

Images are written as PBM (P4), PGM (P5) or PPM (P6) files with
:func:`pnmenc.encode`. See :mod:`pnmenc.pnm` for further information.
"""
__author__ = "pnmenc contributors"
__since__ = "2020/03/31"

# pylint: disable wrong-import-position

import os as _os
import sys as _sys
import appdirs as _appdirs

# Current installation dir of pnmenc
pnmenc_installation_dir = _os.path.dirname(_os.path.abspath(__file__))

# User configuration dir (e.g., ~/.config/pnmenc in many linux distributions)
user_config_dir = _os.path.join(
    _os.path.abspath(_os.path.expanduser(_appdirs.user_config_dir())), "pnmenc")

# Absolute, real path to the calling script's dir.
# Configuration files present here will overwrite
# those in `user_config_dir`.
calling_script_dir = _os.path.realpath(
    _os.path.dirname(_os.path.abspath(_sys.argv[0]))) \
    if _sys.argv and _sys.argv[0] else _os.getcwd()

# Basic tools among core modules
from . import misc
# Logging tools
from . import log
from .log import logger
# Global configuration modules
from . import config

# Setup logging so that it is used from here on.
logger.selected_log_level = log.get_level(name=config.options.selected_log_level)
logger.show_prefixes = config.options.log_level_prefix

# Image model and color conversions
from . import colors
from . import image
# PNM encoding
from . import pnm

from .colors import ColorModel, Gray, Gray16, RGBA, RGBA64, NRGBA, NRGBA64, \
    to_gray, to_rgb, to_bilevel
from .image import Rectangle, Image, ArrayImage
from .pnm import PNMFormat, InvalidFormatError, encode, encode_pbm, encode_pgm, \
    encode_ppm, pack_byte, select_maxvalue
