#!/usr/bin/env python3
"""
File-based configuration read from `.ini` files (configparser format).

Files are read in this order, later values overwriting earlier ones:

1. `pnmenc.ini`, shipped with the library (`pnmenc/config/pnmenc.ini`).
2. `pnmenc.ini` in the user configuration dir (see pnmenc.user_config_dir,
   e.g., `~/.config/pnmenc` in many linux boxes).
3. Any `*.ini` file next to the calling script, sorted by lowercase name.
"""
__author__ = "pnmenc contributors"
__since__ = "2024/03/11"

import os
import glob
import ast
import configparser

from .. import calling_script_dir, pnmenc_installation_dir, user_config_dir
from ..misc import Singleton as _Singleton, class_to_fqn
from ..log import logger


class Ini(metaclass=_Singleton):
    """Combined contents of all read .ini files.
    """
    global_ini_path = os.path.join(pnmenc_installation_dir, "config", "pnmenc.ini")
    user_ini_path = os.path.join(user_config_dir, "pnmenc.ini")
    local_ini_paths = sorted(glob.glob(os.path.join(calling_script_dir, "*.ini")),
                             key=lambda s: os.path.basename(s).lower())

    def __init__(self):
        self.used_config_paths = []
        self.config_parser = configparser.ConfigParser()
        for ini_path in [self.global_ini_path, self.user_ini_path] + self.local_ini_paths:
            if os.path.exists(ini_path):
                self.update_from_path(ini_path)

    def update_from_path(self, ini_path):
        """Read ini_path on top of the current configuration.
        Invalid files are ignored with a warning.
        """
        try:
            self.config_parser.read(ini_path, encoding="utf-8")
        except configparser.Error as ex:
            logger.warn(f"Ignoring invalid configuration file {ini_path}: {ex}")
        else:
            self.used_config_paths.append(ini_path)

    def get_key(self, section, name):
        """Return the value of name in section. Python literals (numbers,
        booleans, None, strings in quotes, lists, ...) are evaluated,
        and any other value is returned as a plain string.

        :raises KeyError: if the section or the key are not defined.
        """
        value = self.config_parser[section][name]
        try:
            return ast.literal_eval(value)
        except (SyntaxError, ValueError):
            return value

    def section_keys(self, section):
        """Return the names defined in section, or an empty list if it does not exist.
        """
        return list(self.config_parser[section]) if self.config_parser.has_section(section) else []


ini = Ini()
assert ini is Ini(), "Singleton not working for pnmenc.config.ini"


def managed_attributes(cls):
    """Class decorator that sets the public, non-callable class attributes
    of cls from the .ini files.

    The value of each attribute is looked up in the section named after the
    fully qualified name of cls (e.g., `[pnmenc.config.Options]`), then in the
    sections of its base classes in method resolution order. Attributes not
    found in any section keep their default value. Keys that cls does
    not define are ignored.
    """
    cls_fqn = class_to_fqn(cls)
    sections = [class_to_fqn(c) for c in cls.__mro__ if c is not object]

    for attribute, default_value in list(cls.__dict__.items()):
        if attribute.startswith("_") or callable(default_value) \
                or isinstance(default_value, (classmethod, staticmethod, property)):
            continue
        for section in sections:
            try:
                value = ini.get_key(section, attribute)
            except KeyError:
                continue
            setattr(cls, attribute, value)
            if value != default_value:
                logger.debug(f"{cls_fqn}.{attribute} = {value!r} (from [{section}], "
                             f"default {default_value!r})")
            break

    for attribute in ini.section_keys(cls_fqn):
        if not hasattr(cls, attribute):
            logger.warn(f"Key {attribute!r} of [{cls_fqn}] in the configuration files "
                        f"is not an attribute of {cls.__name__} and is ignored")

    return cls
