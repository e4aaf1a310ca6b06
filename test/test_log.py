#!/usr/bin/env python3
"""Unit tests for log.py
"""
__author__ = "pnmenc contributors"
__since__ = "2021/08/14"

import io
import unittest

import numpy as np

import pnmenc


class TestLog(unittest.TestCase):
    def setUp(self):
        self.original_level = pnmenc.log.logger.selected_log_level
        self.original_prefixes = pnmenc.log.logger.show_prefixes

    def tearDown(self):
        pnmenc.log.logger.selected_log_level = self.original_level
        pnmenc.log.logger.show_prefixes = self.original_prefixes

    def test_configured_level_names(self):
        logger = pnmenc.log.logger
        assert logger.selected_log_level is logger.get_level(
            pnmenc.config.options.selected_log_level)
        priorities = [logger.get_level(name).priority
                      for name in ("core", "error", "warn", "message", "verbose", "info", "debug")]
        assert priorities == sorted(priorities)
        with self.assertRaises(KeyError):
            logger.get_level("no_such_level")

    def test_selected_level_filters_messages(self):
        logger = pnmenc.log.logger
        levels = list(logger.name_to_level.values())
        for level in levels:
            logger.selected_log_level = level
            for other_level in levels:
                output = io.StringIO()
                logger.log(f"msg_{other_level.name}", level=other_level, file=output)
                shown = f"msg_{other_level.name}" in output.getvalue()
                assert shown == (other_level.priority <= level.priority), (level, other_level)
                assert shown == logger.level_active(other_level.name)

    def test_prefixes(self):
        logger = pnmenc.log.logger
        logger.selected_log_level = logger.get_level("debug")
        for show_prefixes in (True, False):
            logger.show_prefixes = show_prefixes
            output = io.StringIO()
            logger.warn("careful", file=output)
            assert ("[W] careful" in output.getvalue()) == show_prefixes, output.getvalue()
            assert "careful" in output.getvalue()

    def test_debug_active(self):
        logger = pnmenc.log.logger
        logger.selected_log_level = logger.get_level("debug")
        assert pnmenc.log.debug_active()
        logger.selected_log_level = logger.get_level("message")
        assert not pnmenc.log.debug_active()
        output = io.StringIO()
        logger.debug("hidden", file=output)
        assert output.getvalue() == ""

    def test_encoding_emits_debug_trace(self):
        logger = pnmenc.log.logger
        logger.selected_log_level = logger.get_level("debug")
        original_debug = pnmenc.log.debug
        messages = []
        try:
            pnmenc.log.debug = lambda msg, **kwargs: messages.append(msg)
            image = pnmenc.ArrayImage(np.zeros((2, 2), dtype=np.uint16))
            pnmenc.encode(io.BytesIO(), image, "pgm")
        finally:
            pnmenc.log.debug = original_debug
        assert len(messages) == 1
        assert "PGM" in messages[0] and "65535" in messages[0]


if __name__ == '__main__':
    unittest.main()
