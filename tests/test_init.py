# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the package surface."""

import logging

import focus


def test_version():
    assert focus.__version__ == "0.1.0"


def test_public_names_resolve():
    for name in focus.__all__:
        assert hasattr(focus, name), name


def test_logger_is_quiet_by_default():
    assert focus.logger.name == "focus"
    assert any(
        isinstance(h, logging.NullHandler) for h in focus.logger.handlers
    )


def test_set_and_map_do_not_leak_into_builtins():
    import builtins

    assert builtins.set is not focus.set
    assert builtins.map is not focus.map


def test_functorial_helpers_are_reachable():
    assert focus.functorial.lift(1) == focus.Found(1)
    assert focus.functorial.flip(divmod)(3, 7) == (2, 1)
