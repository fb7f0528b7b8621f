# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import copy

import pytest

from focus import config


@pytest.fixture
def test_structure():
    """A nested structure mixing mappings, lists and tuples."""
    return {
        "name": "Homer",
        "address": {
            "locale": {
                "number": 123,
                "street": "Fake St.",
            },
            "city": "Springfield",
        },
        "list": [2, 4, 8, 16, 32],
        "tuple": ("a", "b", "c"),
        "deep_list": {
            "values": [5, 10, 15],
        },
    }


@pytest.fixture
def pristine(test_structure):
    """Deep copy of ``test_structure`` to check nothing was mutated."""
    return copy.deepcopy(test_structure)


@pytest.fixture
def override_settings(monkeypatch):
    """Swap the settings singleton for one with the given overrides."""

    def _override(**overrides):
        new = config.FocusSettings(**overrides)
        monkeypatch.setattr(config, "settings", new)
        return new

    return _override
