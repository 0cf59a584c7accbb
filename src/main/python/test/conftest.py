# SPDX-License-Identifier: GPL-2.0-or-later
"""Pytest configuration - runs before any tests."""

import os

import pytest

# No display is needed for signal tests, keep Qt off the screen
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def catalog():
    from keycodes.keycodes import build_catalog
    return build_catalog(layers=16, macro_count=16, tap_dance_count=8,
                         supported_features={"caps_word", "layer_lock", "repeat_key"})


@pytest.fixture(scope="session")
def resolver(catalog):
    from keycodes.resolver import KeycodeResolver
    return KeycodeResolver(catalog)
