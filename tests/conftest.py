# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep HUEBLEND_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("HUEBLEND_"):
            monkeypatch.delenv(key, raising=False)
