# tests/conftest.py
import os

import pytest

from natural_order.config import reset_config


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    # Every test starts from defaults: no config file, no env overrides, no cached config.
    for k in list(os.environ):
        if k.startswith("NATURAL_ORDER_"):
            monkeypatch.delenv(k, raising=False)
    reset_config()
    yield
    reset_config()
