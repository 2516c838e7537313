from __future__ import annotations

import pytest
from quart import Quart

from calcdemo import create_app


@pytest.fixture(name="app")
def _app() -> Quart:
    return create_app({"TESTING": True})
