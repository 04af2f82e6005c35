from __future__ import annotations

import pytest

from turtletrace.core.state import TurtleState
from turtletrace.render.sink import RecordingSink


@pytest.fixture
def turtle() -> TurtleState:
    return TurtleState()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
