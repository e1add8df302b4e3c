from datetime import datetime, timezone
from typing import List

import pytest

from blockclock.clock import render_clockface
from blockclock.color import Color
from blockclock.digit import CLEAR_SCREEN


@pytest.fixture
def fixed_instant():
    # 1700000000
    return datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


@pytest.fixture
def finite_stream_factory(fixed_instant):
    """
    Stream factory yielding the clear-screen frame and two clock frames, then
    ending, so responses can be read to completion. Records requested colors.
    """
    requested: List[Color] = []

    async def factory(color: Color):
        requested.append(color)
        yield CLEAR_SCREEN
        yield render_clockface(fixed_instant, color)
        yield render_clockface(fixed_instant.replace(second=21), color)

    factory.requested = requested
    return factory
