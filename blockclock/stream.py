"""
Clock Stream - Lazily produced terminal frames, one per second
Each consumer owns its own stream and timer
"""

import logging
from datetime import datetime
from typing import AsyncGenerator, Callable

from config import TICK_INTERVAL
from core.ticker import Ticker

from .clock import Clockface, utc_now
from .color import Color
from .digit import CLEAR_SCREEN


async def clock_stream(color: Color,
                       period: float = TICK_INTERVAL,
                       now: Callable[[], datetime] = utc_now) -> AsyncGenerator[str, None]:
    """
    Yield the clear-screen frame, then a clock frame on every tick.

    The first clock frame follows the clear-screen frame immediately. The
    stream never ends on its own; closing the generator stops its ticker.

    Args:
        color: Digit color, fixed for the lifetime of the stream
        period: Seconds between frames
        now: Source of the current UTC time
    """
    yield CLEAR_SCREEN

    with Ticker(period) as ticker:
        logging.debug(f"Clock stream started (color={color}, period={period}s)")
        try:
            while True:
                await ticker.tick()
                yield Clockface(now(), color).render()
        finally:
            logging.debug(f"Clock stream stopped after {ticker.ticks} frames")
