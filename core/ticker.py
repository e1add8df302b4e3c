"""
Ticker

Periodic timer owned by a single consumer task. Nothing runs in the
background: waiting happens inside tick(), so cancelling the owning task
stops the timer.
"""
import asyncio
import logging
from typing import Optional


class Ticker:
    """Fires once immediately, then once every `period` seconds"""

    def __init__(self, period: float):
        if period <= 0:
            raise ValueError(f"Ticker period must be positive, got {period}")
        self.period = period
        self.ticks = 0
        self.closed = False
        self._next_deadline: Optional[float] = None

    async def tick(self) -> float:
        """
        Wait for the next deadline.

        Deadlines are laid out on the event loop clock from the first tick, so a
        tick that is already late fires without waiting.

        Returns:
            The loop time at which the tick fired

        Raises:
            RuntimeError: If the ticker has been closed
        """
        if self.closed:
            raise RuntimeError("Ticker is closed")

        loop = asyncio.get_running_loop()
        if self._next_deadline is None:
            self._next_deadline = loop.time()

        delay = self._next_deadline - loop.time()
        if delay > 0:
            await asyncio.sleep(delay)

        self._next_deadline += self.period
        self.ticks += 1
        return loop.time()

    def close(self):
        """Stop the ticker. Further calls to tick() fail."""
        if not self.closed:
            self.closed = True
            logging.debug(f"Ticker closed after {self.ticks} ticks")

    def __enter__(self) -> "Ticker":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
