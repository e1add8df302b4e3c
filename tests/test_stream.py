"""
Tests for the clock frame stream
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

import blockclock.stream as stream_module
from blockclock.clock import render_clockface
from blockclock.color import IndexedColor, NamedColor
from blockclock.digit import CLEAR_SCREEN
from blockclock.stream import clock_stream
from core.ticker import Ticker
from tests.helpers import extract_label


@pytest.fixture
def recorded_tickers(monkeypatch):
    tickers = []

    class RecordingTicker(Ticker):
        def __init__(self, period):
            super().__init__(period)
            tickers.append(self)

    monkeypatch.setattr(stream_module, "Ticker", RecordingTicker)
    return tickers


@pytest.mark.asyncio
@pytest.mark.parametrize("color", [NamedColor.BLACK, NamedColor.WHITE, IndexedColor(0), IndexedColor(255)])
async def test_first_frame_is_clear_screen(color):
    stream = clock_stream(color)
    assert await stream.__anext__() == CLEAR_SCREEN
    await stream.aclose()


@pytest.mark.asyncio
async def test_first_clock_frame_follows_immediately(fixed_instant):
    loop = asyncio.get_running_loop()
    stream = clock_stream(NamedColor.RED, period=10.0, now=lambda: fixed_instant)
    await stream.__anext__()

    start = loop.time()
    frame = await stream.__anext__()
    assert loop.time() - start < 1.0
    assert frame == render_clockface(fixed_instant, NamedColor.RED)
    await stream.aclose()


@pytest.mark.asyncio
async def test_frames_use_now_at_each_tick(fixed_instant):
    calls = []

    def fake_now():
        instant = fixed_instant + timedelta(seconds=len(calls))
        calls.append(instant)
        return instant

    stream = clock_stream(NamedColor.GREEN, period=0.02, now=fake_now)
    frames = []
    async for frame in stream:
        frames.append(frame)
        if len(frames) == 4:
            break
    await stream.aclose()

    assert frames[0] == CLEAR_SCREEN
    assert [extract_label(f) for f in frames[1:]] == calls
    assert all("\x1b[42m" in f for f in frames[1:])


@pytest.mark.asyncio
async def test_consecutive_frames_one_second_apart():
    stream = clock_stream(NamedColor.WHITE)
    assert await stream.__anext__() == CLEAR_SCREEN
    first = extract_label(await stream.__anext__())
    second = extract_label(await stream.__anext__())
    await stream.aclose()

    assert timedelta(seconds=1) <= second - first <= timedelta(seconds=2)
    assert second.tzinfo == timezone.utc


@pytest.mark.asyncio
async def test_closing_stream_stops_ticker(recorded_tickers):
    stream = clock_stream(NamedColor.BLUE, period=0.01)
    await stream.__anext__()
    await stream.__anext__()
    await stream.aclose()

    assert len(recorded_tickers) == 1
    assert recorded_tickers[0].closed
    with pytest.raises(StopAsyncIteration):
        await stream.__anext__()


@pytest.mark.asyncio
async def test_cancelled_consumer_stops_ticker(recorded_tickers):
    received = []

    async def consume():
        async for frame in clock_stream(NamedColor.CYAN, period=10.0):
            received.append(frame)

    task = asyncio.create_task(consume())
    while len(received) < 2:
        await asyncio.sleep(0.01)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert recorded_tickers[0].closed
    assert len(received) == 2


@pytest.mark.asyncio
async def test_streams_are_independent(recorded_tickers, fixed_instant):
    red = clock_stream(NamedColor.RED, period=0.01, now=lambda: fixed_instant)
    blue = clock_stream(NamedColor.BLUE, period=0.01, now=lambda: fixed_instant)

    assert await red.__anext__() == await blue.__anext__() == CLEAR_SCREEN
    red_frame = await red.__anext__()
    blue_frame = await blue.__anext__()
    await red.aclose()

    assert "\x1b[41m" in red_frame and "\x1b[44m" not in red_frame
    assert "\x1b[44m" in blue_frame
    assert recorded_tickers[0].closed
    assert not recorded_tickers[1].closed
    await blue.__anext__()
    await blue.aclose()
