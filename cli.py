"""
Block Clock Terminal

Draws the clock on the local terminal until interrupted.
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional, TextIO

from blockclock.color import Color, ColorParseError, parse_color
from blockclock.stream import clock_stream
from config import DEFAULT_COLOR_NAME, LOG_FORMAT, TICK_INTERVAL


def color_argument(text: str) -> Color:
    """argparse type for --color"""
    try:
        return parse_color(text)
    except ColorParseError as e:
        raise argparse.ArgumentTypeError(f"{text!r}: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Block Clock - Unix time in block digits')
    parser.add_argument('-c', '--color', type=color_argument, default=DEFAULT_COLOR_NAME,
                        help='Color name (black, red, green, yellow, blue, purple, cyan, white) '
                             'or 256-color palette index (default: white)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log debug output to stderr')
    return parser


async def write_frames(color: Color, out: TextIO, period: float = TICK_INTERVAL,
                       max_frames: Optional[int] = None) -> int:
    """
    Write frames to `out`, flushing after each one.

    Args:
        color: Digit color
        out: Text stream to write to
        period: Seconds between frames
        max_frames: Stop after this many frames (None runs forever)

    Returns:
        Number of frames written
    """
    written = 0
    stream = clock_stream(color, period=period)
    try:
        async for frame in stream:
            out.write(frame)
            out.flush()
            written += 1
            if max_frames is not None and written >= max_frames:
                break
    finally:
        await stream.aclose()
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr
    )

    try:
        asyncio.run(write_frames(args.color, sys.stdout))
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        logging.debug("stdout closed, stopping")
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
