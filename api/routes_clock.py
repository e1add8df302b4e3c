"""
Clock Routes

Streams the block clock to HTTP clients. The request path selects the color.
"""
import logging
from typing import AsyncGenerator, Callable

from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

from blockclock.color import Color
from config import STREAM_HEADERS
from utils.route_helpers import resolve_color_path

StreamFactory = Callable[[Color], AsyncGenerator[str, None]]


def setup_clock_routes(stream_factory: StreamFactory) -> APIRouter:
    """
    Setup clock routes with dependency injection

    Args:
        stream_factory: Called once per request with the chosen color, returns
            that connection's private frame stream

    Returns:
        Configured APIRouter
    """
    router = APIRouter()

    @router.get("/{color_path:path}")
    async def stream_clock(color_path: str, request: Request):
        """Stream clock frames until the client disconnects"""
        color = resolve_color_path(color_path)
        client = request.client.host if request.client else "unknown"
        logging.info(f"Clock stream opened for {client} (color={color})")

        async def frames():
            stream = stream_factory(color)
            try:
                async for frame in stream:
                    yield frame
            finally:
                await stream.aclose()
                logging.info(f"Clock stream closed for {client}")

        return StreamingResponse(frames(), headers=STREAM_HEADERS)

    return router
