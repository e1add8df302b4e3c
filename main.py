"""
Block Clock Server

This is the entry point for the HTTP clock server.
Every request gets its own clock stream in the color named by the request path.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.routes_clock import StreamFactory, setup_clock_routes
from blockclock.color import ColorParseError
from blockclock.stream import clock_stream
from config import LOG_FORMAT, get_http_addr, get_log_level, load_environment, parse_http_addr
from utils.route_helpers import color_parse_error_handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan management for FastAPI application.
    Streams hold no shared state, so there is nothing to set up or tear down.
    """
    logging.info("Block Clock server started")
    yield
    logging.info("Block Clock server shut down")


def create_app(stream_factory: StreamFactory = clock_stream) -> FastAPI:
    """
    Build the application.

    Args:
        stream_factory: Produces the frame stream for one connection

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Block Clock",
        description="Unix time as block digits, streamed to terminals",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_exception_handler(ColorParseError, color_parse_error_handler)
    app.include_router(setup_clock_routes(stream_factory))
    return app


app = create_app()


def run():
    import argparse
    import uvicorn

    load_environment()
    log_level = get_log_level()

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT
    )

    parser = argparse.ArgumentParser(description='Block Clock - terminal clock streaming server')
    parser.add_argument('--addr', default=None,
                        help='Listen address as host:port (overrides HTTP_ADDR)')
    args = parser.parse_args()

    addr = args.addr or get_http_addr()
    try:
        host, port = parse_http_addr(addr)
    except ValueError as e:
        logging.error(str(e))
        raise SystemExit(2)

    logging.info(f"Listening on http://{addr}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    run()
