"""
Shared route helper utilities.

Turns request paths into clock colors and parse failures into plain-text responses.
"""
import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse

from blockclock.color import Color, ColorParseError, DEFAULT_COLOR, parse_color


def resolve_color_path(path: str) -> Color:
    """
    Interpret a request path as a color selector.

    Args:
        path: Request path, with or without leading slashes

    Returns:
        The selected color; white when the path is empty

    Raises:
        ColorParseError: If the path is not a valid color
    """
    selector = path.lstrip("/")
    if selector == "":
        return DEFAULT_COLOR
    return parse_color(selector)


async def color_parse_error_handler(request: Request, exc: ColorParseError) -> PlainTextResponse:
    """Answer an invalid color with 400 and the parse message as the body"""
    logging.info(f"Rejected color {request.url.path!r}: {exc}")
    return PlainTextResponse(str(exc), status_code=400)
