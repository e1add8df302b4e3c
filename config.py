"""
Block Clock Configuration

Central configuration file for all constants and settings.
"""
import os
from typing import Tuple

from dotenv import load_dotenv

# Server Configuration
DEFAULT_HTTP_ADDR = "0.0.0.0:8080"

# Clock Configuration
DEFAULT_COLOR_NAME = "white"
TICK_INTERVAL = 1.0  # seconds between frames

# Logging Configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Response headers for the streamed clock body
STREAM_HEADERS = {
    "Content-Type": "text/plain",
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",  # Disable proxy buffering (nginx)
}


def load_environment() -> bool:
    """Load a .env file from the working directory. Existing variables win."""
    return load_dotenv(override=False)


def get_http_addr() -> str:
    """Listen address from HTTP_ADDR, or the default"""
    return os.getenv("HTTP_ADDR") or DEFAULT_HTTP_ADDR


def parse_http_addr(addr: str) -> Tuple[str, int]:
    """
    Split a listen address into host and port.

    Accepts "host:port" and "[ipv6]:port".

    Raises:
        ValueError: If the address cannot be parsed
    """
    host, sep, port_str = addr.strip().rpartition(":")
    if not sep or not host or not port_str.isdigit():
        raise ValueError(f"Could not parse HTTP_ADDR: {addr!r}")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"Could not parse HTTP_ADDR: {addr!r}")

    port = int(port_str)
    if not 0 <= port <= 65535:
        raise ValueError(f"Could not parse HTTP_ADDR: {addr!r}")
    return host, port


def get_log_level() -> str:
    """Log level name from LOG_LEVEL, or the default"""
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
