import re
from datetime import datetime, timezone

LABEL_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z")
GOTO_RE = re.compile(r"\x1b\[\d+;\d+H")


def extract_label(frame: str) -> datetime:
    """Decode the timestamp label of a clock frame"""
    match = LABEL_RE.search(frame)
    assert match, f"No timestamp label in frame {frame!r}"
    return datetime.strptime(match.group(0), "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
