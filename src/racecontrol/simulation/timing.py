"""Race time formatting and parsing."""

import re

_GAP_PATTERN = re.compile(r"^\+?(\d+(?:\.\d+)?)s$")


def format_lap_time(seconds: float) -> str:
    """Format seconds as ``M:SS.mmm``.

    Minutes carry no leading zero and may exceed 59 (total race times).
    """
    total_ms = int(round(seconds * 1000))
    minutes, ms = divmod(total_ms, 60_000)
    return f"{minutes}:{ms / 1000:06.3f}"


def parse_lap_time(value: str) -> float:
    """Parse ``M:SS.mmm`` (or plain seconds) back to seconds."""
    if ":" in value:
        minutes, secs = value.split(":", 1)
        return int(minutes) * 60 + float(secs)
    return float(value)


def format_gap(gap: float, is_leader: bool = False) -> str:
    """Format a gap to the leader: ``0s`` for the leader, else ``+D.DDDs``."""
    if is_leader:
        return "0s"
    return f"+{gap:.3f}s"


def parse_gap(value: str) -> float:
    """Parse a formatted gap back to seconds."""
    match = _GAP_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"invalid gap: {value!r}")
    return float(match.group(1))
