"""Duration text parsing and steep-time arithmetic."""
import math
import re
from datetime import timedelta

from tea_timer.core.errors import DurationParseError, NegativeDurationError

# Longest unit first so "ms" is not read as minutes
_TOKEN = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ms|h|m|s)")

_UNIT_SECONDS = {"ms": 0.001, "s": 1, "m": 60, "h": 3600}


def parse_duration(text):
    """Parse text like '90s', '2m', '1.5h' or '1m30s' into a timedelta."""
    if not text:
        raise DurationParseError(text)

    total = 0.0
    pos = 0
    for match in _TOKEN.finditer(text):
        if match.start() != pos:
            raise DurationParseError(text)
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()

    if pos == 0 or pos != len(text) or not math.isfinite(total):
        raise DurationParseError(text)
    try:
        return timedelta(seconds=total)
    except (OverflowError, ValueError) as e:
        raise DurationParseError(text) from e


def format_duration(duration):
    """Canonical duration text, the inverse of parse_duration ('2m', '1m30s', '0s')."""
    total_ms = round(duration.total_seconds() * 1000)
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    seconds, millis = divmod(rem, 1000)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds or millis:
        sec_text = f"{seconds}.{millis:03d}".rstrip("0") if millis else str(seconds)
        parts.append(f"{sec_text}s")
    return "".join(parts) or "0s"


def format_steep_time(duration):
    minutes, seconds = divmod(int(duration.total_seconds()), 60)
    return f"{minutes} minutes, {seconds} seconds"


def resolve_duration(custom_text, profile=None):
    """Work out the countdown length from an optional override and the selected tea.

    An empty override keeps the tea's steep time. A leading '+' or '-' adjusts
    the tea's steep time, anything else replaces it.
    """
    base = profile.steep_time if profile is not None else timedelta(0)
    if not custom_text:
        return base

    if custom_text[0] in "+-":
        delta = parse_duration(custom_text[1:])
        try:
            total = base + delta if custom_text[0] == "+" else base - delta
        except OverflowError as e:
            raise DurationParseError(custom_text) from e
    else:
        total = parse_duration(custom_text)

    if total <= timedelta(0):
        raise NegativeDurationError()
    return total
