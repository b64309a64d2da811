"""Execution status classification and duration formatting."""

from .model import Status

_SECONDS_PER_DAY = 24 * 60 * 60


def classify(failed: bool, skipped: bool) -> Status:
    """Failed wins over skipped; anything else passed."""
    if failed:
        return Status.FAIL
    if skipped:
        return Status.SKIP
    return Status.PASS


def format_duration(epoch_millis: int) -> str:
    """Format milliseconds since epoch as UTC ``HH:MM:SS``.

    Durations of a day or more wrap around, the same as a wall-clock time.
    Any int64 value is accepted.
    """
    ms = max(int(epoch_millis or 0), 0)
    h, rem = divmod((ms // 1000) % _SECONDS_PER_DAY, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"
