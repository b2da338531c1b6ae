"""Wall-clock time source for log lines and message ordering."""

from datetime import datetime
from typing import Protocol

from .constants import TIMESTAMP_FORMAT


class Clock(Protocol):
    """Anything that can tell the current time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Clock backed by the local system time."""

    def now(self) -> datetime:
        return datetime.now()


def format_timestamp(moment: datetime) -> str:
    """Format a log line timestamp independent of locale (``HH:MM:SS``)."""
    return moment.strftime(TIMESTAMP_FORMAT)


def stamp(clock: Clock, text: str) -> str:
    """Prefix text with the bracketed current time, e.g. ``[14:02:11] text``."""
    return f"[{format_timestamp(clock.now())}] {text}"
