"""Cache duration parsing.

Supported formats:

- ``"forever"``, ``None``, ``""`` or ``0``: no expiry
- an integer: seconds
- ``"<N><unit>"`` where unit is one of ``s m h d w M y``

Months and years use calendar arithmetic.
"""
import re
from datetime import datetime, timedelta
from typing import Callable, Optional, Union

from dateutil.relativedelta import relativedelta

from view_paths.domain.base.ports import LoggingPort

FOREVER = "forever"

DurationValue = Union[int, str, None]

_DURATION_PATTERN = re.compile(r"^(\d+)([smhdwMy])$")

_UNIT_DELTAS = {
    "s": lambda n: relativedelta(seconds=n),
    "m": lambda n: relativedelta(minutes=n),
    "h": lambda n: relativedelta(hours=n),
    "d": lambda n: relativedelta(days=n),
    "w": lambda n: relativedelta(weeks=n),
    "M": lambda n: relativedelta(months=n),
    "y": lambda n: relativedelta(years=n),
}

FALLBACK_DURATION = timedelta(hours=1)


def is_forever(duration: DurationValue) -> bool:
    """Check whether ``duration`` means the entry never expires."""
    if duration is None or duration == FOREVER:
        return True
    if isinstance(duration, bool):
        return not duration
    if isinstance(duration, int):
        return duration == 0
    return duration in ("", "0")


def parse_duration(
    duration: DurationValue,
    logger: Optional[LoggingPort] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> Optional[datetime]:
    """
    Parse a cache duration into an expiry instant.

    Args:
        duration: Duration value
        logger: Receives a warning for unrecognized formats
        now: Clock used to compute the expiry, defaults to ``datetime.now``

    Returns:
        Expiry instant, or None when the entry should never expire
    """
    if is_forever(duration):
        return None

    current = (now or datetime.now)()

    if isinstance(duration, int) and not isinstance(duration, bool):
        return current + timedelta(seconds=duration)

    match = _DURATION_PATTERN.match(str(duration))
    if match:
        amount, unit = match.groups()
        return current + _UNIT_DELTAS[unit](int(amount))

    if logger is not None:
        logger.warning(f"Unrecognized duration format: {duration}, defaulting to 1 hour")
    return current + FALLBACK_DURATION
