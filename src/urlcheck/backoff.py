from collections.abc import Iterator

from urlcheck.types import MAX_POLL_INTERVAL, MIN_POLL_INTERVAL


def next_poll_interval(previous: float, maximum: float = MAX_POLL_INTERVAL) -> float:
    """Double the previous delay, capped at maximum. Never returns less than previous."""
    if previous >= maximum:
        return previous
    return min(previous * 2, maximum)


def poll_intervals(minimum: float = MIN_POLL_INTERVAL, maximum: float = MAX_POLL_INTERVAL) -> Iterator[float]:
    """
    Yield the delays to sleep between poll rounds.

    The sequence starts at minimum, doubles on every step and stays at maximum once
    reached. There is no jitter and no reset.
    """
    delay = minimum
    while True:
        yield delay
        delay = next_poll_interval(delay, maximum)
