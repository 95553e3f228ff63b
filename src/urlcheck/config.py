from dataclasses import dataclass

import httpx

from urlcheck.types import CONNECT_TIMEOUT, MAX_POLL_INTERVAL, MIN_POLL_INTERVAL, READ_TIMEOUT


@dataclass(slots=True, frozen=True)
class PollConfig:
    """
    PollConfig holds the probe timeouts and backoff bounds used by a UrlChecker.

    The defaults keep the first few probes fast (a server may already be up) while
    bounding the steady-state polling cost for slow-starting servers. A single stuck
    probe can never take longer than connect_timeout + read_timeout.

    Attributes:
        connect_timeout: Seconds to wait for the TCP connection of a probe.
        read_timeout: Seconds to wait for response data of a probe.
        min_poll_interval: First delay between two rounds, in seconds.
        max_poll_interval: Ceiling for the delay between two rounds, in seconds.
    """

    connect_timeout: float = CONNECT_TIMEOUT
    read_timeout: float = READ_TIMEOUT
    min_poll_interval: float = MIN_POLL_INTERVAL
    max_poll_interval: float = MAX_POLL_INTERVAL

    def __post_init__(self) -> None:
        for name in ("connect_timeout", "read_timeout", "min_poll_interval", "max_poll_interval"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

        if self.min_poll_interval > self.max_poll_interval:
            raise ValueError(
                f"min_poll_interval ({self.min_poll_interval}) must not exceed "
                f"max_poll_interval ({self.max_poll_interval})"
            )

    @property
    def timeout(self) -> httpx.Timeout:
        """The per-probe httpx timeout."""
        return httpx.Timeout(self.read_timeout, connect=self.connect_timeout)
