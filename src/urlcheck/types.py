from enum import Enum
from http import HTTPStatus
from typing import Final

import httpx

# --- Probe defaults (seconds) ---
CONNECT_TIMEOUT: Final[float] = 0.5
READ_TIMEOUT: Final[float] = 1.0

# --- Backoff defaults (seconds) ---
MIN_POLL_INTERVAL: Final[float] = 0.01
MAX_POLL_INTERVAL: Final[float] = 0.32

# Only this status counts as "available".
OK_STATUS: Final[HTTPStatus] = HTTPStatus.OK

URL = str | httpx.URL


class ProbeOutcome(Enum):
    """
    Result of a single probe.

    REACHABLE means the server answered 200. UNREACHABLE means it answered with any
    other status. TRANSPORT_ERROR means no response could be obtained within the
    probe timeouts (connection refused, DNS failure, read timeout, ...).
    """

    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"
    TRANSPORT_ERROR = "transport_error"
