"""urlcheck - Wait for HTTP servers to become available or unavailable"""

from urlcheck.checker import UrlChecker
from urlcheck.config import PollConfig
from urlcheck.exceptions import PollingError, UrlCheckerError, UrlTimeoutError
from urlcheck.types import ProbeOutcome

__all__ = [
    "UrlChecker",
    # --- Types -----------------------------
    "PollConfig",
    "ProbeOutcome",
    # --- Exceptions ------------------------
    "UrlCheckerError",
    "UrlTimeoutError",
    "PollingError",
]
