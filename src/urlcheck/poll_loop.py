import logging
import threading
from collections.abc import Sequence

import httpx

from urlcheck.backoff import poll_intervals
from urlcheck.config import PollConfig
from urlcheck.exceptions import PollCancelledError
from urlcheck.prober import open_client, probe
from urlcheck.types import URL, ProbeOutcome

logger = logging.getLogger(__name__)


def poll_until_available(
    urls: Sequence[URL],
    cancelled: threading.Event,
    config: PollConfig,
    transport: httpx.BaseTransport | None = None,
) -> None:
    """
    Probe urls round-robin until any of them answers 200.

    Every round probes the urls in the given order and returns on the first
    REACHABLE outcome. UNREACHABLE and TRANSPORT_ERROR both mean "not yet". After a
    round without success the loop sleeps for the next backoff delay.

    Args:
        urls: The non-empty sequence of URLs to probe.
        cancelled: Cancellation token, checked before every round and while sleeping.
        config: Probe timeouts and backoff bounds.
        transport: Optional httpx transport, mainly for tests.

    Raises:
        PollCancelledError: If the token is set before any url became reachable.
    """
    with open_client(config, transport) as client:
        for delay in poll_intervals(config.min_poll_interval, config.max_poll_interval):
            _check_cancelled(cancelled)

            for url in urls:
                if probe(client, url) is ProbeOutcome.REACHABLE:
                    return None

            _sleep(delay, cancelled)


def poll_until_unavailable(
    url: URL,
    cancelled: threading.Event,
    config: PollConfig,
    transport: httpx.BaseTransport | None = None,
) -> None:
    """
    Probe url until it stops answering 200.

    Unlike poll_until_available, a TRANSPORT_ERROR is taken as proof that the
    server is gone: a refused connection is exactly what a stopped server looks like.
    Only a REACHABLE outcome keeps the loop going.

    Args:
        url: The URL to probe.
        cancelled: Cancellation token, checked before every round and while sleeping.
        config: Probe timeouts and backoff bounds.
        transport: Optional httpx transport, mainly for tests.

    Raises:
        PollCancelledError: If the token is set while url is still reachable.
    """
    with open_client(config, transport) as client:
        for delay in poll_intervals(config.min_poll_interval, config.max_poll_interval):
            _check_cancelled(cancelled)

            if probe(client, url) is not ProbeOutcome.REACHABLE:
                return None

            _sleep(delay, cancelled)


def _check_cancelled(cancelled: threading.Event) -> None:
    if cancelled.is_set():
        logger.debug("Poll loop cancelled")
        raise PollCancelledError("Poll loop was cancelled")


def _sleep(delay: float, cancelled: threading.Event) -> None:
    logger.debug("Sleeping %.3fs before next poll round", delay)
    # Wakes up early when the token is set; the next round check then aborts.
    cancelled.wait(delay)
