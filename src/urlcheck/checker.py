import logging
from datetime import timedelta
from functools import partial

import httpx
from anyio import to_thread

from urlcheck.config import PollConfig
from urlcheck.poll_loop import poll_until_available, poll_until_unavailable
from urlcheck.prober import open_client, probe
from urlcheck.supervisor import run_with_deadline
from urlcheck.types import URL, ProbeOutcome

logger = logging.getLogger(__name__)


class UrlChecker:
    """
    UrlChecker waits for HTTP servers to start or stop serving.

    A URL counts as available when a GET request to it returns 200. Polling runs on a
    worker thread from anyio's thread pool, with exponential backoff between rounds,
    while the awaiting task enforces the deadline. Calls are independent of each other
    and may run concurrently.

    Note the asymmetry between the two waits: a connection failure means "not yet" for
    wait_until_available, but it is taken as proof of unavailability by
    wait_until_unavailable.
    """

    _config: PollConfig
    _transport: httpx.BaseTransport | None

    def __init__(self, config: PollConfig | None = None, transport: httpx.BaseTransport | None = None) -> None:
        """
        Args:
            config: Probe timeouts and backoff bounds. Defaults to PollConfig().
            transport: Optional httpx transport used for every probe. Useful to inject an
                httpx.MockTransport in tests.
        """
        self._config = config or PollConfig()
        self._transport = transport

    @property
    def config(self) -> PollConfig:
        return self._config

    async def wait_until_available(self, timeout: float | timedelta, *urls: URL) -> None:
        """
        Wait until any of urls answers 200.

        The urls are probed in the given order on every round; the first one to answer
        200 ends the wait.

        Args:
            timeout: Seconds (or a timedelta) to wait before giving up.
            urls: One or more URLs to poll.

        Raises:
            ValueError: If no url is given, a url is malformed or timeout is negative.
            UrlTimeoutError: If none of the urls answered 200 before the timeout.
            PollingError: If polling failed for a reason other than the timeout.
        """
        if not urls:
            raise ValueError("At least one URL is required")
        _validate(urls)

        targets = "[" + ", ".join(str(url) for url in urls) + "]"
        logger.debug("Waiting for %s", targets)

        poll = partial(poll_until_available, tuple(urls), config=self._config, transport=self._transport)
        await run_with_deadline(poll, timeout, targets, "be available")

    async def wait_until_unavailable(self, timeout: float | timedelta, url: URL) -> None:
        """
        Wait until url stops answering 200.

        Any other status code, as well as a failed connection or read, ends the wait.

        Args:
            timeout: Seconds (or a timedelta) to wait before giving up.
            url: The URL to poll.

        Raises:
            ValueError: If url is malformed or timeout is negative.
            UrlTimeoutError: If url still answered 200 when the timeout elapsed.
            PollingError: If polling failed for a reason other than the timeout.
        """
        _validate((url,))
        logger.debug("Waiting for %s", url)

        poll = partial(poll_until_unavailable, url, config=self._config, transport=self._transport)
        await run_with_deadline(poll, timeout, str(url), "become unavailable")

    async def probe(self, url: URL) -> ProbeOutcome:
        """
        Probe url once, without retrying.

        Args:
            url: The URL to probe.

        Returns:
            The ProbeOutcome of a single GET request.
        """
        return await to_thread.run_sync(self._probe_once, url)

    def _probe_once(self, url: URL) -> ProbeOutcome:
        with open_client(self._config, self._transport) as client:
            return probe(client, url)


def _validate(urls: tuple[URL, ...]) -> None:
    for url in urls:
        try:
            httpx.URL(url)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid URL {url!r}: {e}") from e
