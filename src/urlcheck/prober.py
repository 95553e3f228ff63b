import logging

import httpx

from urlcheck.config import PollConfig
from urlcheck.types import OK_STATUS, URL, ProbeOutcome

logger = logging.getLogger(__name__)


def open_client(config: PollConfig, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """
    Create the HTTP client used for the probes of a single call.

    Redirects are followed, so a server answering 200 behind a redirect counts as available.

    Args:
        config: Supplies the connect and read timeouts of every probe.
        transport: Optional httpx transport, mainly for tests.
    """
    return httpx.Client(timeout=config.timeout, transport=transport, follow_redirects=True)


def probe(client: httpx.Client, url: URL) -> ProbeOutcome:
    """
    Issue one GET request to url and classify the result.

    The response body (success or error page) is always read to the end and the
    response closed before returning, so the connection can be reused by the next
    probe. Transport level failures and malformed URLs are reported as
    ProbeOutcome.TRANSPORT_ERROR and never raised.

    Args:
        client: The client to send the request with.
        url: The URL to probe.

    Returns:
        The ProbeOutcome of the request.
    """
    logger.debug("Polling %s", url)
    try:
        with client.stream("GET", url) as response:
            response.read()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Probe of %s failed: %r", url, e)
        return ProbeOutcome.TRANSPORT_ERROR

    if response.status_code == OK_STATUS:
        return ProbeOutcome.REACHABLE
    return ProbeOutcome.UNREACHABLE
