"""
Shared fixtures for urlcheck integration tests.
"""

from collections.abc import AsyncGenerator

import anyio
import pytest
import servers.http_server as http_test_server
from helpers.process import STARTUP_TIMEOUT, run_module
from servers.http_server import BASE_URL, STATUS_PATH

from urlcheck import ProbeOutcome, UrlChecker

pytestmark = pytest.mark.anyio


def pytest_configure(config: pytest.Config) -> None:
    use_existing_test_server = config.getoption("--use-existing-test-server")
    outcome = anyio.run(UrlChecker().probe, BASE_URL + STATUS_PATH)

    if outcome is not ProbeOutcome.TRANSPORT_ERROR and not use_existing_test_server:
        raise RuntimeError(
            f"Server is already running at {BASE_URL}. "
            "Run pytest with the --use-existing-test-server option to use it."
        )


@pytest.fixture(scope="session")
async def http_test_server_process() -> AsyncGenerator[None, None]:
    """
    Session-scoped fixture that starts the HTTP test server once for all tests using it.
    """
    checker = UrlChecker()

    if await checker.probe(BASE_URL + STATUS_PATH) is ProbeOutcome.REACHABLE:
        # Server is available, use that.
        yield None
    else:
        async with run_module(http_test_server):
            await checker.wait_until_available(STARTUP_TIMEOUT, BASE_URL + STATUS_PATH)
            yield None
