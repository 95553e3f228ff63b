import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--use-existing-test-server",
        action="store_true",
        default=False,
        help="Use an already running urlcheck test server if available.",
    )


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"
