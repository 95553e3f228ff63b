import httpx
import pytest

from urlcheck.config import PollConfig
from urlcheck.types import CONNECT_TIMEOUT, MAX_POLL_INTERVAL, MIN_POLL_INTERVAL, READ_TIMEOUT


class TestPollConfig:
    """Test suite for PollConfig."""

    def test_defaults(self):
        """Test that PollConfig defaults to the module constants."""
        config = PollConfig()

        assert config.connect_timeout == CONNECT_TIMEOUT == 0.5
        assert config.read_timeout == READ_TIMEOUT == 1.0
        assert config.min_poll_interval == MIN_POLL_INTERVAL == 0.01
        assert config.max_poll_interval == MAX_POLL_INTERVAL == 0.32

    def test_timeout(self):
        """Test that the httpx timeout carries the connect and read timeouts."""
        timeout = PollConfig(connect_timeout=0.2, read_timeout=0.7).timeout

        assert isinstance(timeout, httpx.Timeout)
        assert timeout.connect == 0.2
        assert timeout.read == 0.7

    @pytest.mark.parametrize("field", ["connect_timeout", "read_timeout", "min_poll_interval", "max_poll_interval"])
    @pytest.mark.parametrize("value", [0, -1.0])
    def test_rejects_non_positive_values(self, field: str, value: float):
        """Test that non-positive timeouts and intervals are rejected."""
        with pytest.raises(ValueError, match=field):
            PollConfig(**{field: value})

    def test_rejects_min_above_max(self):
        """Test that the minimum interval must not exceed the maximum."""
        with pytest.raises(ValueError, match="must not exceed"):
            PollConfig(min_poll_interval=1.0, max_poll_interval=0.5)

    def test_frozen(self):
        """Test that PollConfig is immutable."""
        config = PollConfig()

        with pytest.raises(AttributeError):
            config.read_timeout = 5.0  # type: ignore[misc]
