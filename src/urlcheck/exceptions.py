# --- External Errors ---------------------------------------------


class UrlCheckerError(Exception):
    """
    Base for all urlcheck errors that would be exposed externally.
    """

    pass


class UrlTimeoutError(UrlCheckerError, TimeoutError):
    """
    Raised when the deadline elapses before the awaited condition is met.

    Attributes:
        targets: Human readable description of the polled URL(s).
        elapsed_ms: Milliseconds elapsed between the start of the call and the timeout.
    """

    targets: str
    elapsed_ms: int

    def __init__(self, message: str, targets: str, elapsed_ms: int):
        super().__init__(message)
        self.targets = targets
        self.elapsed_ms = elapsed_ms


class PollingError(UrlCheckerError):
    """
    Raised when the polling task terminates abnormally for a reason other than the timeout.
    The original exception is available as __cause__.
    """

    pass


# --- Internal Errors ---------------------------------------------


class PollCancelledError(Exception):
    """
    Raised inside the poll loop when the cancellation token is observed.
    It is not expected to reach the caller unless the token is set by someone other than the supervisor.
    """

    pass
