"""Failure classes for the triage endpoints.

InvalidInput is raised before any remote call. The Upstream* classes come out
of the inference gateway; only quota exhaustion is absorbed (by falling back to
the local path), everything else reaches the caller as a server error.
"""


class TriageError(Exception):
    pass


class InvalidInput(TriageError):
    pass


class UpstreamError(TriageError):
    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class UpstreamQuotaExhausted(UpstreamError):
    pass


class UpstreamMalformedOutput(UpstreamError):
    def __init__(self, message: str = "", raw: str | None = None):
        super().__init__(message)
        # kept for logging only, never returned to the caller
        self.raw = raw


class UpstreamOther(UpstreamError):
    pass
