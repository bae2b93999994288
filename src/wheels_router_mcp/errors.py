"""Typed failures raised by trip planning and location search."""


class WheelsRouterError(Exception):
    """Base class for errors raised by the router."""


class InvalidRequestError(WheelsRouterError, ValueError):
    """Request rejected before any provider was called."""


class UpstreamHTTPError(WheelsRouterError):
    """A provider answered with a non-success HTTP status.

    Attributes:
        provider: Display name of the provider (e.g. "Transitous").
        status_code: HTTP status returned by the provider.
        body: Raw response body text.
    """

    def __init__(self, provider: str, status_code: int, body: str):
        self.provider = provider
        self.status_code = status_code
        self.body = body
        super().__init__(f"{provider} error {status_code}: {body}")
