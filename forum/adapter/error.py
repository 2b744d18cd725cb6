"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class UpstreamAuthError(AdapterError):
    """The identity provider's token was rejected.

    Surfaces as 401 and is never retried.
    """

    pass
