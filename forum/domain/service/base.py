"""Base class for forum domain services."""


class Service:
    """Marker base for domain services.

    Services receive repositories (and other services) through their
    constructor and are provided per request by the DI container, so they
    all share the request's database session.
    """

    pass
