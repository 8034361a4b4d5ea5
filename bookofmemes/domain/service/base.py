"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the logic that spans several collections of the
    record store. They are created per request and keep no state between
    requests.
    """

    pass
