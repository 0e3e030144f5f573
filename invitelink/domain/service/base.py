"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold invitation logic that spans several models or
    needs configuration, on top of the pure link codec.
    """

    pass
