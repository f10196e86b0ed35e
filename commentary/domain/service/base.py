"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the comment and moderation rules that span repositories;
    they receive their repositories and settings through the constructor.
    """

    pass
