"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span threads, comments and their
    vote ledgers rather than belonging to one entity.
    """

    pass
