"""Base class for forum domain services."""


class Service:
    """Base class for domain services.

    Services hold the forum rules that span more than one entity, such as
    keeping vote tallies in step with the vote ledger.
    """

    pass
