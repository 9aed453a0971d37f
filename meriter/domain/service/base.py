"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services contain ledger logic that spans several entities
    (votes, wallets, communities).
    """

    pass
