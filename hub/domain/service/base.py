"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span entities (membership checks, thread
    building, counters kept on parents) and own their repositories.
    """
