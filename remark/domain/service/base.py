"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the rules that span a comment and its neighbours (parent,
    thread, notification recipient) and talk to repositories through the
    domain interfaces only.
    """
