"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidStateError(DomainError):
    """Raised when an operation is not allowed in the resource's current state."""

    pass


class ContentDeletedException(InvalidStateError):
    """Raised when acting on, or replying to, deleted content."""

    def __init__(self, resource: str, resource_id: str, action: str = "edit"):
        self.resource_id = resource_id
        super().__init__(f"Cannot {action} deleted {resource} {resource_id}")


class ForbiddenError(DomainError):
    """Raised when the requester may not perform the operation."""

    pass


class NotAuthorizedError(ForbiddenError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str = "edit"):
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class MutationWindowClosedError(ForbiddenError):
    """Raised when the time window for an operation has elapsed."""

    def __init__(self, action: str, window_minutes: float, since: str = "posting"):
        self.action = action
        super().__init__(
            f"Comment can only be {action} within {window_minutes:g} minutes of {since}"
        )


class ConflictError(DomainError):
    """Raised when the store rejects a write as a uniqueness violation."""

    pass
