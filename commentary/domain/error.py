"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ContentDeletedException(NotFoundError):
    """Raised when attempting to edit deleted content."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.identifier = resource_id
        DomainError.__init__(self, f"Cannot edit deleted {resource} {resource_id}")


class ForbiddenError(DomainError):
    """Raised when a principal may not perform an action on a resource."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class DepthExceededError(BusinessRuleViolationError):
    """Raised when replying to a comment that is already at maximum depth."""

    def __init__(self, parent_id: str, max_depth: int):
        self.parent_id = parent_id
        self.max_depth = max_depth
        super().__init__(
            f"Maximum nesting level ({max_depth}) reached; "
            f"comment {parent_id} cannot be replied to"
        )


class UnavailableError(DomainError):
    """Raised when the backing store cannot be reached."""

    pass
