"""Domain layer errors.

All of these are user-visible and recoverable by retrying with different
input. Storage failures are never wrapped into one of them.
"""


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


class NotAuthorizedError(DomainError):
    """Raised when a user acts on value that does not belong to them."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class PolicyRejectedError(DomainError):
    """Raised when community currency policy forbids the requested spend."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class InsufficientQuotaError(DomainError):
    """Raised when a quota spend exceeds the remaining daily quota."""

    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(f"Insufficient quota. Available: {available}, Requested: {requested}")


class InsufficientWalletBalanceError(DomainError):
    """Raised when a wallet spend exceeds the balance."""

    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient wallet balance. Available: {available}, Requested: {requested}"
        )


class NothingToWithdrawError(BusinessRuleViolationError):
    """Raised when a target has no accrued value left to withdraw."""

    def __init__(self, target_type: str, target_id: str):
        super().__init__(f"No balance available to withdraw from {target_type} {target_id}")


class InsufficientWithdrawableError(BusinessRuleViolationError):
    """Raised when a withdrawal asks for more than the target has accrued."""

    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient votes to withdraw. Available: {available}, Requested: {requested}"
        )
