"""Domain layer errors.

Every failure surfaced by the domain carries an ``ErrorKind`` so outer
layers can map it to a transport status without inspecting messages.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Category of a domain failure."""

    NOT_FOUND = "not_found"
    NOT_AUTHORIZED = "not_authorized"
    VALIDATION_FAILED = "validation_failed"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.CONFLICT

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Structured representation of the error."""
        return {"kind": self.kind.value, "message": self.message, "field": self.field}


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ParentNotFoundError(NotFoundError):
    """Raised when a reply targets a missing, deleted or foreign parent."""

    def __init__(self, parent_id: str):
        super().__init__("parent comment", parent_id)
        self.field = "parent_id"


class NotAuthorizedError(DomainError):
    """Raised when an actor attempts an operation they are not allowed to."""

    kind = ErrorKind.NOT_AUTHORIZED

    def __init__(
        self, resource: str, resource_id: str, actor_id: str, action: str = "edit"
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.actor_id = actor_id
        self.action = action
        super().__init__(
            f"Actor {actor_id} is not authorized to {action} {resource} {resource_id}"
        )


class ValidationError(DomainError):
    """Domain validation error."""

    kind = ErrorKind.VALIDATION_FAILED


class InvalidIntensityError(ValidationError):
    """Raised when a reaction intensity is outside 1-5."""

    def __init__(self, intensity: int):
        super().__init__(
            f"Intensity must be between 1 and 5, got {intensity}", field="intensity"
        )


class InvalidReactionTypeError(ValidationError):
    """Raised when a reaction type is not part of the taxonomy."""

    def __init__(self, reaction_type: str):
        super().__init__(
            f"Unknown reaction type: {reaction_type}", field="reaction_type"
        )


class ConflictError(DomainError):
    """Raised when an operation conflicts with the current state."""

    kind = ErrorKind.CONFLICT


class InvalidTransitionError(ConflictError):
    """Raised when a moderation transition is not permitted."""

    def __init__(self, comment_id: str, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move comment {comment_id} from {current} to {target}",
            field="moderation_status",
        )


class ContentDeletedError(ConflictError):
    """Raised when attempting to modify deleted content."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"Cannot modify deleted {resource} {resource_id}")


class UnavailableError(DomainError):
    """Raised when the backing store cannot be reached."""

    kind = ErrorKind.UNAVAILABLE
