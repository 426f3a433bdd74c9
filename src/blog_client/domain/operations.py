"""Operation status tracking and failure taxonomy."""

from dataclasses import dataclass
from enum import Enum


class ResourceCategory(Enum):
    """Granularity at which busy/failed status is tracked."""

    SESSION = "session"
    POSTS = "posts"
    MEDIA = "media"


class Operation(Enum):
    """Remote operations, tagged with their owning category and default failure."""

    FETCH_POSTS = ("fetch-posts", ResourceCategory.POSTS, "Failed to fetch posts")
    FETCH_POST = ("fetch-post", ResourceCategory.POSTS, "Failed to fetch post")
    CREATE_POST = ("create-post", ResourceCategory.POSTS, "Failed to create post")
    UPDATE_POST = ("update-post", ResourceCategory.POSTS, "Failed to update post")
    DELETE_POST = ("delete-post", ResourceCategory.POSTS, "Failed to delete post")
    UPLOAD_MEDIA = ("upload-media", ResourceCategory.MEDIA, "Failed to upload media")
    DELETE_MEDIA = ("delete-media", ResourceCategory.MEDIA, "Failed to delete media")
    LOGIN = ("login", ResourceCategory.SESSION, "Failed to log in")
    REGISTER = ("register", ResourceCategory.SESSION, "Failed to register")
    FETCH_PROFILE = (
        "fetch-profile",
        ResourceCategory.SESSION,
        "Failed to fetch profile",
    )
    UPDATE_PROFILE = (
        "update-profile",
        ResourceCategory.SESSION,
        "Failed to update profile",
    )
    REQUEST_PASSWORD_RESET = (
        "request-password-reset",
        ResourceCategory.SESSION,
        "Failed to request password reset",
    )
    RESET_PASSWORD = (
        "reset-password",
        ResourceCategory.SESSION,
        "Failed to reset password",
    )

    def __init__(
        self, tag: str, category: ResourceCategory, default_message: str
    ) -> None:
        self.tag = tag
        self.category = category
        self.default_message = default_message


class OperationPhase(Enum):
    """Lifecycle phase of the latest operation in a category."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationStatus:
    """Status of a resource category.

    Transitions are pure: each returns a new status, so a category's status is
    always replaced in a single assignment.
    """

    phase: OperationPhase = OperationPhase.IDLE
    operation: Operation | None = None
    reason: str | None = None

    @property
    def is_pending(self) -> bool:
        """True while an operation is in flight."""
        return self.phase is OperationPhase.PENDING

    @property
    def error(self) -> str | None:
        """Failure reason to render, if the last operation failed."""
        return self.reason if self.phase is OperationPhase.FAILED else None

    def requested(self, operation: Operation) -> "OperationStatus":
        """Enter ``pending``, clearing any earlier failure reason."""
        return OperationStatus(phase=OperationPhase.PENDING, operation=operation)

    def succeeded(self, operation: Operation) -> "OperationStatus":
        """Enter ``succeeded``; UIs treat this as idle."""
        return OperationStatus(phase=OperationPhase.SUCCEEDED, operation=operation)

    def failed(self, operation: Operation, reason: str | None) -> "OperationStatus":
        """Enter ``failed`` with the given reason or the operation's default."""
        return OperationStatus(
            phase=OperationPhase.FAILED,
            operation=operation,
            reason=reason or operation.default_message,
        )

    def cleared(self) -> "OperationStatus":
        """Drop a failure reason, returning to idle."""
        if self.phase is OperationPhase.FAILED:
            return OperationStatus(operation=self.operation)
        return self


class OperationFailed(Exception):
    """Raised to callers when a remote operation fails."""

    def __init__(self, operation: Operation, reason: str) -> None:
        super().__init__(reason)
        self.operation = operation
        self.reason = reason

    @property
    def tag(self) -> str:
        """Category tag used for message defaulting."""
        return self.operation.tag
