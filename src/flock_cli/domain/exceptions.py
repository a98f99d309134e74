"""Fatal conditions of the init workflow. Everything else is reported through OperationResult."""


class FlockError(Exception):
    """Base for errors surfaced to the user as a single message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AlreadyInitialized(FlockError):
    """A root artifact exists; nothing was mutated."""


class OperationFailed(FlockError):
    """A required step failed after mutation began. Earlier writes are kept."""
