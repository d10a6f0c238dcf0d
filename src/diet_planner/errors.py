"""Domain error taxonomy shared by services, adapters and the HTTP layer."""


class DietPlannerError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DietPlannerError):
    """Malformed or out-of-range input."""

    status_code = 422


class NotFoundError(DietPlannerError):
    """A referenced food, list, item or association does not exist."""

    status_code = 404


class PermissionDeniedError(DietPlannerError):
    """The caller does not own the resource being mutated."""

    status_code = 403


class ConflictError(DietPlannerError):
    """A uniqueness constraint would be violated."""

    status_code = 409


class UnavailableError(DietPlannerError):
    """The backing store or an external API could not be reached."""

    status_code = 503
