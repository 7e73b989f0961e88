"""Error types shared across Paddock."""


class PaddockError(Exception):
    """Base class for Paddock errors."""

    pass


class ValidationError(PaddockError):
    """Raised when required fields are missing or malformed."""

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class NotFoundError(PaddockError):
    """Raised when an operation references a task id that does not exist."""

    def __init__(self, task_id: str):
        super().__init__(f"No plan with id {task_id}")
        self.task_id = task_id


class AllEndpointsFailedError(PaddockError):
    """Raised when every race-data endpoint failed."""

    def __init__(self, errors: list[tuple[str, Exception]]):
        summary = "; ".join(f"{endpoint}: {error}" for endpoint, error in errors)
        super().__init__(f"All race endpoints failed ({summary})" if errors else "No race endpoints configured")
        self.errors = errors
