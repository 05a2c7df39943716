"""Fixture-related exceptions."""

from ..errors import TransNetError


class FixtureLoadError(TransNetError):
    """Raised when a YAML fixture cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class FixtureValidationError(TransNetError):
    """Raised when a fixture fails schema validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
