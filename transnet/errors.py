"""Exceptions raised by the transnet model and protocol layers."""


class TransNetError(Exception):
    """Base exception for transnet errors."""

    pass


class InvalidArgumentError(TransNetError, ValueError):
    """Raised when a required value is missing at construction."""

    def __init__(self, message: str, argument: str | None = None):
        self.argument = argument
        super().__init__(message)


class InvalidStateError(TransNetError, RuntimeError):
    """Raised when an operation is not allowed in the object's current state."""

    pass


class OutOfRangeError(TransNetError, ValueError):
    """Raised when a count or percentage falls outside its allowed range."""

    def __init__(self, message: str, value: object = None):
        self.value = value
        super().__init__(message)


class FormatError(TransNetError, ValueError):
    """Raised when a token cannot be parsed into the expected format."""

    def __init__(self, message: str, text: str | None = None):
        self.text = text
        super().__init__(message)


class StructureError(TransNetError):
    """Raised when a response document is malformed or missing elements."""

    pass
