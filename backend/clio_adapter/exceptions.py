"""Errors raised while translating host parameters into Clio calls."""


class ClioAdapterError(Exception):
    """Base class for every error raised by this package."""


class ParameterError(ClioAdapterError):
    """A required node parameter is missing or has an unusable value."""

    def __init__(self, name: str, detail: str | None = None):
        self.name = name
        super().__init__(detail or f"Required field '{name}' is missing")


class UnknownResourceError(ClioAdapterError):
    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Unknown resource: {resource}")


class UnknownOperationError(ClioAdapterError):
    def __init__(self, resource: str, operation: str):
        self.resource = resource
        self.operation = operation
        super().__init__(f"Unknown operation '{operation}' for resource '{resource}'")
