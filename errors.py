from __future__ import annotations


class GridironContextError(Exception):
    code = "gridiron_context_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(GridironContextError):
    """Requested resource URI or tool name is not registered."""

    code = "not_found"

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"Unknown {kind}: {key}")
        self.kind = kind
        self.key = key


class ValidationError(GridironContextError):
    """Tool arguments do not satisfy the declared parameter schema."""

    code = "validation_error"

    def __init__(self, field: str, constraint: str) -> None:
        super().__init__(f"{field}: {constraint}")
        self.field = field
        self.constraint = constraint


class ConfigurationError(GridironContextError):
    code = "configuration_error"


class RegistrationError(ConfigurationError):
    code = "registration_error"


class DuplicateURIError(RegistrationError):
    def __init__(self, uri: str) -> None:
        super().__init__(f"resource already registered: {uri}")
        self.uri = uri


class DuplicateNameError(RegistrationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"tool already registered: {name}")
        self.name = name
