"""Domain-layer error definitions."""


class DomainError(Exception):
    """Base class for domain-layer errors."""


class UnrecognizedModeError(DomainError, ValueError):
    """Raised when a value does not name one of the casing modes."""

    def __init__(self, value: object, valid: tuple[str, ...]) -> None:
        super().__init__(
            f"Unrecognized mode {value!r}. Expected one of: {', '.join(valid)}."
        )
        self.value = value
        self.valid = valid
