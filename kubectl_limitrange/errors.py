"""Exception hierarchy shared by every stage of the command."""


class LimitRangeError(Exception):
    """Base class for all errors raised by the plugin."""


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------

class ValidationError(LimitRangeError):
    """The request is malformed. Detected before any remote call."""


class EmptyNamespaceError(ValidationError):
    def __init__(self) -> None:
        super().__init__("namespace cannot be empty")


class MissingNameError(ValidationError):
    def __init__(self) -> None:
        super().__init__("name is required")


class NoLimitsSpecifiedError(ValidationError):
    def __init__(self) -> None:
        super().__init__("at least one resource limit or request must be specified")


class QuantityError(ValidationError):
    """A single quantity flag was rejected; ``field`` is the flag name."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"invalid {field} value: {reason}")


class InvalidQuantitySyntaxError(QuantityError):
    def __init__(self, field: str, value: str) -> None:
        self.value = value
        super().__init__(field, f"{value!r} is not a valid resource quantity")


class NonPositiveQuantityError(QuantityError):
    def __init__(self, field: str) -> None:
        super().__init__(field, "must be greater than zero")


class InvalidDryRunValueError(ValidationError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid value for --dry-run: {value}, must be 'client' or 'server'")


class UnsupportedOutputFormatError(ValidationError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"unsupported output format: {value}")


# ---------------------------------------------------------------------------
# Environment and remote errors
# ---------------------------------------------------------------------------

class ConfigurationError(LimitRangeError):
    """Namespace or client configuration could not be resolved."""


class SubmissionError(LimitRangeError):
    """The API server rejected the create call or could not be reached."""

    def __init__(self, message: str, status: int | None = None) -> None:
        self.status = status
        super().__init__(message)


class StageError(LimitRangeError):
    """Wraps an error with the stage (completion/validation/execution) it came from."""

    def __init__(self, stage: str, cause: LimitRangeError) -> None:
        self.stage = stage
        super().__init__(f"{stage} error: {cause}")
