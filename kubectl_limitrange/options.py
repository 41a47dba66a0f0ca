import enum
from dataclasses import dataclass

from .errors import (
    EmptyNamespaceError,
    InvalidDryRunValueError,
    MissingNameError,
    NoLimitsSpecifiedError,
    UnsupportedOutputFormatError,
)
from .quantity import parse_quantity


class DryRunMode(str, enum.Enum):
    NONE = ""
    CLIENT = "client"
    SERVER = "server"

    @classmethod
    def parse(cls, value: str) -> "DryRunMode":
        try:
            return cls(value)
        except ValueError:
            raise InvalidDryRunValueError(value) from None


class OutputFormat(str, enum.Enum):
    NONE = ""
    YAML = "yaml"
    JSON = "json"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        try:
            fmt = cls(value)
        except ValueError:
            raise UnsupportedOutputFormatError(value) from None
        if fmt is cls.NONE:
            raise UnsupportedOutputFormatError(value)
        return fmt


@dataclass(frozen=True)
class ResourceField:
    flag: str
    attr: str
    target: str  # limit item map: max, min, default, default_request
    resource: str  # cpu or memory


# Validation reports the first failing field in this order.
RESOURCE_FIELDS: tuple[ResourceField, ...] = (
    ResourceField("max-cpu", "max_cpu", "max", "cpu"),
    ResourceField("min-cpu", "min_cpu", "min", "cpu"),
    ResourceField("default-cpu", "default_cpu", "default", "cpu"),
    ResourceField("default-request-cpu", "default_request_cpu", "default_request", "cpu"),
    ResourceField("max-memory", "max_memory", "max", "memory"),
    ResourceField("min-memory", "min_memory", "min", "memory"),
)


@dataclass(frozen=True)
class LimitRangeOptions:
    """Everything needed to build one LimitRange. Empty strings mean unset."""

    name: str = ""
    namespace: str = ""
    max_cpu: str = ""
    min_cpu: str = ""
    default_cpu: str = ""
    default_request_cpu: str = ""
    max_memory: str = ""
    min_memory: str = ""
    dry_run: str = ""
    output: str = ""

    def resource_values(self) -> list[tuple[ResourceField, str]]:
        """Return (field, value) pairs for the quantity flags that were set."""
        return [
            (field, getattr(self, field.attr))
            for field in RESOURCE_FIELDS
            if getattr(self, field.attr)
        ]


def validate(options: LimitRangeOptions) -> None:
    """Raise the first problem found with ``options``, or return None."""
    if not options.namespace:
        raise EmptyNamespaceError()
    if not options.name:
        raise MissingNameError()

    values = options.resource_values()
    if not values:
        raise NoLimitsSpecifiedError()

    for field, value in values:
        parse_quantity(field.flag, value)
