import re
from decimal import Decimal

from kubernetes.utils import parse_quantity as _parse_magnitude

from .errors import InvalidQuantitySyntaxError, NonPositiveQuantityError

# <signedNumber><suffix>, suffix being binary SI, decimal SI or a decimal exponent
QUANTITY_RE = re.compile(
    r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
    r"(?:[KMGTPE]i|[numkMGTPE]|[eE][+-]?\d+)?$"
)


def parse_quantity(field: str, value: str) -> Decimal:
    """Parse a resource quantity literal and require it to be strictly positive."""
    if not QUANTITY_RE.fullmatch(value):
        raise InvalidQuantitySyntaxError(field, value)
    try:
        magnitude = _parse_magnitude(value)
    except ValueError as exc:
        raise InvalidQuantitySyntaxError(field, value) from exc
    if magnitude <= 0:
        raise NonPositiveQuantityError(field)
    return magnitude
