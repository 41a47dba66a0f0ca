from kubernetes.client import (
    V1LimitRange,
    V1LimitRangeItem,
    V1LimitRangeSpec,
    V1ObjectMeta,
)

from .options import LimitRangeOptions

API_VERSION = "v1"
KIND = "LimitRange"
LIMIT_TYPE_CONTAINER = "Container"


def build_limit_range(options: LimitRangeOptions) -> V1LimitRange:
    """Build the LimitRange described by already-validated ``options``."""
    maps: dict[str, dict[str, str]] = {
        "max": {},
        "min": {},
        "default": {},
        "default_request": {},
    }
    for field, value in options.resource_values():
        maps[field.target][field.resource] = value

    return V1LimitRange(
        api_version=API_VERSION,
        kind=KIND,
        metadata=V1ObjectMeta(name=options.name, namespace=options.namespace),
        spec=V1LimitRangeSpec(
            limits=[
                V1LimitRangeItem(
                    type=LIMIT_TYPE_CONTAINER,
                    max=maps["max"] or None,
                    min=maps["min"] or None,
                    default=maps["default"] or None,
                    default_request=maps["default_request"] or None,
                ),
            ],
        ),
    )
