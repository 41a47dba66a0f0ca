import json

import yaml
from kubernetes.client import ApiClient, V1LimitRange

from .builder import API_VERSION, KIND
from .options import OutputFormat

_api_client: ApiClient | None = None


def _serializer() -> ApiClient:
    global _api_client
    if _api_client is None:
        _api_client = ApiClient()
    return _api_client


def ensure_type_meta(limit_range: V1LimitRange) -> V1LimitRange:
    """Fill apiVersion/kind; objects returned by the API client may lack them."""
    if not limit_range.api_version or not limit_range.kind:
        limit_range.api_version = API_VERSION
        limit_range.kind = KIND
    return limit_range


def to_dict(limit_range: V1LimitRange) -> dict:
    """Serialize to the wire form: camelCase keys, unset fields dropped."""
    return _serializer().sanitize_for_serialization(limit_range)


def render(limit_range: V1LimitRange, output: str) -> str:
    fmt = OutputFormat.parse(output)
    data = to_dict(ensure_type_meta(limit_range))
    if fmt is OutputFormat.YAML:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=True)
    return json.dumps(data, indent=4) + "\n"
