"""Shared fixtures for kubectl-limitrange tests."""

import io
from unittest.mock import MagicMock, patch

import pytest
from kubernetes.client.exceptions import ApiException

from kubectl_limitrange.command import CreateLimitRange
from kubectl_limitrange.options import LimitRangeOptions


class FakeCoreV1Api:
    """In-memory stand-in for the LimitRange calls on CoreV1Api.

    Creates are stored unless ``dry_run="All"`` is passed; reads of missing
    objects raise a 404 ``ApiException`` like the real API server.
    """

    def __init__(self):
        self.store = {}
        self.create_calls = []

    def create_namespaced_limit_range(self, namespace, body, **kwargs):
        self.create_calls.append({"namespace": namespace, "body": body, **kwargs})
        key = (namespace, body.metadata.name)
        if key in self.store:
            raise ApiException(status=409, reason="Conflict")
        if kwargs.get("dry_run") != "All":
            self.store[key] = body
        return body

    def read_namespaced_limit_range(self, name, namespace, **kwargs):
        try:
            return self.store[(namespace, name)]
        except KeyError:
            raise ApiException(status=404, reason="Not Found") from None


@pytest.fixture
def fake_core_v1():
    return FakeCoreV1Api()


@pytest.fixture
def mock_core_v1():
    """Mock CoreV1Api."""
    return MagicMock()


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def make_command(out, fake_core_v1):
    """Build a CreateLimitRange wired to the fake API and a dummy client config."""
    config_loader = MagicMock(return_value=MagicMock(name="Configuration"))

    def _make(client=None, **fields):
        fields.setdefault("name", "test-limitrange")
        fields.setdefault("namespace", "default")
        api = client if client is not None else fake_core_v1
        return CreateLimitRange(
            LimitRangeOptions(**fields),
            out=out,
            client_factory=lambda _cfg: api,
            config_loader=config_loader,
            namespace_resolver=MagicMock(return_value="resolved-ns"),
        )

    _make.config_loader = config_loader
    return _make


@pytest.fixture(autouse=True)
def _patch_settings():
    """Ensure settings have sensible test defaults."""
    with patch("kubectl_limitrange.cli.settings") as s:
        s.kubeconfig = None
        s.context = None
        s.log_level = "WARNING"
        s.field_manager = "kubectl-create"
        yield s
