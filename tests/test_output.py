"""Tests for kubectl_limitrange.output."""

import json

import pytest
import yaml
from kubernetes.client import V1LimitRange, V1LimitRangeItem, V1LimitRangeSpec, V1ObjectMeta

from kubectl_limitrange.builder import build_limit_range
from kubectl_limitrange.errors import UnsupportedOutputFormatError
from kubectl_limitrange.options import LimitRangeOptions
from kubectl_limitrange.output import ensure_type_meta, render


@pytest.fixture
def limit_range():
    return build_limit_range(
        LimitRangeOptions(name="test-limitrange", namespace="default", max_cpu="1", min_memory="128Mi")
    )


class TestEnsureTypeMeta:
    def test_fills_missing_type_meta(self):
        lr = V1LimitRange(
            metadata=V1ObjectMeta(name="bare"),
            spec=V1LimitRangeSpec(limits=[V1LimitRangeItem(type="Container")]),
        )
        ensure_type_meta(lr)
        assert lr.api_version == "v1"
        assert lr.kind == "LimitRange"

    def test_fills_when_only_kind_missing(self):
        lr = V1LimitRange(api_version="v1", metadata=V1ObjectMeta(name="bare"))
        ensure_type_meta(lr)
        assert lr.kind == "LimitRange"

    def test_keeps_existing_type_meta(self, limit_range):
        assert ensure_type_meta(limit_range) is limit_range
        assert limit_range.api_version == "v1"


class TestRender:
    def test_yaml(self, limit_range):
        text = render(limit_range, "yaml")
        assert "apiVersion: v1" in text
        assert "kind: LimitRange" in text
        assert "name: test-limitrange" in text
        assert "namespace: default" in text

        data = yaml.safe_load(text)
        assert data["spec"]["limits"][0] == {
            "type": "Container",
            "max": {"cpu": "1"},
            "min": {"memory": "128Mi"},
        }

    def test_json(self, limit_range):
        text = render(limit_range, "json")
        assert '"apiVersion": "v1"' in text
        assert '"kind": "LimitRange"' in text
        assert text.endswith("}\n")

        data = json.loads(text)
        assert data["metadata"] == {"name": "test-limitrange", "namespace": "default"}
        assert data["spec"]["limits"][0]["max"] == {"cpu": "1"}

    def test_render_fills_type_meta(self):
        lr = V1LimitRange(metadata=V1ObjectMeta(name="bare", namespace="default"))
        data = yaml.safe_load(render(lr, "yaml"))
        assert data["apiVersion"] == "v1"
        assert data["kind"] == "LimitRange"

    @pytest.mark.parametrize("fmt", ["", "xml", "wide"])
    def test_unsupported_format(self, limit_range, fmt):
        with pytest.raises(UnsupportedOutputFormatError, match=f"unsupported output format: {fmt}"):
            render(limit_range, fmt)
