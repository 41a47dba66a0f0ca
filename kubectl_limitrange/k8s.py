import json
import logging

import urllib3
from kubernetes import client, config
from kubernetes.client import CoreV1Api, V1LimitRange
from kubernetes.client.exceptions import ApiException

from .errors import ConfigurationError, SubmissionError

logger = logging.getLogger(__name__)

SERVICE_ACCOUNT_NAMESPACE = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"
DEFAULT_NAMESPACE = "default"
DRY_RUN_ALL = "All"


# ---------------------------------------------------------------------------
# Namespace resolution
# ---------------------------------------------------------------------------

def _in_cluster_namespace() -> str:
    try:
        with open(SERVICE_ACCOUNT_NAMESPACE) as f:
            namespace = f.read().strip()
    except FileNotFoundError:
        return DEFAULT_NAMESPACE
    return namespace or DEFAULT_NAMESPACE


def current_namespace(kubeconfig: str | None = None, context: str | None = None) -> str:
    """Namespace of the selected kubeconfig context.

    Without any kubeconfig the service-account namespace is used when running
    in a pod, and ``default`` otherwise. An explicit ``kubeconfig`` or
    ``context`` that cannot be loaded is an error.
    """
    try:
        contexts, active = config.list_kube_config_contexts(config_file=kubeconfig)
    except config.ConfigException as e:
        if kubeconfig or context:
            raise ConfigurationError(f"failed to get current namespace: {e}") from e
        logger.debug("No usable kubeconfig (%s), falling back to in-cluster namespace", e)
        return _in_cluster_namespace()

    selected = active
    if context:
        selected = next((c for c in contexts if c.get("name") == context), None)
        if selected is None:
            raise ConfigurationError(
                f"failed to get current namespace: context {context!r} not found in kubeconfig"
            )

    namespace = ((selected or {}).get("context") or {}).get("namespace")
    return namespace or DEFAULT_NAMESPACE


# ---------------------------------------------------------------------------
# Client construction
# ---------------------------------------------------------------------------

def load_client_configuration(
    kubeconfig: str | None = None, context: str | None = None
) -> client.Configuration:
    """Load cluster credentials from the same source ``current_namespace`` reads.

    The kubeconfig wins; in-cluster config is only used when there is no
    usable kubeconfig and none was asked for explicitly.
    """
    cfg = client.Configuration()
    try:
        config.load_kube_config(
            config_file=kubeconfig,
            context=context,
            client_configuration=cfg,
            persist_config=False,
        )
    except (config.ConfigException, OSError) as e:
        if kubeconfig or context:
            raise ConfigurationError(f"failed to get Kubernetes client config: {e}") from e
        logger.debug("No usable kubeconfig (%s), trying in-cluster config", e)
        try:
            config.load_incluster_config(client_configuration=cfg)
        except config.ConfigException as incluster_error:
            raise ConfigurationError(f"failed to get Kubernetes client config: {e}") from incluster_error
        logger.info("Loaded in-cluster K8s config")
        return _single_attempt(cfg)

    logger.info("Loaded local kubeconfig")
    return _single_attempt(cfg)


def _single_attempt(cfg: client.Configuration) -> client.Configuration:
    # single attempt, no urllib3 retries
    cfg.retries = 0
    return cfg


def new_core_v1(configuration: client.Configuration) -> CoreV1Api:
    return CoreV1Api(client.ApiClient(configuration))


# ---------------------------------------------------------------------------
# LimitRange helpers
# ---------------------------------------------------------------------------

def _api_error_message(e: ApiException) -> str:
    if e.body:
        try:
            message = json.loads(e.body).get("message")
        except (ValueError, AttributeError):
            message = None
        if message:
            return message
    return f"({e.status}) {e.reason}"


def create_limit_range(
    api: CoreV1Api,
    limit_range: V1LimitRange,
    *,
    dry_run: bool = False,
    field_manager: str | None = None,
) -> V1LimitRange | None:
    """Create ``limit_range``; with ``dry_run`` the server validates without persisting."""
    ns = limit_range.metadata.namespace
    name = limit_range.metadata.name
    kwargs = {}
    if dry_run:
        kwargs["dry_run"] = DRY_RUN_ALL
    if field_manager:
        kwargs["field_manager"] = field_manager

    try:
        created = api.create_namespaced_limit_range(namespace=ns, body=limit_range, **kwargs)
    except ApiException as e:
        raise SubmissionError(
            f"failed to create LimitRange: {_api_error_message(e)}", status=e.status
        ) from e
    except urllib3.exceptions.HTTPError as e:
        raise SubmissionError(f"failed to create LimitRange: {e}") from e

    if dry_run:
        logger.info("Validated LimitRange %s in %s (server dry run)", name, ns)
    else:
        logger.info("Created LimitRange %s in %s", name, ns)
    return created
