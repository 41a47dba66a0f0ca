import logging
import sys
from collections.abc import Callable
from dataclasses import replace
from typing import TextIO

from kubernetes import client
from kubernetes.client import CoreV1Api

from .builder import build_limit_range
from .errors import ConfigurationError, LimitRangeError, StageError
from .k8s import create_limit_range, current_namespace, load_client_configuration, new_core_v1
from .options import DryRunMode, LimitRangeOptions, OutputFormat, validate
from .output import render

logger = logging.getLogger(__name__)

ClientFactory = Callable[[client.Configuration], CoreV1Api]
ConfigLoader = Callable[[str | None, str | None], client.Configuration]
NamespaceResolver = Callable[[str | None, str | None], str]


class CreateLimitRange:
    """Complete, validate and run a single ``create limitrange`` request.

    The cluster collaborators are injected so tests can substitute a fake API
    without touching validation or object construction.
    """

    def __init__(
        self,
        options: LimitRangeOptions,
        *,
        out: TextIO | None = None,
        client_factory: ClientFactory | None = None,
        config_loader: ConfigLoader | None = None,
        namespace_resolver: NamespaceResolver | None = None,
        kubeconfig: str | None = None,
        context: str | None = None,
        field_manager: str | None = None,
    ) -> None:
        self.options = options
        self.out = out if out is not None else sys.stdout
        self.client_factory = client_factory or new_core_v1
        self.config_loader = config_loader or load_client_configuration
        self.namespace_resolver = namespace_resolver or current_namespace
        self.kubeconfig = kubeconfig
        self.context = context
        self.field_manager = field_manager

    def complete(self) -> None:
        if not self.options.namespace:
            namespace = self.namespace_resolver(self.kubeconfig, self.context)
            self.options = replace(self.options, namespace=namespace)

    def validate(self) -> None:
        validate(self.options)

    def run(self) -> None:
        self.validate()
        mode = DryRunMode.parse(self.options.dry_run)
        limit_range = build_limit_range(self.options)

        if mode is DryRunMode.CLIENT:
            self._print(render(limit_range, self.options.output))
            return

        if mode is DryRunMode.SERVER:
            # fail on a bad -o before the round trip
            OutputFormat.parse(self.options.output)

        api = self._core_v1()
        created = create_limit_range(
            api,
            limit_range,
            dry_run=mode is DryRunMode.SERVER,
            field_manager=self.field_manager,
        )

        if mode is DryRunMode.SERVER:
            self._print(render(created if created is not None else limit_range, self.options.output))
            return

        self._print(f'limitrange.core "{self.options.name}" created\n')

    def execute(self) -> None:
        """Run every stage, labelling the first failure with the stage it came from."""
        for stage, step in (
            ("completion", self.complete),
            ("validation", self.validate),
            ("execution", self.run),
        ):
            try:
                step()
            except LimitRangeError as e:
                logger.debug("%s stage failed", stage, exc_info=True)
                raise StageError(stage, e) from e

    def _core_v1(self) -> CoreV1Api:
        configuration = self.config_loader(self.kubeconfig, self.context)
        try:
            return self.client_factory(configuration)
        except Exception as e:
            raise ConfigurationError(f"failed to create Kubernetes clientset: {e}") from e

    def _print(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()
