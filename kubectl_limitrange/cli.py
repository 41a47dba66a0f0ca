import logging
import sys
from typing import Annotated

import typer

from .command import CreateLimitRange
from .config import settings
from .errors import StageError
from .options import LimitRangeOptions

EXAMPLES = """
Examples:

\b
  # Create a LimitRange with CPU and memory limits in the specified namespace
  kubectl create limitrange my-limitrange --namespace=my-namespace --max-cpu=1 --min-cpu=100m --default-cpu=500m --default-request-cpu=500m --max-memory=500Mi --min-memory=100Mi

\b
  # Print a LimitRange with only CPU limits instead of creating it
  kubectl create limitrange my-cpu-limit --namespace=my-namespace --max-cpu=2 --min-cpu=500m --default-cpu=1 --default-request-cpu=500m --dry-run=client -o yaml
"""

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def limitrange(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Name of the LimitRange.", show_default=False)],
    namespace: Annotated[
        str, typer.Option("--namespace", "-n", help="Namespace; defaults to the current kubeconfig context's.")
    ] = "",
    max_cpu: Annotated[str, typer.Option("--max-cpu", help="Maximum CPU limit for containers.")] = "",
    min_cpu: Annotated[str, typer.Option("--min-cpu", help="Minimum CPU limit for containers.")] = "",
    default_cpu: Annotated[str, typer.Option("--default-cpu", help="Default CPU limit for containers.")] = "",
    default_request_cpu: Annotated[
        str, typer.Option("--default-request-cpu", help="Default CPU request for containers.")
    ] = "",
    max_memory: Annotated[str, typer.Option("--max-memory", help="Maximum memory limit for containers.")] = "",
    min_memory: Annotated[str, typer.Option("--min-memory", help="Minimum memory limit for containers.")] = "",
    dry_run: Annotated[
        str,
        typer.Option(
            "--dry-run",
            help="Must be 'client' or 'server'. If set, only print the object that would be sent without persisting it.",
        ),
    ] = "",
    output: Annotated[str, typer.Option("--output", "-o", help="Output format. One of: yaml|json")] = "",
    kubeconfig: Annotated[str | None, typer.Option("--kubeconfig", help="Path to the kubeconfig file.")] = None,
    context: Annotated[str | None, typer.Option("--context", help="Kubeconfig context to use.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Create a LimitRange resource."""
    setup_logging(verbose)

    cmd = CreateLimitRange(
        LimitRangeOptions(
            name=name,
            namespace=namespace,
            max_cpu=max_cpu,
            min_cpu=min_cpu,
            default_cpu=default_cpu,
            default_request_cpu=default_request_cpu,
            max_memory=max_memory,
            min_memory=min_memory,
            dry_run=dry_run,
            output=output,
        ),
        kubeconfig=kubeconfig or settings.kubeconfig,
        context=context or settings.context,
        field_manager=settings.field_manager,
    )
    try:
        cmd.execute()
    except StageError as e:
        prog = ctx.find_root().info_name or "kubectl-create-limitrange"
        typer.echo(f"Error executing {prog}: {e}", err=True)
        raise typer.Exit(code=1) from e


# kubectl-create-limitrange NAME [flags]
# Click's formatter honours \b, which keeps the example lines unwrapped
app = typer.Typer(add_completion=False, pretty_exceptions_enable=False, rich_markup_mode=None)
app.command(epilog=EXAMPLES)(limitrange)

# kubectl-lr create limitrange NAME [flags]
lr_app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    rich_markup_mode=None,
    no_args_is_help=True,
    help="Work with LimitRange resources.",
)
lr_create = typer.Typer(no_args_is_help=True, rich_markup_mode=None, help="Create a resource.")
lr_create.command("limitrange", epilog=EXAMPLES)(limitrange)
lr_app.add_typer(lr_create, name="create")


def main() -> None:
    app(prog_name="kubectl-create-limitrange")


def lr_main() -> None:
    lr_app(prog_name="kubectl-lr")


if __name__ == "__main__":
    main()
