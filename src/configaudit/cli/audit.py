"""AsyncClick CLI for config audit commands.

Provides user-facing commands:
- job-spec: Print the scan job pod spec and secrets for a manifest
- parse: Convert conftest JSON output into a config audit result
- version: Print the scanner version resolved from configuration
"""

import logging

import asyncclick as click
import structlog
import yaml

from configaudit.core.config import get_version_from_image_ref, load_config
from configaudit.core.errors import ConfigAuditError
from configaudit.core.output import format_output
from configaudit.kube.object import GroupVersionKind, to_serializable
from configaudit.plugins.conftest import ConftestPlugin


def get_plugin() -> ConftestPlugin:
    """Create the conftest plugin from environment configuration."""
    return ConftestPlugin(config=load_config())


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show info-level log events")
@click.pass_context
async def cli(ctx, verbose: bool):
    """configaudit - Conftest config audits for Kubernetes workloads"""
    ctx.ensure_object(dict)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.INFO if verbose else logging.WARNING
        )
    )


@cli.command("job-spec")
@click.argument("workload", type=click.File("r"))
@click.option("--api-version", default=None, help="apiVersion to stamp (default: from manifest)")
@click.option("--kind", default=None, help="Kind to stamp (default: from manifest)")
@click.pass_context
async def job_spec(ctx, workload, api_version: str | None, kind: str | None):
    """Print the scan job pod spec and secrets for a workload manifest.

    Examples:
        configaudit job-spec deployment.yaml
        configaudit job-spec pod.yaml --api-version v1 --kind Pod
    """
    try:
        manifest = yaml.safe_load(workload)
    except yaml.YAMLError as e:
        click.echo(f"[-] Invalid manifest: {e}", err=True)
        ctx.exit(1)

    if not isinstance(manifest, dict):
        click.echo("[-] Manifest must be a single YAML mapping", err=True)
        ctx.exit(1)

    api_version = api_version or manifest.get("apiVersion")
    kind = kind or manifest.get("kind")
    if not api_version or not kind:
        click.echo("[-] apiVersion and kind are required (in manifest or via options)", err=True)
        ctx.exit(1)

    gvk = GroupVersionKind.from_api_version(api_version, kind)

    try:
        pod_spec, secrets = get_plugin().get_scan_job_spec(manifest, gvk)
    except ConfigAuditError as e:
        click.echo(f"[-] Error building scan job: {e}", err=True)
        ctx.exit(1)

    click.echo(
        yaml.safe_dump(
            {
                "podSpec": to_serializable(pod_spec),
                "secrets": [to_serializable(secret) for secret in secrets],
            },
            default_flow_style=False,
        )
    )


@cli.command()
@click.argument("logs", type=click.File("rb"), default="-")
@click.option(
    "--format", "output_format",
    type=click.Choice(["json", "text"]),
    default="json",
    help="Output format",
)
@click.pass_context
async def parse(ctx, logs, output_format: str):
    """Convert conftest JSON output into a config audit result.

    Examples:
        configaudit parse conftest.json
        kubectl logs job/scan -c conftest | configaudit parse --format text
    """
    try:
        result = get_plugin().parse_config_audit_result(logs)
    except ConfigAuditError as e:
        click.echo(f"[-] Error parsing conftest output: {e}", err=True)
        ctx.exit(1)

    if output_format == "text":
        click.echo(format_output(result))
    else:
        click.echo(result.model_dump_json(by_alias=True, indent=2))


@cli.command()
@click.pass_context
async def version(ctx):
    """Print the scanner version resolved from configuration."""
    try:
        config = load_config()
        click.echo(get_version_from_image_ref(config.get_conftest_image_ref()))
    except ConfigAuditError as e:
        click.echo(f"[-] {e}", err=True)
        ctx.exit(1)


if __name__ == "__main__":
    cli()
