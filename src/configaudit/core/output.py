"""Config audit result schema and text formatting.

Provides the normalized result types every scanner plugin produces, so
reporting can consume them uniformly regardless of which evaluator ran.
Models serialize with camelCase aliases matching the report resource schema
(use ``model_dump(by_alias=True)``).

Provides:
- Check: Single normalized, severity-classified check
- Scanner: Identity of the scanner that produced a result
- ConfigAuditSummary: Counts of checks by outcome
- ConfigAuditResult: Complete result of one workload audit
- format_output: Human-readable rendering of a result
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from configaudit.core.severity import Severity


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Check(_ReportModel):
    """Normalized check.

    Attributes:
        id: Identifier derived from finding role and position ("warning 0")
        severity: WARNING or DANGER
        message: Human-readable message from the evaluator
        category: Check category (e.g., "Security")
    """

    id: str
    severity: Severity
    message: str
    category: str


class Scanner(_ReportModel):
    """Scanner identity attached to every result."""

    name: str
    vendor: str
    version: str


class ConfigAuditSummary(_ReportModel):
    """Counts of checks by outcome."""

    pass_count: int = 0
    warning_count: int = 0
    danger_count: int = 0


class ConfigAuditResult(_ReportModel):
    """Result of auditing one workload.

    Attributes:
        update_timestamp: When the result was assembled
        scanner: Scanner name, vendor and version
        summary: Pass/warning/danger counts
        pod_checks: Checks for the whole workload
        container_checks: Checks per container name
    """

    update_timestamp: datetime
    scanner: Scanner
    summary: ConfigAuditSummary
    pod_checks: list[Check] = Field(default_factory=list)
    container_checks: dict[str, list[Check]] = Field(default_factory=dict)


def format_output(result: ConfigAuditResult) -> str:
    """Format an audit result for terminal output.

    Args:
        result: The result to format

    Returns:
        Formatted string with one line per check
    """
    output = []
    output.append(f"{'=' * 60}")
    output.append(
        f"Scanner: {result.scanner.name} {result.scanner.version} ({result.scanner.vendor})"
    )
    output.append(
        f"Warnings: {result.summary.warning_count} | Dangers: {result.summary.danger_count}"
    )
    output.append(f"{'=' * 60}")

    for check in result.pod_checks:
        output.append(f"  [{check.severity.value}] {check.id} ({check.category}): {check.message}")

    for container, checks in result.container_checks.items():
        output.append(f"  Container {container}:")
        for check in checks:
            output.append(f"    [{check.severity.value}] {check.id}: {check.message}")

    output.append(f"{'=' * 60}")
    return "\n".join(output)
