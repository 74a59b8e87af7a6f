"""Base plugin protocol for config audit scanners.

A plugin packages a workload for an external evaluator running in a scan job
and interprets that job's output. Scheduling, waiting for completion and log
retrieval belong to the orchestrator.
"""

from typing import IO, Any, Protocol, runtime_checkable

from kubernetes.client import V1PodSpec, V1Secret

from configaudit.core.output import ConfigAuditResult
from configaudit.kube.object import GroupVersionKind


@runtime_checkable
class Plugin(Protocol):
    """Protocol for config audit scanner plugins."""

    def get_scan_job_spec(
        self, obj: Any, gvk: GroupVersionKind
    ) -> tuple[V1PodSpec, list[V1Secret]]:
        """Build the pod spec and supporting secrets of a scan job for obj."""
        ...

    def get_container_name(self) -> str:
        """Name of the container whose logs hold the evaluator output."""
        ...

    def parse_config_audit_result(self, logs: IO) -> ConfigAuditResult:
        """Convert scan job logs into a config audit result."""
        ...
