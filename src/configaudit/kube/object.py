"""Helpers for Kubernetes objects handed to scanner plugins.

Objects are either ``kubernetes.client`` models (e.g. ``V1Deployment``) or
plain manifest dicts as loaded from YAML.
"""

from dataclasses import dataclass
from typing import Any

import structlog
import yaml
from kubernetes.client import (
    ApiClient,
    V1Affinity,
    V1NodeAffinity,
    V1NodeSelector,
    V1NodeSelectorRequirement,
    V1NodeSelectorTerm,
)

from configaudit.core.errors import SerializationError

logger = structlog.get_logger()


@dataclass(frozen=True)
class GroupVersionKind:
    """Group, version and kind of a Kubernetes resource."""

    group: str
    version: str
    kind: str

    @property
    def api_version(self) -> str:
        """apiVersion as written in manifests ("apps/v1", or "v1" for the core group)."""
        return f"{self.group}/{self.version}" if self.group else self.version

    @classmethod
    def from_api_version(cls, api_version: str, kind: str) -> "GroupVersionKind":
        """Build from a manifest's apiVersion and kind.

        Example:
            >>> GroupVersionKind.from_api_version("apps/v1", "Deployment")
            GroupVersionKind(group='apps', version='v1', kind='Deployment')
        """
        if "/" in api_version:
            group, version = api_version.split("/", 1)
        else:
            group, version = "", api_version
        return cls(group=group, version=version, kind=kind)


def set_group_version_kind(obj: Any, gvk: GroupVersionKind) -> None:
    """Stamp apiVersion and kind onto an object in place.

    Objects read through typed API calls usually come back without type
    metadata; it has to be set before serializing.

    Raises:
        SerializationError: If the object cannot carry type metadata
    """
    if isinstance(obj, dict):
        obj["apiVersion"] = gvk.api_version
        obj["kind"] = gvk.kind
    elif hasattr(obj, "api_version") and hasattr(obj, "kind"):
        obj.api_version = gvk.api_version
        obj.kind = gvk.kind
    else:
        raise SerializationError(
            f"object of type {type(obj).__name__} does not carry apiVersion/kind"
        )


def to_serializable(obj: Any) -> Any:
    """Convert a Kubernetes model (or dict of models) to plain JSON-compatible data."""
    return ApiClient().sanitize_for_serialization(obj)


def to_yaml(obj: Any) -> str:
    """Serialize a Kubernetes object to YAML.

    Raises:
        SerializationError: If the object cannot be represented as YAML
    """
    try:
        return yaml.safe_dump(to_serializable(obj), default_flow_style=False)
    except (yaml.YAMLError, AttributeError, TypeError, ValueError) as e:
        logger.error("workload_serialization_failed", error=str(e))
        raise SerializationError(f"marshaling workload to YAML: {e}") from e


def linux_node_affinity() -> V1Affinity:
    """Node affinity restricting pods to Linux nodes."""
    return V1Affinity(
        node_affinity=V1NodeAffinity(
            required_during_scheduling_ignored_during_execution=V1NodeSelector(
                node_selector_terms=[
                    V1NodeSelectorTerm(
                        match_expressions=[
                            V1NodeSelectorRequirement(
                                key="kubernetes.io/os",
                                operator="In",
                                values=["linux"],
                            )
                        ]
                    )
                ]
            )
        )
    )
