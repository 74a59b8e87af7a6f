"""Conftest-backed config audit plugin for Kubernetes workloads."""

__version__ = "0.1.0"
