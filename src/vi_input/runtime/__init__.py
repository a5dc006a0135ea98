"""Runtime services: telemetry and environment-driven configuration."""

from . import telemetry

__all__ = ["telemetry"]
