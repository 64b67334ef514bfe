"""Runtime services shared by the codec, controller and hosts."""

from . import telemetry

__all__ = ["telemetry"]
