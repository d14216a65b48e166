"""Public telemetry helpers for Battleships."""

from __future__ import annotations

from .config import TelemetryConfig, init_telemetry, load_telemetry_config
from .logger import init_console_logging, init_logging
from .metrics import get_meter, init_metrics, record_game_duration, record_game_metric
from .tracer import get_tracer, init_tracing, shutdown_tracing

__all__ = [
    "TelemetryConfig",
    "get_tracer",
    "get_meter",
    "record_game_metric",
    "record_game_duration",
    "init_console_logging",
    "init_logging",
    "init_tracing",
    "init_metrics",
    "shutdown_tracing",
    "load_telemetry_config",
    "init_telemetry",
]
