"""Telemetry configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Dict

from opentelemetry.sdk.resources import Resource
from pydantic import BaseModel, Field, model_validator

_TRUTHY = {"1", "true", "yes", "on"}

# field -> env vars, first one set wins
_FLAG_ENV = {
    "enable_tracing": ("BATTLESHIPS_ENABLE_TRACING", "OTEL_TRACES_ENABLED"),
    "enable_metrics": ("BATTLESHIPS_ENABLE_METRICS", "OTEL_METRICS_ENABLED"),
    "enable_logging": ("BATTLESHIPS_ENABLE_LOGGING", "OTEL_LOGS_ENABLED"),
}

# field -> (signal specific env var, suffix appended to OTEL_EXPORTER_OTLP_ENDPOINT)
_ENDPOINT_ENV = {
    "otlp_traces_endpoint": ("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT", "v1/traces"),
    "otlp_metrics_endpoint": ("OTEL_EXPORTER_OTLP_METRICS_ENDPOINT", "v1/metrics"),
    "otlp_logs_endpoint": ("OTEL_EXPORTER_OTLP_LOGS_ENDPOINT", "v1/logs"),
}

_ENABLED_BY_ENDPOINT = {
    "otlp_traces_endpoint": "enable_tracing",
    "otlp_metrics_endpoint": "enable_metrics",
    "otlp_logs_endpoint": "enable_logging",
}


def _flag_from_env(names: tuple[str, ...]) -> bool | None:
    for name in names:
        value = os.getenv(name)
        if value is not None:
            return value.strip().lower() in _TRUTHY
    return None


def _endpoint_from_env(env_name: str, suffix: str) -> str | None:
    explicit = os.getenv(env_name)
    if explicit:
        return explicit
    base = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    return f"{base.rstrip('/')}/{suffix}" if base else None


def _resource_attributes_from_env() -> dict[str, str]:
    """Parse ``OTEL_RESOURCE_ATTRIBUTES``; malformed pairs are skipped."""
    attrs: dict[str, str] = {}
    for part in os.getenv("OTEL_RESOURCE_ATTRIBUTES", "").split(","):
        key, sep, value = part.partition("=")
        if sep and key.strip():
            attrs[key.strip()] = value.strip()
    return attrs


class TelemetryConfig(BaseModel):
    """Which OpenTelemetry signals to export, and where."""

    enable_tracing: bool = False
    enable_metrics: bool = False
    enable_logging: bool = False
    otlp_traces_endpoint: str | None = None
    otlp_metrics_endpoint: str | None = None
    otlp_logs_endpoint: str | None = None
    service_name: str = "battleships"
    service_namespace: str = "game"
    resource_attributes: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _enable_signals_with_endpoints(self) -> "TelemetryConfig":
        for endpoint, flag in _ENABLED_BY_ENDPOINT.items():
            if getattr(self, endpoint):
                setattr(self, flag, True)
        return self

    def resource(self) -> Resource:
        """OpenTelemetry resource shared by the tracer, meter and log providers."""
        return Resource.create(
            {
                "service.name": self.service_name,
                "service.namespace": self.service_namespace,
                **self.resource_attributes,
            }
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "TelemetryConfig":
        """Construct config from `BATTLESHIPS_*` and `OTEL_*` env vars; overrides win."""

        data: Dict[str, Any] = {}
        for field, env_names in _FLAG_ENV.items():
            flag = _flag_from_env(env_names)
            if flag is not None:
                data[field] = flag
        for field, (env_name, suffix) in _ENDPOINT_ENV.items():
            endpoint = _endpoint_from_env(env_name, suffix)
            if endpoint:
                data[field] = endpoint
        if os.getenv("OTEL_SERVICE_NAME"):
            data["service_name"] = os.environ["OTEL_SERVICE_NAME"]
        if os.getenv("OTEL_SERVICE_NAMESPACE"):
            data["service_namespace"] = os.environ["OTEL_SERVICE_NAMESPACE"]
        resource_attributes = _resource_attributes_from_env()
        if resource_attributes:
            data["resource_attributes"] = resource_attributes

        data.update(overrides)
        return cls(**data)


@lru_cache(maxsize=1)
def load_telemetry_config() -> TelemetryConfig:
    """Load and cache telemetry config from the environment."""

    return TelemetryConfig.from_env()


def init_telemetry(config: TelemetryConfig | None = None) -> TelemetryConfig:
    """Switch on the exporters the config enables; the rest stay no-op."""

    from .logger import init_logging
    from .metrics import init_metrics
    from .tracer import init_tracing

    resolved = config or load_telemetry_config()

    if resolved.enable_tracing:
        init_tracing(resolved)
    if resolved.enable_metrics:
        init_metrics(resolved)
    if resolved.enable_logging:
        init_logging(resolved)
    return resolved
