"""Centralized runtime configuration for pointer event processing."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from pointer_events.api.dispatch import DEFAULT_PRIORITY


@dataclass(frozen=True, slots=True)
class PointerDispatchConfig:
    default_priority: int
    trace_enabled: bool
    trace_buffer_capacity: int


@dataclass(frozen=True, slots=True)
class PointerNormalizerConfig:
    max_touch_slots: int


@dataclass(frozen=True, slots=True)
class PointerTrackingConfig:
    stroke_timeout_ms: int
    max_pending_estimates: int


@dataclass(frozen=True, slots=True)
class PointerRuntimeConfig:
    dispatch: PointerDispatchConfig
    normalizer: PointerNormalizerConfig
    tracking: PointerTrackingConfig
    log_level: str


_RUNTIME_CONFIG: ContextVar[PointerRuntimeConfig | None] = ContextVar(
    "pointer_runtime_config", default=None
)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def resolve_log_level_name(
    default: str = "INFO",
    *,
    env: Mapping[str, str] | None = None,
) -> str:
    """Resolve log level, preferring the POINTER_ prefixed variable."""
    value = _raw("POINTER_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> PointerRuntimeConfig:
    return PointerRuntimeConfig(
        dispatch=PointerDispatchConfig(
            default_priority=_int("POINTER_DISPATCH_DEFAULT_PRIORITY", DEFAULT_PRIORITY, env=env),
            trace_enabled=_flag("POINTER_TRACE_ENABLED", False, env=env),
            trace_buffer_capacity=_int("POINTER_TRACE_BUFFER_CAP", 1_000, minimum=10, env=env),
        ),
        normalizer=PointerNormalizerConfig(
            max_touch_slots=_int("POINTER_MAX_TOUCH_SLOTS", 256, minimum=1, env=env),
        ),
        tracking=PointerTrackingConfig(
            stroke_timeout_ms=_int("POINTER_STROKE_TIMEOUT_MS", 5_000, minimum=0, env=env),
            max_pending_estimates=_int("POINTER_MAX_PENDING_ESTIMATES", 256, minimum=1, env=env),
        ),
        log_level=resolve_log_level_name(env=env),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> PointerRuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: PointerRuntimeConfig) -> PointerRuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> PointerRuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "PointerDispatchConfig",
    "PointerNormalizerConfig",
    "PointerRuntimeConfig",
    "PointerTrackingConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "resolve_log_level_name",
    "set_runtime_config",
]
