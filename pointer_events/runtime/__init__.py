"""Pointer event runtime modules.

``pointer_events.runtime.registry`` is imported directly, since it depends on
``pointer_events.tracking``.
"""

from pointer_events.runtime.config import (
    PointerRuntimeConfig,
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    set_runtime_config,
)
from pointer_events.runtime.dispatcher import RuntimePointerDispatcher
from pointer_events.runtime.logging import configure_pointer_logging, setup_pointer_logging
from pointer_events.runtime.normalizer import PointerNormalizer
from pointer_events.runtime.reconciler import ReconcileResult, reconcile
from pointer_events.runtime.source import PointerEventSource
from pointer_events.runtime.time import MicrosClock

__all__ = [
    "MicrosClock",
    "PointerEventSource",
    "PointerNormalizer",
    "PointerRuntimeConfig",
    "ReconcileResult",
    "RuntimePointerDispatcher",
    "configure_pointer_logging",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "reconcile",
    "set_runtime_config",
    "setup_pointer_logging",
]
