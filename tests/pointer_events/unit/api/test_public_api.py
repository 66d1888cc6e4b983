from __future__ import annotations

import ast
from pathlib import Path

import pointer_events
from pointer_events.api import create_pointer_dispatcher, create_pointer_events_registry
from pointer_events.runtime.config import load_runtime_config
from pointer_events.runtime.dispatcher import RuntimePointerDispatcher
from pointer_events.runtime.registry import PointerEventsRegistry

PACKAGE_ROOT = Path(__file__).resolve().parents[4] / "pointer_events"


def test_api_modules_do_not_import_runtime_at_module_level() -> None:
    violations: list[str] = []
    for path in sorted((PACKAGE_ROOT / "api").glob("*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in tree.body:
            if isinstance(node, ast.ImportFrom) and node.module is not None:
                if node.module.startswith("pointer_events.runtime"):
                    violations.append(f"{path.name} -> {node.module}")
    assert not violations, "api must import runtime lazily:\n" + "\n".join(violations)


def test_factories_return_runtime_implementations() -> None:
    dispatcher = create_pointer_dispatcher(default_priority=50)
    assert isinstance(dispatcher, RuntimePointerDispatcher)
    assert dispatcher.default_priority == 50

    registry = create_pointer_events_registry(config=load_runtime_config(env={}))
    assert isinstance(registry, PointerEventsRegistry)


def test_top_level_exports() -> None:
    for name in pointer_events.__all__:
        assert hasattr(pointer_events, name)
