"""
Registry for tasks. Tasks self-register via a decorator.
No CLI changes needed when adding a new task.

To add a task: create `tasks/my_task.py` with @register_task("name", description="...") on the class.
"""
import importlib
import pkgutil
from typing import Any

# name -> {cls, description, constructor_params, param_defaults}
TASKS: dict[str, dict[str, Any]] = {}

_tasks_loaded = False


def _load_tasks():
    global _tasks_loaded
    if _tasks_loaded:
        return
    import augtasks.tasks as tasks_pkg
    for importer, modname, _ in pkgutil.iter_modules(tasks_pkg.__path__, prefix="augtasks.tasks."):
        if "base" not in modname:
            importlib.import_module(modname)
    _tasks_loaded = True


def register_task(
    name: str,
    *,
    description: str = "",
    constructor_params: list[str] | None = None,
    param_defaults: dict[str, Any] | None = None,
):
    """Register a task class. Use as @register_task('copy', description='...', constructor_params=[...])."""

    def decorator(cls):
        TASKS[name] = {
            "cls": cls,
            "description": description,
            "constructor_params": constructor_params or [],
            "param_defaults": param_defaults or {},
        }
        return cls

    return decorator


def get_task(name: str):
    """Get task class and metadata. Loads tasks on first call."""
    _load_tasks()
    return TASKS.get(name)


def all_task_names() -> list[str]:
    _load_tasks()
    return list(TASKS.keys())


def all_task_param_keys() -> set[str]:
    """Union of constructor params from all tasks (for sweep config)."""
    _load_tasks()
    keys: set[str] = set()
    for info in TASKS.values():
        keys.update(info.get("constructor_params", []))
    return keys


def param_defaults_from_tasks() -> dict[str, Any]:
    """Merge param_defaults from all tasks (for sweep defaults)."""
    _load_tasks()
    merged: dict[str, Any] = {}
    for info in TASKS.values():
        merged.update(info.get("param_defaults", {}))
    return merged
