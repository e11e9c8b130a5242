# egg/__init__.py
"""
egg - client-side module runtime

- named runtimes, each with its own event bus, global store and module registry
- lazily started modules behind a sandboxed context
- interaction delegation from an element tree to namespaced bus events
- per-module error containment (raise in debug, ``'error'`` event otherwise)
"""

from __future__ import annotations

from typing import Any

__version__ = "1.0.0"


def create(config: Any = None, **kwargs: Any):
    """Create a runtime in the process-wide directory."""
    from egg.application.directory import RuntimeDirectory

    return RuntimeDirectory.instance().create(config, **kwargs)


def get(name: str):
    """Look a runtime up in the process-wide directory."""
    from egg.application.directory import RuntimeDirectory

    return RuntimeDirectory.instance().get(name)


def reset(name: str):
    from egg.application.directory import RuntimeDirectory

    return RuntimeDirectory.instance().reset(name)


def destroy(name: str) -> None:
    from egg.application.directory import RuntimeDirectory

    RuntimeDirectory.instance().destroy(name)


# 延迟导入以避免循环依赖
def __getattr__(name: str):
    if name in ("Runtime", "ERROR_EVENT"):
        from egg.application import runtime

        return getattr(runtime, name)
    if name == "RuntimeDirectory":
        from egg.application.directory import RuntimeDirectory
        return RuntimeDirectory
    if name == "SandboxedContext":
        from egg.application.context import SandboxedContext
        return SandboxedContext
    if name in ("InteractionDelegate", "InteractionKind", "DelegatedEvent", "INTERACTION_KINDS"):
        from egg.application import delegate

        return getattr(delegate, name)
    if name in ("Dispatcher", "EventKey"):
        from egg.core import dispatcher

        return getattr(dispatcher, name)
    if name == "Dictionary":
        from egg.core.data import Dictionary
        return Dictionary
    if name == "SoupDocument":
        from egg.infrastructure.dom import SoupDocument
        return SoupDocument
    if name == "RuntimeConfig":
        from egg.config import RuntimeConfig
        return RuntimeConfig

    raise AttributeError(f"module 'egg' has no attribute '{name}'")


__all__ = [
    "__version__",
    "create",
    "get",
    "reset",
    "destroy",
    "Runtime",
    "ERROR_EVENT",
    "RuntimeDirectory",
    "SandboxedContext",
    "InteractionDelegate",
    "InteractionKind",
    "DelegatedEvent",
    "INTERACTION_KINDS",
    "Dispatcher",
    "EventKey",
    "Dictionary",
    "SoupDocument",
    "RuntimeConfig",
]
