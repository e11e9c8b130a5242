"""
Application layer: runtime container, directory, module registry, sandboxed
context and interaction delegation.
"""

from .context import SandboxedContext
from .delegate import INTERACTION_KINDS, DelegatedEvent, InteractionDelegate, InteractionKind
from .directory import RuntimeDirectory
from .guard import guard_instance
from .registries import ModuleRegistry, load_modules
from .runtime import ERROR_EVENT, Runtime

__all__ = [
    "SandboxedContext",
    "INTERACTION_KINDS",
    "DelegatedEvent",
    "InteractionDelegate",
    "InteractionKind",
    "RuntimeDirectory",
    "guard_instance",
    "ModuleRegistry",
    "load_modules",
    "ERROR_EVENT",
    "Runtime",
]
