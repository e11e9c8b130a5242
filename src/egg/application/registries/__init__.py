from .module_loader import load_modules, resolve_factory
from .module_registry import (
    ModuleFactory,
    ModuleInstanceRecord,
    ModuleRegistration,
    ModuleRegistry,
    module_selector,
)

__all__ = [
    "ModuleFactory",
    "ModuleInstanceRecord",
    "ModuleRegistration",
    "ModuleRegistry",
    "module_selector",
    "load_modules",
    "resolve_factory",
]
