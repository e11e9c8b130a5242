"""
Unified error module.
"""

from .errors import (
    ErrorSeverity,
    EggError,
    ConfigurationError,
    MissingNameError,
    DuplicateRuntimeError,
    DuplicateModuleError,
    UnknownNameError,
    UnknownRuntimeError,
    UnknownModuleError,
    ModuleRuntimeError,
    CyclicModuleDependency,
    annotate_module_error,
)

__all__ = [
    "ErrorSeverity",
    "EggError",
    "ConfigurationError",
    "MissingNameError",
    "DuplicateRuntimeError",
    "DuplicateModuleError",
    "UnknownNameError",
    "UnknownRuntimeError",
    "UnknownModuleError",
    "ModuleRuntimeError",
    "CyclicModuleDependency",
    "annotate_module_error",
]
