"""
Core layer: event bus, key/value store and errors.
"""

from .data import Dictionary, GlobalsView
from .dispatcher import Dispatcher, EventKey, Handler
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
)

__all__ = [
    # data
    "Dictionary",
    "GlobalsView",
    # bus
    "Dispatcher",
    "EventKey",
    "Handler",
    # errors
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
]
