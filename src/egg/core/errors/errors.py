"""
Unified error types for the runtime.

Every error raised by the runtime itself carries a severity and a stable
code, so the error path can pick a log level and subscribers of the
``'error'`` notification can branch on ``code`` instead of message text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ErrorSeverity(Enum):
    WARNING = "warning"      # runtime keeps going
    ERROR = "error"          # one operation failed
    CRITICAL = "critical"    # wiring is broken (cycles)


@dataclass(eq=False)
class EggError(Exception):
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ------------------ configuration ------------------

@dataclass(eq=False)
class ConfigurationError(EggError):
    code: str = "CONFIGURATION_ERROR"


@dataclass(eq=False)
class MissingNameError(ConfigurationError):
    code: str = "MISSING_NAME"


@dataclass(eq=False)
class DuplicateRuntimeError(ConfigurationError):
    code: str = "DUPLICATE_RUNTIME"


@dataclass(eq=False)
class DuplicateModuleError(ConfigurationError):
    code: str = "DUPLICATE_MODULE"


# ------------------ lookups ------------------

@dataclass(eq=False)
class UnknownNameError(EggError):
    code: str = "UNKNOWN_NAME"


@dataclass(eq=False)
class UnknownRuntimeError(UnknownNameError):
    code: str = "UNKNOWN_RUNTIME"


@dataclass(eq=False)
class UnknownModuleError(UnknownNameError):
    code: str = "UNKNOWN_MODULE"


# ------------------ module execution ------------------

@dataclass(eq=False)
class ModuleRuntimeError(EggError):
    """Diagnostic wrapper for an exception raised inside a module method."""

    code: str = "MODULE_RUNTIME_ERROR"
    module_name: str = ""
    method_name: str = ""

    def __str__(self) -> str:
        where = f"{self.module_name}.{self.method_name}()" if self.method_name else self.module_name
        return f"[{self.code}] {where} - {self.message}"


@dataclass(eq=False)
class CyclicModuleDependency(EggError):
    severity: ErrorSeverity = ErrorSeverity.CRITICAL
    code: str = "CYCLIC_MODULE_DEPENDENCY"
    chain: tuple[str, ...] = ()


def annotate_module_error(exc: BaseException, module_name: str, method_name: str) -> BaseException:
    """Tag ``exc`` with the module and method it escaped from."""
    exc.module_name = module_name  # type: ignore[attr-defined]
    exc.method_name = method_name  # type: ignore[attr-defined]
    exc.add_note(f"{module_name}.{method_name}()")
    return exc
