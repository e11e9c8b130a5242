"""
Runtime container: one dispatcher, one global store and one module registry,
identified by name inside a :class:`~egg.application.directory.RuntimeDirectory`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from egg.application.ports import ElementTreePort
from egg.application.registries.module_registry import ModuleRegistry
from egg.core.data import Dictionary
from egg.core.dispatcher import Dispatcher
from egg.core.errors import EggError, ErrorSeverity, ModuleRuntimeError

if TYPE_CHECKING:
    from egg.application.directory import RuntimeDirectory

logger = logging.getLogger(__name__)

ERROR_EVENT = "error"

_LOG_LEVELS = {
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class Runtime:
    def __init__(
        self,
        name: str,
        *,
        document: Optional[ElementTreePort] = None,
        directory: Optional["RuntimeDirectory"] = None,
        module_attribute: str = "data-module",
        type_attribute: str = "data-type",
    ):
        self.name = name
        self.document = document
        self.directory = directory
        self.module_attribute = module_attribute
        self.type_attribute = type_attribute

        self.globals = Dictionary()
        self.event = Dispatcher()
        self.module = ModuleRegistry(self)

    def init(self) -> "Runtime":
        """Eagerly start every registered module."""
        self.module.start_all()
        return self

    @property
    def main(self) -> Any:
        return self.module.main

    @property
    def debug(self) -> bool:
        return bool(self.globals.get("debug"))

    def seed(self, values: Dict[str, Any]) -> "Runtime":
        for key, value in values.items():
            self.globals.add(key, value)
        return self

    # ------------------ error path ------------------

    def report_error(
        self,
        exception: BaseException,
        *,
        module: Optional[str] = None,
        method: Optional[str] = None,
    ) -> None:
        """
        Single error policy of the runtime.

        With ``debug`` set in the global store the exception is re-raised to
        the caller. Otherwise it is logged and published as an ``'error'``
        notification carrying ``{"exception", "module", "method", "error"}``,
        where ``error`` is a structured :class:`EggError` diagnostic.
        """
        if self.debug:
            raise exception

        module = module or getattr(exception, "module_name", None)
        method = method or getattr(exception, "method_name", None)

        if isinstance(exception, EggError):
            error: EggError = exception
        else:
            error = ModuleRuntimeError(
                message=str(exception) or type(exception).__name__,
                module_name=module or "",
                method_name=method or "",
                context={"exception_type": type(exception).__name__},
            )
            error.__cause__ = exception

        logger.log(
            _LOG_LEVELS.get(error.severity, logging.ERROR),
            f"runtime {self.name}: {error}",
            exc_info=(type(exception), exception, exception.__traceback__),
        )
        self.event.notify(
            ERROR_EVENT,
            {"exception": exception, "module": module, "method": method, "error": error},
        )

    # ------------------ teardown ------------------

    def reset(self) -> "Runtime":
        """Stop every module and clear the global store; registrations stay."""
        self.module.stop_all()
        self.globals.clear()
        logger.info(f"runtime reset: {self.name}")
        return self

    def destroy(self) -> None:
        """Reset, drop registrations and listeners, and leave the directory."""
        self.module.clear()
        self.globals.clear()
        self.event.clear()
        if self.directory is not None:
            self.directory.forget(self.name, self)
            self.directory = None
        logger.info(f"runtime destroyed: {self.name}")

    def __repr__(self) -> str:
        return f"Runtime(name={self.name!r}, modules={self.module.names()!r})"
