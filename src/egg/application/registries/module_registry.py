from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from egg.application.context import SandboxedContext
from egg.application.delegate import InteractionDelegate
from egg.application.guard import guard_instance
from egg.core.errors import (
    ConfigurationError,
    CyclicModuleDependency,
    DuplicateModuleError,
    MissingNameError,
    UnknownModuleError,
)

if TYPE_CHECKING:
    from egg.application.runtime import Runtime

logger = logging.getLogger(__name__)

ModuleFactory = Callable[[SandboxedContext], Any]


@dataclass(frozen=True)
class ModuleRegistration:
    name: str
    factory: ModuleFactory
    main: bool = False


@dataclass
class ModuleInstanceRecord:
    name: str
    instance: Any
    context: SandboxedContext
    element: Optional[Any] = None
    delegates: List[InteractionDelegate] = field(default_factory=list)


def module_selector(attribute: str, name: str) -> str:
    """CSS selector for elements whose ``attribute`` word-list contains ``name``."""
    value = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'[{attribute}~="{value}"]'


class ModuleRegistry:
    """
    Per-runtime module registry.

    Each name moves ``registered -> started -> (stopped ->) started``.
    Factories run lazily on first :meth:`get`/:meth:`start`; at most one live
    instance exists per name. Failures are reported through the runtime's
    error path (raise in debug, ``'error'`` notification otherwise).
    """

    def __init__(self, runtime: "Runtime") -> None:
        self._runtime = runtime
        self._registrations: Dict[str, ModuleRegistration] = {}
        self._instances: Dict[str, ModuleInstanceRecord] = {}
        self._starting: List[str] = []
        self._main_name: Optional[str] = None

    # ------------------ registration ------------------

    def add(self, name: str, main: bool, factory: ModuleFactory) -> "ModuleRegistry":
        if not name:
            self._runtime.report_error(MissingNameError(message="Module name is required."))
            return self
        if name in self._registrations:
            self._runtime.report_error(
                DuplicateModuleError(message=f"Module {name} has already been added.", context={"module": name})
            )
            return self
        if not callable(factory):
            self._runtime.report_error(
                ConfigurationError(message=f"Module {name} factory is not callable.", context={"module": name})
            )
            return self

        self._registrations[name] = ModuleRegistration(name=name, factory=factory, main=bool(main))
        logger.debug(f"module registered: {self._runtime.name}/{name} (main={bool(main)})")
        return self

    def get(self, name: str) -> Any:
        if name not in self._registrations:
            self._runtime.report_error(
                UnknownModuleError(message=f"Module {name} has not been added.", context={"module": name})
            )
            return None

        if name not in self._instances:
            self.start(name)

        record = self._instances.get(name)
        return record.instance if record else None

    # ------------------ lifecycle ------------------

    def start(self, name: str) -> "ModuleRegistry":
        registration = self._registrations.get(name)
        if registration is None or name in self._instances:
            return self

        if name in self._starting:
            chain = tuple(self._starting) + (name,)
            self._runtime.report_error(
                CyclicModuleDependency(
                    message="Cyclic module dependency: " + " -> ".join(chain),
                    chain=chain,
                    context={"module": name},
                )
            )
            return self

        self._starting.append(name)
        try:
            self._create(registration)
        finally:
            self._starting.remove(name)
        return self

    def _resolve_element(self, name: str) -> Optional[Any]:
        document = self._runtime.document
        if document is None:
            return None
        return document.query(module_selector(self._runtime.module_attribute, name))

    def _create(self, registration: ModuleRegistration) -> None:
        name = registration.name
        element = self._resolve_element(name)
        context = SandboxedContext(self._runtime, element, name)

        try:
            instance = registration.factory(context)
        except Exception as exc:
            context.release()
            if not hasattr(exc, "module_name"):
                exc.module_name = name  # type: ignore[attr-defined]
            context.error(exc)
            return

        if instance is not None and not self._runtime.debug:
            instance = guard_instance(instance, name, context.error)

        record = ModuleInstanceRecord(name=name, instance=instance, context=context, element=element)

        if element is not None and self._runtime.document is not None:
            delegate = InteractionDelegate(
                element,
                self._runtime.event,
                name,
                self._runtime.document,
                module_attribute=self._runtime.module_attribute,
                type_attribute=self._runtime.type_attribute,
                on_error=context.error,
            )
            record.delegates.append(delegate)
            delegate.attach_events()

        self._instances[name] = record

        if registration.main:
            self._main_name = name

        logger.info(
            f"module started: {self._runtime.name}/{name} "
            f"(element={'yes' if element is not None else 'headless'}, main={registration.main})"
        )

    def start_all(self) -> "ModuleRegistry":
        for name in list(self._registrations):
            self.start(name)
        return self

    def stop(self, name: str) -> "ModuleRegistry":
        record = self._instances.get(name)
        if record is None:
            return self

        for delegate in record.delegates:
            delegate.detach_events()
        record.delegates.clear()

        instance = record.instance
        if isinstance(instance, Mapping):
            destroy = instance.get("destroy")
        else:
            destroy = getattr(instance, "destroy", None)
        try:
            if callable(destroy):
                destroy()
        finally:
            record.context.release()
            self._instances.pop(name, None)
            logger.info(f"module stopped: {self._runtime.name}/{name}")
        return self

    def stop_all(self) -> "ModuleRegistry":
        # reverse start order: dependants stop before what they depend on
        for name in reversed(list(self._instances)):
            self.stop(name)
        return self

    def clear(self) -> None:
        """Stop everything and forget all registrations."""
        self.stop_all()
        self._registrations.clear()
        self._main_name = None

    # ------------------ queries ------------------

    @property
    def main(self) -> Any:
        if self._main_name is None:
            return None
        record = self._instances.get(self._main_name)
        return record.instance if record else None

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def is_started(self, name: str) -> bool:
        return name in self._instances

    def registration(self, name: str) -> Optional[ModuleRegistration]:
        return self._registrations.get(name)

    def record(self, name: str) -> Optional[ModuleInstanceRecord]:
        return self._instances.get(name)

    def names(self) -> List[str]:
        return list(self._registrations)

    def started(self) -> List[str]:
        return list(self._instances)
