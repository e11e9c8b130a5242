"""
Process-wide directory of named runtimes.

``RuntimeDirectory.instance()`` is the shared default; tests and embedders
can build their own directory and pass it around explicitly.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from egg.application.ports import ElementTreePort
from egg.application.runtime import Runtime
from egg.config.settings import RuntimeConfig
from egg.config.validated_settings import coerce_runtime_config
from egg.core.data import Dictionary
from egg.core.errors import DuplicateRuntimeError, MissingNameError, UnknownRuntimeError

logger = logging.getLogger(__name__)


class RuntimeDirectory:
    _instance: "RuntimeDirectory" | None = None

    def __init__(self) -> None:
        self._runtimes = Dictionary()

    @classmethod
    def instance(cls) -> "RuntimeDirectory":
        if cls._instance is None:
            cls._instance = RuntimeDirectory()
        return cls._instance

    def create(
        self,
        config: Union[RuntimeConfig, Mapping[str, Any], None] = None,
        *,
        document: Optional[ElementTreePort] = None,
        **overrides: Any,
    ) -> Runtime:
        """Build, seed and register a runtime. ``name`` is required and unique."""
        cfg = coerce_runtime_config(config, **overrides)

        if not cfg.name:
            raise MissingNameError(message="Runtime name is required.")
        if self._runtimes.has(cfg.name):
            raise DuplicateRuntimeError(
                message=f"Runtime {cfg.name} already exists.", context={"runtime": cfg.name}
            )

        runtime = Runtime(
            cfg.name,
            document=document,
            directory=self,
            module_attribute=cfg.module_attribute,
            type_attribute=cfg.type_attribute,
        )
        runtime.seed(cfg.seeds())
        self._runtimes.add(cfg.name, runtime)
        logger.info(f"runtime created: {cfg.name} (debug={cfg.debug})")
        return runtime

    def get(self, name: str) -> Runtime:
        if not name:
            raise MissingNameError(message="Runtime name is not defined.")
        runtime = self._runtimes.get(name)
        if runtime is None:
            raise UnknownRuntimeError(message=f"Runtime {name} has not been added.", context={"runtime": name})
        return runtime

    def has(self, name: str) -> bool:
        return self._runtimes.has(name)

    def names(self) -> List[str]:
        return self._runtimes.keys()

    def reset(self, name: str) -> Runtime:
        return self.get(name).reset()

    def destroy(self, name: str) -> None:
        self.get(name).destroy()

    def forget(self, name: str, runtime: Optional[Runtime] = None) -> None:
        """Drop ``name`` from the directory (only if it still maps to ``runtime``)."""
        if runtime is not None and self._runtimes.get(name) is not runtime:
            return
        self._runtimes.remove(name)

    def clear(self) -> None:
        """Destroy every runtime in the directory."""
        for runtime in self._runtimes.list():
            runtime.destroy()
        self._runtimes.clear()
