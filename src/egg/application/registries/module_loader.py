"""
Config-driven module registration.

A module spec names its factory by import path, ``"package.module:attr"``
(``attr`` may be dotted), so a runtime can be wired from YAML.
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable

from egg.config.settings import ModuleSpec
from egg.core.errors import ConfigurationError

if TYPE_CHECKING:
    from egg.application.runtime import Runtime

logger = logging.getLogger(__name__)


def resolve_factory(path: str) -> Callable[..., Any]:
    module_path, sep, attr_path = path.partition(":")
    if not sep or not module_path or not attr_path:
        raise ConfigurationError(message=f"Factory path must look like 'package.module:attr', got {path!r}")

    try:
        target: Any = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(message=f"Cannot import {module_path!r}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ConfigurationError(message=f"{module_path!r} has no attribute {attr_path!r}") from exc

    if not callable(target):
        raise ConfigurationError(message=f"Factory {path!r} is not callable")
    return target


def load_modules(runtime: "Runtime", specs: Iterable[ModuleSpec]) -> "Runtime":
    """Register every spec on ``runtime`` in order."""
    for spec in specs:
        factory = resolve_factory(spec.factory)
        runtime.module.add(spec.name, spec.main, factory)
        logger.debug(f"module loaded from config: {spec.name} <- {spec.factory}")
    return runtime
