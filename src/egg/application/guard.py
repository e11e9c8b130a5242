"""
Error containment for module instances.

At start time the public methods of a module instance are enumerated once
and each one is wrapped so that an exception is annotated with the module
and method name and handed to the module's error path instead of escaping.

The guarded instance keeps the type the factory returned: wrapped methods
are set on the object itself, and a mapping comes back as a dict with its
callables wrapped.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict

from egg.core.errors import annotate_module_error

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[BaseException], None]

_GUARD_MARKER = "__egg_guarded__"


def _guard(module_name: str, method_name: str, method: Callable[..., Any], on_error: ErrorCallback):
    @functools.wraps(method)
    def guarded(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except Exception as exc:
            annotate_module_error(exc, module_name, method_name)
            on_error(exc)
            return None

    setattr(guarded, _GUARD_MARKER, module_name)
    return guarded


def _is_method_like(value: Any) -> bool:
    if isinstance(value, (staticmethod, classmethod)):
        return True
    # properties, cached properties and data descriptors are state
    return callable(value) and not inspect.isclass(value)


def _public_methods(instance: Any) -> Dict[str, Callable[..., Any]]:
    methods: Dict[str, Callable[..., Any]] = {}
    for attr in dir(instance):
        if attr.startswith("_"):
            continue
        # inspect without triggering descriptors; only bind what is callable
        static = inspect.getattr_static(instance, attr, None)
        if not _is_method_like(static) or hasattr(static, _GUARD_MARKER):
            continue
        methods[attr] = getattr(instance, attr)
    return methods


def _guard_mapping(instance: Mapping, module_name: str, on_error: ErrorCallback) -> Dict[Any, Any]:
    guarded: Dict[Any, Any] = {}
    for key, value in instance.items():
        if isinstance(key, str) and not key.startswith("_") and callable(value) and not hasattr(value, _GUARD_MARKER):
            value = _guard(module_name, key, value, on_error)
        guarded[key] = value
    return guarded


def guard_instance(instance: Any, module_name: str, on_error: ErrorCallback) -> Any:
    """Wrap every public method of ``instance``; see module docstring."""
    if isinstance(instance, Mapping):
        return _guard_mapping(instance, module_name, on_error)

    for name, method in _public_methods(instance).items():
        try:
            setattr(instance, name, _guard(module_name, name, method, on_error))
        except (AttributeError, TypeError) as e:
            # __slots__ / frozen instances cannot take instance attributes
            logger.warning(f"module {module_name}: cannot guard method {name}: {e}")
    return instance
