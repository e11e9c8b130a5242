from .settings import LoggingConfig, ModuleSpec, RuntimeConfig
from .validated_settings import (
    RuntimeSettingsModel,
    coerce_runtime_config,
    load_runtime_config,
    runtime_config_from_mapping,
)

__all__ = [
    "LoggingConfig",
    "ModuleSpec",
    "RuntimeConfig",
    "RuntimeSettingsModel",
    "coerce_runtime_config",
    "load_runtime_config",
    "runtime_config_from_mapping",
]
