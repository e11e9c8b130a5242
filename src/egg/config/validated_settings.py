"""
基于 pydantic 的配置校验与对象化加载。

Raw mappings (from ``create(...)`` calls or YAML files) are validated by
``RuntimeSettingsModel`` and converted into the ``RuntimeConfig`` dataclass.
Unknown top-level keys are kept and become global-store seeds.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from egg.core.errors import ConfigurationError

from .settings import LoggingConfig, ModuleSpec, RuntimeConfig


class ModuleSpecModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    factory: str
    main: bool = False


class LoggingConfigModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RuntimeSettingsModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""
    debug: bool = False
    module_attribute: str = "data-module"
    type_attribute: str = "data-type"
    globals: Dict[str, Any] = Field(default_factory=dict)
    modules: List[ModuleSpecModel] = Field(default_factory=list)
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)

    def to_dataclass(self) -> RuntimeConfig:
        seeds = dict(self.globals)
        seeds.update(self.model_extra or {})
        return RuntimeConfig(
            name=self.name,
            debug=self.debug,
            module_attribute=self.module_attribute,
            type_attribute=self.type_attribute,
            globals=seeds,
            modules=[ModuleSpec(**m.model_dump()) for m in self.modules],
            logging=LoggingConfig(**self.logging.model_dump()),
        )


def runtime_config_from_mapping(data: Mapping[str, Any]) -> RuntimeConfig:
    try:
        model = RuntimeSettingsModel.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigurationError(message=f"Invalid runtime configuration: {exc}") from exc
    return model.to_dataclass()


def coerce_runtime_config(config: Union[RuntimeConfig, Mapping[str, Any], None], **overrides: Any) -> RuntimeConfig:
    """Accept a ``RuntimeConfig``, a mapping, keyword arguments, or a mix."""
    if isinstance(config, RuntimeConfig):
        if not overrides:
            return config
        data: Dict[str, Any] = {
            "name": config.name,
            "debug": config.debug,
            "module_attribute": config.module_attribute,
            "type_attribute": config.type_attribute,
            "globals": dict(config.globals),
            "modules": [vars(m) for m in config.modules],
            "logging": vars(config.logging),
        }
    else:
        data = dict(config or {})
    data.update(overrides)
    return runtime_config_from_mapping(data)


def load_runtime_config(config_path: Optional[str] = None) -> RuntimeConfig:
    """使用 pydantic 校验后返回 RuntimeConfig dataclass。"""
    cfg_file = Path(config_path) if config_path else Path.cwd() / "runtime.yaml"
    if not cfg_file.exists():
        raise ConfigurationError(message=f"Config file not found: {cfg_file}")
    try:
        data = yaml.safe_load(cfg_file.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(message=f"Config file is not valid YAML: {cfg_file}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(message=f"Config file must hold a mapping: {cfg_file}")
    return runtime_config_from_mapping(data)
