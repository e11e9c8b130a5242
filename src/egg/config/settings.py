# src/egg/config/settings.py

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ModuleSpec:
    """模块声明"""
    name: str
    factory: str
    main: bool = False


@dataclass
class LoggingConfig:
    """日志配置"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class RuntimeConfig:
    """
    Runtime configuration.

    ``name`` identifies the runtime in its directory. ``name``, ``debug`` and
    every entry of ``globals`` are seeded into the runtime's global store;
    ``modules`` is consumed by the config-driven loader only.
    """
    name: str = ""
    debug: bool = False
    module_attribute: str = "data-module"
    type_attribute: str = "data-type"
    globals: Dict[str, Any] = field(default_factory=dict)
    modules: List[ModuleSpec] = field(default_factory=list)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def seeds(self) -> Dict[str, Any]:
        values: Dict[str, Any] = dict(self.globals)
        values["name"] = self.name
        values["debug"] = self.debug
        return values
