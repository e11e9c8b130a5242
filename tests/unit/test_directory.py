"""
RuntimeDirectory / Runtime 单元测试
"""

import pytest

from egg.application.directory import RuntimeDirectory
from egg.application.runtime import Runtime
from egg.config import RuntimeConfig
from egg.core.errors import DuplicateRuntimeError, MissingNameError, UnknownRuntimeError


class TestRuntimeDirectory:
    def test_create_and_get(self, directory):
        rt = directory.create({"name": "app"})
        assert isinstance(rt, Runtime)
        assert directory.get("app") is rt
        assert directory.has("app")
        assert directory.names() == ["app"]

    def test_create_requires_name(self, directory):
        with pytest.raises(MissingNameError):
            directory.create({"debug": True})

    def test_duplicate_name_fails(self, directory):
        directory.create({"name": "app"})
        with pytest.raises(DuplicateRuntimeError):
            directory.create({"name": "app"})

    def test_get_failures(self, directory):
        with pytest.raises(MissingNameError):
            directory.get("")
        with pytest.raises(UnknownRuntimeError):
            directory.get("nope")

    def test_config_is_seeded_into_globals(self, directory):
        rt = directory.create({"name": "app", "debug": True, "apiKey": "k", "globals": {"theme": "dark"}})
        assert rt.globals.get("name") == "app"
        assert rt.globals.get("debug") is True
        assert rt.globals.get("apiKey") == "k"
        assert rt.globals.get("theme") == "dark"
        assert rt.debug is True

    def test_accepts_dataclass_and_keyword_overrides(self, directory):
        rt = directory.create(RuntimeConfig(name="base"), debug=True)
        assert rt.name == "base"
        assert rt.debug is True

        rt2 = directory.create(name="kw")
        assert directory.get("kw") is rt2

    def test_shared_instance(self):
        assert RuntimeDirectory.instance() is RuntimeDirectory.instance()


class TestRuntimeLifecycle:
    def test_init_starts_every_module_and_returns_self(self, runtime):
        started = []
        runtime.module.add("a", False, lambda ctx: started.append("a") or {})
        runtime.module.add("b", True, lambda ctx: started.append("b") or {})

        assert runtime.init() is runtime
        assert started == ["a", "b"]
        assert runtime.main is not None

    def test_reset_keeps_registrations(self, runtime):
        created = []
        runtime.module.add("a", False, lambda ctx: created.append(1) or {"ping": lambda: "pong"})
        runtime.module.get("a")

        runtime.reset()

        assert runtime.module.is_registered("a")
        assert not runtime.module.is_started("a")
        assert runtime.globals.count() == 0
        assert runtime.module.get("a")["ping"]() == "pong"
        assert created == [1, 1]

    def test_destroy_removes_runtime_from_directory(self, directory):
        rt = directory.create({"name": "gone"})
        rt.module.add("a", False, lambda ctx: {})
        rt.event.listen("x", print)

        directory.destroy("gone")

        assert not directory.has("gone")
        assert rt.module.names() == []
        assert not rt.event.has_listeners("x")
        # the name is free again
        assert directory.create({"name": "gone"}) is not rt

    def test_directory_reset_delegates(self, directory):
        rt = directory.create({"name": "app", "x": 1})
        assert directory.reset("app") is rt
        assert rt.globals.has("x") is False
