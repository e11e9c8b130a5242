"""
ModuleRegistry 单元测试
"""

import pytest

from egg.application.guard import guard_instance
from egg.application.registries.module_registry import module_selector
from egg.core.errors import (
    ConfigurationError,
    CyclicModuleDependency,
    DuplicateModuleError,
    MissingNameError,
    UnknownModuleError,
)


class Greeter:
    def __init__(self, context):
        self.context = context
        self.destroyed = False

    def hello(self, who):
        return f"hello {who}"

    def destroy(self):
        self.destroyed = True


class TestRegistration:
    def test_add_is_chainable_and_lazy(self, runtime):
        created = []
        result = runtime.module.add("a", False, lambda ctx: created.append(ctx) or {})
        assert result is runtime.module
        assert runtime.module.is_registered("a")
        assert not runtime.module.is_started("a")
        assert created == []

    def test_duplicate_add_reports_and_keeps_first(self, runtime, errors):
        runtime.module.add("a", False, lambda ctx: {"which": lambda: "first"})
        runtime.module.add("a", False, lambda ctx: {"which": lambda: "second"})

        assert len(errors) == 1
        assert isinstance(errors[0]["exception"], DuplicateModuleError)
        assert runtime.module.get("a")["which"]() == "first"

    def test_duplicate_add_raises_in_debug(self, debug_runtime):
        debug_runtime.module.add("a", False, lambda ctx: {})
        with pytest.raises(DuplicateModuleError):
            debug_runtime.module.add("a", False, lambda ctx: {})

    def test_missing_name_and_bad_factory(self, runtime, errors):
        runtime.module.add("", False, lambda ctx: {})
        runtime.module.add("b", False, "not callable")

        assert isinstance(errors[0]["exception"], MissingNameError)
        assert isinstance(errors[1]["exception"], ConfigurationError)
        assert runtime.module.names() == []


class TestLazyStart:
    def test_get_starts_once_and_keeps_identity(self, runtime):
        calls = []
        runtime.module.add("greeter", False, lambda ctx: calls.append(ctx) or Greeter(ctx))

        first = runtime.module.get("greeter")
        second = runtime.module.get("greeter")

        assert first is second
        assert len(calls) == 1
        assert first.hello("bob") == "hello bob"

    def test_start_is_noop_for_started_module(self, runtime):
        calls = []
        runtime.module.add("a", False, lambda ctx: calls.append(1) or {})
        runtime.module.start("a").start("a")
        runtime.module.get("a")
        assert calls == [1]

    def test_modules_added_after_init_wait_for_next_init(self, runtime):
        runtime.module.add("early", False, lambda ctx: {})
        runtime.init()

        runtime.module.add("late", False, lambda ctx: {})

        assert runtime.module.is_started("early")
        assert not runtime.module.is_started("late")
        runtime.init()
        assert runtime.module.is_started("late")

    def test_get_unknown_reports(self, runtime, errors):
        assert runtime.module.get("nope") is None
        assert isinstance(errors[0]["exception"], UnknownModuleError)

    def test_get_unknown_raises_in_debug(self, debug_runtime):
        with pytest.raises(UnknownModuleError):
            debug_runtime.module.get("nope")

    def test_factory_receives_context(self, runtime):
        runtime.module.add("greeter", False, Greeter)
        instance = runtime.module.get("greeter")
        assert instance.context.name == "greeter"
        assert instance.context.element is None

    def test_factory_failure_reports_and_leaves_module_unstarted(self, runtime, errors):
        def broken(ctx):
            raise KeyError("config")

        runtime.module.add("broken", False, broken)

        assert runtime.module.get("broken") is None
        assert not runtime.module.is_started("broken")
        assert errors[0]["module"] == "broken"
        assert isinstance(errors[0]["exception"], KeyError)

    def test_main_module(self, runtime):
        runtime.module.add("helper", False, lambda ctx: {})
        runtime.module.add("app", True, Greeter)
        assert runtime.main is None

        runtime.init()

        assert runtime.main.hello("x") == "hello x"
        runtime.module.stop("app")
        assert runtime.main is None


class TestErrorContainment:
    def test_production_method_failure_returns_none_and_notifies(self, runtime, errors):
        class Counter:
            def increment(self):
                raise ValueError("overflow")

        runtime.module.add("counter", False, lambda ctx: Counter())

        assert runtime.module.get("counter").increment() is None
        assert len(errors) == 1
        payload = errors[0]
        assert isinstance(payload["exception"], ValueError)
        assert payload["module"] == "counter"
        assert payload["method"] == "increment"
        assert payload["error"].code == "MODULE_RUNTIME_ERROR"

    def test_debug_method_failure_surfaces_unchanged(self, debug_runtime):
        boom = ValueError("overflow")

        def fail():
            raise boom

        debug_runtime.module.add("counter", False, lambda ctx: {"increment": fail})
        counter = debug_runtime.module.get("counter")

        with pytest.raises(ValueError) as info:
            counter["increment"]()
        assert info.value is boom

    def test_guarded_instance_passes_attributes_through(self, runtime):
        class Stateful:
            label = "x"

            @property
            def size(self):
                return 3

            def rename(self, value):
                self.label = value

        runtime.module.add("s", False, lambda ctx: Stateful())
        s = runtime.module.get("s")
        s.rename("y")
        assert isinstance(s, Stateful)
        assert s.label == "y"
        assert s.size == 3

    @pytest.mark.parametrize("debug", [False, True])
    def test_mapping_module_keeps_its_shape(self, directory, debug):
        rt = directory.create({"name": f"shape-{debug}", "debug": debug})
        calls = []
        rt.module.add("counter", False, lambda ctx: {"increment": lambda: calls.append(1) or len(calls), "step": 1})

        counter = rt.module.get("counter")

        assert isinstance(counter, dict)
        assert counter["increment"]() == 1
        assert counter["step"] == 1
        assert "increment" in counter

    @pytest.mark.parametrize("debug", [False, True])
    def test_object_module_keeps_its_type(self, directory, debug):
        rt = directory.create({"name": f"type-{debug}", "debug": debug})
        rt.module.add("greeter", False, Greeter)

        greeter = rt.module.get("greeter")

        assert type(greeter) is Greeter
        assert greeter.hello("ann") == "hello ann"

    def test_same_call_raises_in_debug_and_returns_in_production(self, runtime, debug_runtime, errors):
        def overflow():
            raise ValueError("overflow")

        for rt in (runtime, debug_runtime):
            rt.module.add("counter", False, lambda ctx: {"increment": overflow})

        assert runtime.module.get("counter")["increment"]() is None
        assert len(errors) == 1
        with pytest.raises(ValueError, match="overflow"):
            debug_runtime.module.get("counter")["increment"]()


class TestGuardInstance:
    def test_descriptors_are_not_evaluated_at_start(self):
        from functools import cached_property

        evaluated = []

        class Lazy:
            @cached_property
            def expensive(self):
                evaluated.append(1)
                return "value"

            def run(self):
                return "ran"

        lazy = guard_instance(Lazy(), "lazy", lambda exc: None)

        assert evaluated == []
        assert lazy.run() == "ran"
        assert lazy.expensive == "value"

    def test_static_and_class_methods_are_guarded(self):
        failures = []

        class Tools:
            @staticmethod
            def parse(value):
                return int(value)

            @classmethod
            def kind(cls):
                return cls.__name__

        tools = guard_instance(Tools(), "tools", failures.append)

        assert tools.parse("x") is None
        assert tools.kind() == "Tools"
        assert failures[0].method_name == "parse"

    def test_guarding_twice_does_not_double_report(self):
        failures = []

        class Once:
            def fail(self):
                raise RuntimeError("once")

        instance = guard_instance(Once(), "once", failures.append)
        guard_instance(instance, "once", failures.append)

        instance.fail()

        assert len(failures) == 1

    def test_slotted_instance_is_returned_unguarded(self):
        class Slotted:
            __slots__ = ()

            def ping(self):
                return "pong"

        instance = Slotted()
        assert guard_instance(instance, "slotted", lambda exc: None) is instance


class TestCycles:
    def test_cycle_is_reported_not_recursed(self, runtime, errors):
        seen = {}

        def make_a(ctx):
            seen["b_from_a"] = ctx.module.get("b")
            return {"name": "a"}

        def make_b(ctx):
            seen["a_from_b"] = ctx.module.get("a")
            return {"name": "b"}

        runtime.module.add("a", False, make_a)
        runtime.module.add("b", False, make_b)

        a = runtime.module.get("a")

        assert a is not None
        assert seen["a_from_b"] is None
        cyclic = [p for p in errors if isinstance(p["exception"], CyclicModuleDependency)]
        assert len(cyclic) == 1
        assert cyclic[0]["exception"].chain == ("a", "b", "a")

    def test_cycle_raises_in_debug(self, debug_runtime):
        debug_runtime.module.add("a", False, lambda ctx: ctx.module.get("b"))
        debug_runtime.module.add("b", False, lambda ctx: ctx.module.get("a"))

        with pytest.raises(CyclicModuleDependency):
            debug_runtime.module.get("a")
        assert debug_runtime.module.started() == []


class TestStop:
    def test_stop_calls_destroy_and_releases_listeners(self, runtime):
        def make(ctx):
            ctx.event.listen("ping", print)
            return Greeter(ctx)

        runtime.module.add("greeter", False, make)
        instance = runtime.module.get("greeter")
        assert runtime.event.listener_count(("greeter", "ping")) == 1

        runtime.module.stop("greeter")

        assert instance.destroyed is True
        assert runtime.event.listener_count(("greeter", "ping")) == 0
        assert not runtime.module.is_started("greeter")

    def test_failing_destroy_still_evicts_in_debug(self, directory, debug_runtime):
        class Fragile:
            def __init__(self, ctx):
                ctx.event.listen("ping", print)

            def destroy(self):
                raise RuntimeError("teardown failed")

        debug_runtime.module.add("m", False, Fragile)
        debug_runtime.module.get("m")

        with pytest.raises(RuntimeError, match="teardown failed"):
            debug_runtime.module.stop("m")

        assert not debug_runtime.module.is_started("m")
        assert debug_runtime.event.listener_count(("m", "ping")) == 0
        debug_runtime.module.stop_all()
        directory.destroy("dev")
        assert not directory.has("dev")

    def test_failing_destroy_is_contained_in_production(self, runtime, errors):
        runtime.module.add("m", False, lambda ctx: {"destroy": lambda: 1 / 0})
        runtime.module.get("m")

        runtime.module.stop("m")

        assert not runtime.module.is_started("m")
        assert errors[0]["method"] == "destroy"

    def test_restart_creates_fresh_instance(self, runtime):
        runtime.module.add("greeter", False, Greeter)
        first = runtime.module.get("greeter")
        runtime.module.stop("greeter")
        assert runtime.module.get("greeter") is not first

    def test_stop_all_runs_in_reverse_start_order(self, runtime):
        stopped = []
        for name in ("one", "two", "three"):
            runtime.module.add(name, False, lambda ctx, n=name: {"destroy": lambda: stopped.append(n)})
        runtime.init()

        runtime.module.stop_all()

        assert stopped == ["three", "two", "one"]

    def test_stop_unknown_is_noop(self, runtime):
        assert runtime.module.stop("nope") is runtime.module


def test_module_selector_escapes_quotes():
    assert module_selector("data-module", 'a"b') == '[data-module~="a\\"b"]'
