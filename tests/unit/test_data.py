import pytest

from egg.core.data import Dictionary, GlobalsView
from egg.core.errors import MissingNameError, UnknownNameError


class TestDictionary:
    def test_add_get_has(self):
        d = Dictionary.create()
        d.add("debug", True)
        assert d.get("debug") is True
        assert d.has("debug") is True
        assert d.has("other") is False

    def test_get_absent_returns_default(self):
        d = Dictionary()
        assert d.get("missing") is None
        assert d.get("missing", 3) == 3

    @pytest.mark.parametrize("key", [None, "", 0])
    def test_get_falsy_key_fails(self, key):
        with pytest.raises(MissingNameError):
            Dictionary().get(key)

    def test_require_absent_fails(self):
        with pytest.raises(UnknownNameError):
            Dictionary().require("nope")

    def test_update_remove_count_list_clear(self):
        d = Dictionary()
        d.add("a", 1)
        d.add(2, "two")
        d.update("a", 10)
        assert d.count() == 2
        assert d.list() == [10, "two"]
        d.remove("a")
        d.remove("not-there")
        assert d.keys() == [2]
        d.clear()
        assert d.count() == 0


class TestGlobalsView:
    def test_view_reads_through_and_has_no_writers(self):
        store = Dictionary()
        view = GlobalsView(store)
        store.add("apiKey", "k")
        assert view.get("apiKey") == "k"
        assert view.has("apiKey")
        assert not hasattr(view, "add")
        assert not hasattr(view, "clear")
