"""
Tests for Symbols — process-wide cached symbol list

The list is computed once, shared by every caller, and never refreshed.
"""

import threading
from unittest.mock import patch

from symbolpicker import all_symbols as exported_all_symbols
from symbolpicker.core.loader import LoadResult
from symbolpicker.symbols import Symbols, all_symbols, get_symbols, reset_symbols


def _result(*names):
    return LoadResult(tuple(names), "fallback", "sfsymbol5")


class TestCaching:
    """One load per process."""

    def test_repeated_access_is_stable(self, monkeypatch):
        monkeypatch.setenv("SYMBOLPICKER_CATALOG", "none")

        first = get_symbols()
        second = get_symbols()

        assert first is second
        assert all_symbols() == first.all_symbols

    def test_loads_once(self):
        with patch("symbolpicker.symbols.SymbolLoader") as loader_cls:
            loader_cls.return_value.load.return_value = _result("star", "heart")

            for _ in range(5):
                get_symbols()

        assert loader_cls.return_value.load.call_count == 1

    def test_value_survives_source_changes(self):
        """Later changes to the sources are not picked up."""
        with patch("symbolpicker.symbols.SymbolLoader") as loader_cls:
            loader_cls.return_value.load.return_value = _result("star")
            before = all_symbols()
            loader_cls.return_value.load.return_value = _result("heart")
            after = all_symbols()

        assert before == after == ("star",)

    def test_concurrent_first_access(self):
        """Threads racing on first access share one load."""
        barrier = threading.Barrier(8)
        seen = []

        with patch("symbolpicker.symbols.SymbolLoader") as loader_cls:
            loader_cls.return_value.load.return_value = _result("star")

            def worker():
                barrier.wait()
                seen.append(get_symbols())

            threads = [threading.Thread(target=worker) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        assert loader_cls.return_value.load.call_count == 1
        assert all(s is seen[0] for s in seen)

    def test_reset_forces_reload(self):
        with patch("symbolpicker.symbols.SymbolLoader") as loader_cls:
            loader_cls.return_value.load.return_value = _result("star")
            get_symbols()
            reset_symbols()
            get_symbols()

        assert loader_cls.return_value.load.call_count == 2


class TestSymbolsValue:
    """The cached value type."""

    def test_immutable_sequence(self):
        with patch("symbolpicker.symbols.SymbolLoader") as loader_cls:
            loader_cls.return_value.load.return_value = _result("star", "heart")
            symbols = get_symbols()

        assert isinstance(symbols.all_symbols, tuple)
        assert symbols.source == "fallback"
        assert symbols.resource == "sfsymbol5"
        assert len(symbols) == 2
        assert "star" in symbols

    def test_empty_value(self):
        symbols = Symbols(all_symbols=(), source="empty")
        assert len(symbols) == 0
        assert "star" not in symbols

    def test_package_export(self, monkeypatch):
        monkeypatch.setenv("SYMBOLPICKER_CATALOG", "none")
        assert exported_all_symbols() == all_symbols()
        assert len(exported_all_symbols()) > 0
