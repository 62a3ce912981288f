"""
Shared pytest fixtures for the symbolpicker test suite.

Every test runs isolated from the host: no user/project config files,
no SYMBOLPICKER_* environment, no real CoreGlyphs bundle, and a fresh
process-wide symbol cache.

Usage in tests:
    def test_something(bundle_factory):
        bundle = bundle_factory.create_bundle()
        bundle_factory.add_ordered(bundle, ["star"])
"""

import pytest

from symbolpicker.config import ConfigManager
from symbolpicker.core.platform import PlatformInfo
from symbolpicker.symbols import reset_symbols
from tests.factories import BundleFactory


ENV_VARS = (
    "SYMBOLPICKER_CATALOG",
    "SYMBOLPICKER_BUNDLE_PATH",
    "SYMBOLPICKER_PLATFORM",
    "SYMBOLPICKER_OS_VERSION",
    "SYMBOLPICKER_STRICT",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep host configuration and the system bundle out of tests."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.setattr(ConfigManager, "USER_CONFIG_FILE", tmp_path / "home" / "config.yaml")
    monkeypatch.setattr("symbolpicker.core.catalog.DEFAULT_BUNDLE_PATHS", [])
    monkeypatch.setattr("symbolpicker.core.loader.DEFAULT_BUNDLE_PATHS", [])
    monkeypatch.chdir(tmp_path)

    reset_symbols()
    yield
    reset_symbols()


@pytest.fixture
def bundle_factory(tmp_path):
    """
    Create an empty BundleFactory.

    Example:
        def test_catalog(bundle_factory):
            bundle = bundle_factory.create_bundle(layout="flat")
            bundle_factory.add_availability(bundle, ["star"])
    """
    return BundleFactory(tmp_path / "fixtures")


@pytest.fixture
def macos_sonoma():
    return PlatformInfo("macos", (14, 2))


@pytest.fixture
def ios_15():
    return PlatformInfo("ios", (15, 7))
